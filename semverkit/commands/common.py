"""Shared building blocks for semverkit subcommands.

Every subcommand takes one or more version strings, parses them as a
batch, and prints its result either as plain lines or as a single JSON
document. A batch with any invalid version prints ``invalid`` and exits
with status 1.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

import click

from semverkit.core.parser import parse_versions
from semverkit.exceptions import ValidationError
from semverkit.models import SemanticVersion
from semverkit.constants import OUTPUT_FORMATS
from semverkit.utils import get_logger, print_error, print_json, print_line, print_lines

logger = get_logger("commands")

F = TypeVar("F", bound=Callable[..., Any])

#: Printed on stdout when a batch fails to parse.
INVALID_MARKER = "invalid"


def version_arguments(func: F) -> F:
    """Attach the shared ``VERSIONS...`` argument and ``--format`` option."""
    func = click.option(
        "--format",
        "-f",
        "output_format",
        type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
        default=None,
        help="Output format (default from configuration, else plain).",
    )(func)
    func = click.argument("versions", nargs=-1, required=True)(func)
    return func


def parse_or_exit(versions: Sequence[str]) -> List[SemanticVersion]:
    """Parse the batch, or print ``invalid`` and exit with status 1."""
    try:
        return parse_versions(versions)
    except ValidationError as exc:
        logger.debug("Rejected version batch: %r", list(versions), exc_info=True)
        print_line(INVALID_MARKER)
        print_error(str(exc))
        raise click.exceptions.Exit(1) from exc


def emit(
    output_format: str,
    lines: Iterable[Any],
    json_data: Optional[Any] = None,
) -> None:
    """Print a command result as plain lines or as JSON.

    Args:
        output_format: ``plain`` or ``json``.
        lines: Values printed one per line in plain mode.
        json_data: Document printed in JSON mode; defaults to ``lines``
            as a list.
    """
    if output_format == "json":
        print_json(list(lines) if json_data is None else json_data)
    else:
        print_lines(lines)
