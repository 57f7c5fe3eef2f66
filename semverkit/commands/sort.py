"""Sort command implementation for semverkit.

Orders versions by semver precedence. Build metadata does not affect the
order, and versions of equal precedence keep their input order::

    $ semverkit sort 1.0.0 1.0.0-rc.1 1.0.0-alpha
    1.0.0-alpha
    1.0.0-rc.1
    1.0.0

    $ semverkit descend 1.0.0 2.0.0
    2.0.0
    1.0.0
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import click

from semverkit.context import SemverkitContext, pass_context
from semverkit.core.precedence import precedence_key
from semverkit.commands.common import emit, parse_or_exit, version_arguments
from semverkit.models import SemanticVersion
from semverkit.utils import get_logger

logger = get_logger("commands.sort")


def sort_versions(
    versions: Sequence[SemanticVersion],
    *,
    descending: bool = False,
    unique: bool = False,
) -> List[SemanticVersion]:
    """Return ``versions`` ordered by precedence.

    Args:
        versions: Versions to order.
        descending: Highest precedence first.
        unique: Keep only the first of each group of equal versions.
    """
    if unique:
        seen = set()
        kept = []
        for version in versions:
            if version not in seen:
                seen.add(version)
                kept.append(version)
        versions = kept

    # sorted() is stable in both directions
    return sorted(versions, key=precedence_key, reverse=descending)


def _run(
    ctx: SemverkitContext,
    versions: Tuple[str, ...],
    output_format: Optional[str],
    unique: Optional[bool],
    *,
    descending: bool,
) -> None:
    parsed = parse_or_exit(versions)
    if unique is None:
        unique = ctx.config.unique

    ordered = sort_versions(parsed, descending=descending, unique=unique)
    logger.info(
        "Sorted %d version(s) %s",
        len(ordered),
        "descending" if descending else "ascending",
    )

    emit(
        ctx.resolve_format(output_format),
        ordered,
        json_data=[v.to_json() for v in ordered],
    )


_unique_option = click.option(
    "--unique/--no-unique",
    default=None,
    help="Drop versions equal in precedence to an earlier one.",
)


@click.command()
@version_arguments
@_unique_option
@pass_context
def sort(
    ctx: SemverkitContext,
    versions: Tuple[str, ...],
    output_format: Optional[str],
    unique: Optional[bool],
) -> None:
    """Print VERSIONS in ascending precedence order."""
    _run(ctx, versions, output_format, unique, descending=False)


@click.command()
@version_arguments
@_unique_option
@pass_context
def descend(
    ctx: SemverkitContext,
    versions: Tuple[str, ...],
    output_format: Optional[str],
    unique: Optional[bool],
) -> None:
    """Print VERSIONS in descending precedence order."""
    _run(ctx, versions, output_format, unique, descending=True)
