"""Validate command implementation for semverkit.

Checks that every given version string is a valid semantic version::

    $ semverkit validate 1.0.0 2.0.0-rc.1+build.5
    valid

    $ semverkit validate 1.0 2.0.0
    invalid
"""

from __future__ import annotations

from typing import Optional, Tuple

import click

from semverkit.context import SemverkitContext, pass_context
from semverkit.commands.common import emit, parse_or_exit, version_arguments
from semverkit.utils import get_logger

logger = get_logger("commands.validate")

VALID_MARKER = "valid"


@click.command()
@version_arguments
@pass_context
def validate(
    ctx: SemverkitContext,
    versions: Tuple[str, ...],
    output_format: Optional[str],
) -> None:
    """Check that every VERSION is a valid semantic version.

    Prints ``valid`` and exits 0 if all versions parse; otherwise prints
    ``invalid`` and exits 1.
    """
    parsed = parse_or_exit(versions)
    logger.info("All %d version(s) are valid", len(parsed))

    emit(
        ctx.resolve_format(output_format),
        [VALID_MARKER],
        json_data={"valid": True, "versions": [str(v) for v in parsed]},
    )
