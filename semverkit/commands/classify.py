"""Classification commands for semverkit.

These commands answer a single yes/no question about the whole batch:

- ``public``: are all versions public (major version above zero)?
- ``development``: are all versions in initial development (major zero)?
- ``compatible`` / ``incompatible``: do all versions share the major
  version of the first one?
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import click

from semverkit.context import SemverkitContext, pass_context
from semverkit.commands.common import emit, parse_or_exit, version_arguments
from semverkit.models import SemanticVersion
from semverkit.utils import get_logger

logger = get_logger("commands.classify")


def are_compatible(versions: Sequence[SemanticVersion]) -> bool:
    """Return True if every version has the first version's major number."""
    if not versions:
        return True
    first_major = versions[0].major
    for version in versions:
        if version.major != first_major:
            logger.debug("%s is incompatible with %s", version, versions[0])
            return False
    return True


def _emit_flag(ctx: SemverkitContext, output_format: Optional[str], flag: bool) -> None:
    emit(ctx.resolve_format(output_format), ["true" if flag else "false"], json_data=flag)


@click.command()
@version_arguments
@pass_context
def public(
    ctx: SemverkitContext,
    versions: Tuple[str, ...],
    output_format: Optional[str],
) -> None:
    """Print ``true`` if every VERSION is public, else ``false``."""
    parsed = parse_or_exit(versions)
    _emit_flag(ctx, output_format, all(v.is_public() for v in parsed))


@click.command()
@version_arguments
@pass_context
def development(
    ctx: SemverkitContext,
    versions: Tuple[str, ...],
    output_format: Optional[str],
) -> None:
    """Print ``true`` if every VERSION is in initial development, else ``false``."""
    parsed = parse_or_exit(versions)
    _emit_flag(ctx, output_format, all(v.is_initial_development() for v in parsed))


@click.command()
@version_arguments
@pass_context
def compatible(
    ctx: SemverkitContext,
    versions: Tuple[str, ...],
    output_format: Optional[str],
) -> None:
    """Print ``compatible`` if all VERSIONS share a major version.

    Otherwise prints ``incompatible``. Also available as ``incompatible``.
    """
    result = are_compatible(parse_or_exit(versions))
    emit(
        ctx.resolve_format(output_format),
        ["compatible" if result else "incompatible"],
        json_data={"compatible": result},
    )
