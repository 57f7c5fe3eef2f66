"""Field projection commands for semverkit.

Each command prints one field of every given version, one per line::

    $ semverkit major 1.2.3 4.5.6
    1
    4

    $ semverkit prerelease 1.0.0-alpha.1 1.0.0
    alpha.1
    <empty line>

Identifier fields are printed joined with ``.``; in JSON mode they are
emitted as lists.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple

import click

from semverkit.constants import IDENTIFIER_SEPARATOR
from semverkit.context import SemverkitContext, pass_context
from semverkit.commands.common import emit, parse_or_exit, version_arguments
from semverkit.models import SemanticVersion

Getter = Callable[[SemanticVersion], Any]


def _make_field_command(name: str, getter: Getter, help_text: str) -> click.Command:
    """Build a subcommand printing ``getter(version)`` for each version."""

    @click.command(name=name, help=help_text)
    @version_arguments
    @pass_context
    def command(
        ctx: SemverkitContext,
        versions: Tuple[str, ...],
        output_format: Optional[str],
    ) -> None:
        values = [getter(v) for v in parse_or_exit(versions)]
        lines = [
            IDENTIFIER_SEPARATOR.join(value) if isinstance(value, tuple) else value
            for value in values
        ]
        emit(
            ctx.resolve_format(output_format),
            lines,
            json_data=[list(v) if isinstance(v, tuple) else v for v in values],
        )

    return command


major = _make_field_command(
    "major",
    lambda v: v.major,
    "Print the major version number of each VERSION.",
)
minor = _make_field_command(
    "minor",
    lambda v: v.minor,
    "Print the minor version number of each VERSION.",
)
patch = _make_field_command(
    "patch",
    lambda v: v.patch,
    "Print the patch version number of each VERSION.",
)
prerelease = _make_field_command(
    "prerelease",
    lambda v: v.prerelease,
    "Print the pre-release identifiers of each VERSION.",
)
build = _make_field_command(
    "build",
    lambda v: v.build,
    "Print the build metadata identifiers of each VERSION.",
)
