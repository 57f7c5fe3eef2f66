"""
Shared context object for semverkit CLI commands.

This module defines the Click context object used to share configuration
and runtime options across CLI subcommands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from semverkit.config import SemverkitConfig


class SemverkitContext:
    """Global context object for semverkit CLI commands.

    An instance of this class is created once per CLI invocation and
    passed to commands using Click's context mechanism.

    Attributes:
        config_path: Path to the configuration file, if one was loaded.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Loaded configuration; defaults when no file was found.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: SemverkitConfig = SemverkitConfig()

    def resolve_format(self, override: Optional[str]) -> str:
        """Return the output format, preferring a CLI ``--format`` value."""
        if override:
            return override.lower()
        return self.config.output_format


#: Click decorator for injecting :class:`SemverkitContext` into commands.
pass_context = click.make_pass_decorator(SemverkitContext, ensure=True)
