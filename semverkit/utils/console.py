"""
Console output utilities for semverkit using Rich.

Two consoles are kept:

- the *output* console (stdout) carries command results. Markup and
  highlighting are disabled so results can be piped and compared
  verbatim;
- the *status* console (stderr) carries user-facing diagnostics such
  as errors and warnings, styled with :data:`SEMVERKIT_THEME`.

For debug output use :mod:`semverkit.utils.logger`; logging never goes
through this module.
"""

from __future__ import annotations

import sys
import json
import threading
from typing import Any, Iterable, Optional

from rich.theme import Theme
from rich.console import Console

from semverkit.utils.logger import stream_supports_color

# ---------------------------------------------------------------------------
# Theme configuration
# ---------------------------------------------------------------------------

SEMVERKIT_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "dim": "dim",
    }
)

# ---------------------------------------------------------------------------
# Console lifecycle management
# ---------------------------------------------------------------------------

_output_console: Optional[Console] = None
_status_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    """Return True if colored diagnostics should be enabled on stderr."""
    return stream_supports_color(sys.stderr)


def _get_output_console() -> Console:
    """Return the singleton stdout console used for results."""
    global _output_console

    if _output_console is None:
        with _console_lock:
            if _output_console is None:
                # Resolve sys.stdout at call time so captured streams work
                _output_console = Console(
                    file=sys.stdout,
                    markup=False,
                    highlight=False,
                    emoji=False,
                    no_color=True,
                    soft_wrap=True,
                )
    return _output_console


def _get_status_console() -> Console:
    """Return the singleton stderr console used for diagnostics."""
    global _status_console

    if _status_console is None:
        with _console_lock:
            if _status_console is None:
                use_color = _should_use_color()
                _status_console = Console(
                    file=sys.stderr,
                    theme=SEMVERKIT_THEME,
                    no_color=not use_color,
                    highlight=False,
                    soft_wrap=True,
                )
    return _status_console


def reconfigure_console() -> None:
    """Reset both console instances.

    Useful if environment variables (e.g. NO_COLOR) or the standard
    streams change at runtime.
    """
    global _output_console, _status_console
    with _console_lock:
        _output_console = None
        _status_console = None


# ---------------------------------------------------------------------------
# Result output
# ---------------------------------------------------------------------------


def print_line(text: str) -> None:
    """Print a single result line to stdout."""
    _get_output_console().print(text)


def print_lines(lines: Iterable[Any]) -> None:
    """Print each item on its own line to stdout."""
    console = _get_output_console()
    for line in lines:
        console.print(str(line))


def print_json(data: Any) -> None:
    """Print ``data`` as an indented JSON document to stdout."""
    _get_output_console().print(json.dumps(data, indent=2))


# ---------------------------------------------------------------------------
# Status message helpers
# ---------------------------------------------------------------------------


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    """Print an error message to stderr."""
    _get_status_console().print(f"{prefix} {message}", style="error", markup=False)


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    """Print a warning message to stderr."""
    _get_status_console().print(f"{prefix} {message}", style="warning", markup=False)
