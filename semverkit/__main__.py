"""
Executable module for semverkit.

Running:
    python -m semverkit

is equivalent to:
    semverkit

This module simply forwards execution to the CLI entrypoint defined in
`semverkit.cli`.
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Explain on stderr why the CLI could not be imported."""
    sys.stderr.write("semverkit CLI could not be started.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    try:
        from semverkit.__version__ import __version__

        sys.stderr.write(f"semverkit version: {__version__}\n")
    except ImportError:
        sys.stderr.write("semverkit version: <unknown>\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """
    Main entrypoint when executing `python -m semverkit`.

    Returns:
        Exit code returned by the CLI.
    """
    try:
        # Import lazily so dependencies are only loaded during CLI use
        from semverkit.cli import main as cli_main
    except ImportError as exc:
        # Usually a missing optional dependency such as click or rich
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
