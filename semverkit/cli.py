"""
Command-line interface for semverkit.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.

Subcommand names are case-insensitive.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import click

from semverkit.config import load_config
from semverkit.__version__ import VERSION_STRING, __version__
from semverkit.context import SemverkitContext
from semverkit.exceptions import ConfigError, SemverError
from semverkit.utils.logger import get_logger, setup_logging, verbosity_to_level
from semverkit.utils.console import print_error, print_warning, reconfigure_console

logger = get_logger("cli")


@click.group(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "token_normalize_func": lambda token: token.lower(),
    },
    no_args_is_help=False,
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="SEMVERKIT_CONFIG",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="SEMVERKIT_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="semverkit",
    message=VERSION_STRING,
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """semverkit: validate, compare, and sort semantic versions.

    \b
    Available commands:
      validate                  Check that versions are valid
      sort, ascend / descend    Order versions by precedence
      major / minor / patch     Print a numeric field
      prerelease / build        Print identifier fields
      public / development      Classify by major version
      compatible, incompatible  Check for a shared major version

    \b
    Examples:
      semverkit validate 1.0.0-rc.1
      semverkit sort 1.0.0 1.0.0-alpha 0.9.9
      semverkit -v compatible 1.2.0 1.9.3

    Use ``semverkit COMMAND --help`` for command-specific options.
    """
    # Respect NO_COLOR for downstream libraries
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    level = verbosity_to_level(verbose)
    setup_logging(level=level, verbose=verbose >= 2)

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise click.exceptions.Exit(1) from exc

    semverkit_ctx = SemverkitContext()
    semverkit_ctx.config_path = loaded_config.source_path
    semverkit_ctx.color = color
    semverkit_ctx.verbose = verbose
    semverkit_ctx.config = loaded_config
    ctx.obj = semverkit_ctx

    logger.debug("semverkit v%s", __version__)
    logger.debug("Config path: %s", semverkit_ctx.config_path)
    logger.debug("Loaded configuration: %s", loaded_config.to_log_dict())
    logger.debug("Verbosity: %s | Color: %s", verbose, color)


# Register CLI subcommands
from semverkit.commands.validate import validate  # noqa: E402
from semverkit.commands.sort import descend, sort  # noqa: E402
from semverkit.commands.fields import build, major, minor, patch, prerelease  # noqa: E402
from semverkit.commands.classify import compatible, development, public  # noqa: E402

cli.add_command(validate)
cli.add_command(sort)
cli.add_command(sort, name="ascend")
cli.add_command(descend)
cli.add_command(major)
cli.add_command(minor)
cli.add_command(patch)
cli.add_command(prerelease)
cli.add_command(build)
cli.add_command(public)
cli.add_command(development)
cli.add_command(compatible)
cli.add_command(compatible, name="incompatible")


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the semverkit CLI.

    Returns:
        Exit code:
            0   Success
            1   Usage error, invalid version, or application error
            130 Interrupted by user (Ctrl+C)
    """
    try:
        result = cli.main(args=argv, prog_name="semverkit", standalone_mode=False)
        return result if isinstance(result, int) else 0

    except click.UsageError as exc:
        exc.show()
        return 1

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except click.exceptions.Abort:
        print_warning("\nOperation cancelled by user")
        return 130

    except SemverError as exc:
        print_error(str(exc))
        logger.debug(
            "SemverError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except KeyboardInterrupt:
        print_warning("\nOperation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
