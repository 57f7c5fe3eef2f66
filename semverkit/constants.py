"""
Centralized constants for semverkit.

This module defines immutable values used across semverkit, including
numeric bounds, the identifier alphabet, version separators, configuration
defaults, and logging formats. All values are intended to be treated as
read-only.
"""

from typing import Final, FrozenSet, Sequence

# ---------------------------------------------------------------------------
# Numeric bounds
# ---------------------------------------------------------------------------

#: Largest value accepted for a major, minor, or patch number (unsigned 32-bit).
MAX_VERSION_NUMBER: Final[int] = 2**32 - 1

# ---------------------------------------------------------------------------
# Version syntax
# ---------------------------------------------------------------------------

#: Separator between the numeric fields and between identifiers.
IDENTIFIER_SEPARATOR: Final[str] = "."

#: Marker introducing the pre-release identifiers.
PRERELEASE_SEPARATOR: Final[str] = "-"

#: Marker introducing the build metadata identifiers.
BUILD_SEPARATOR: Final[str] = "+"

#: Characters allowed inside a pre-release or build identifier.
IDENTIFIER_CHARACTERS: Final[FrozenSet[str]] = frozenset(
    "0123456789"
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "-"
)

#: Characters forming a numeric identifier or numeric version field.
DIGITS: Final[FrozenSet[str]] = frozenset("0123456789")

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------

#: Output formats understood by every subcommand.
OUTPUT_FORMATS: Final[Sequence[str]] = ("plain", "json")

#: Default output format.
DEFAULT_OUTPUT_FORMAT: Final[str] = "plain"

#: Whether sort commands drop precedence-equal duplicates by default.
DEFAULT_UNIQUE: Final[bool] = False

#: Configuration file searched for in the current directory.
CONFIG_FILE_NAME: Final[str] = "semverkit.toml"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
