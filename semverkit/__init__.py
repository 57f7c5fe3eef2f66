"""
semverkit: strongly-typed Semantic Versioning 2.0 values.

semverkit parses version strings into validated :class:`SemanticVersion`
objects, orders them by semver precedence, and renders them back into
their canonical form. A small command-line tool (``semverkit``) exposes
validation, sorting, and field queries over batches of versions.

Example:
    >>> from semverkit import SemanticVersion, parse_version
    >>> parse_version("1.0.0-alpha") < SemanticVersion(1, 0, 0)
    True

Semantic Versioning: https://semver.org/
"""

from __future__ import annotations

from semverkit.__version__ import __version__
from semverkit.models import SemanticVersion
from semverkit.core.parser import parse_version, parse_versions
from semverkit.core.precedence import compare_versions, precedence_key
from semverkit.exceptions import (
    ConfigError,
    InvalidIdentifierError,
    InvalidVersionNumberError,
    SemverError,
    ValidationError,
    VersionParseError,
)

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__license__ = "Apache-2.0"
__description__ = "Strongly-typed semantic versions: parse, validate, compare, render."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "__version__",
    "SemanticVersion",
    "parse_version",
    "parse_versions",
    "compare_versions",
    "precedence_key",
    "SemverError",
    "ValidationError",
    "InvalidIdentifierError",
    "InvalidVersionNumberError",
    "VersionParseError",
    "ConfigError",
]
