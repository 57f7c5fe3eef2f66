"""
Core functionality exports for semverkit.

This module provides convenient access to the identifier validation and
precedence subsystems:

    from semverkit.core import compare_versions, precedence_key

The string parser lives in :mod:`semverkit.core.parser`; it builds
:class:`~semverkit.models.SemanticVersion` objects and is re-exported from
the top-level :mod:`semverkit` package instead of here, since the model
itself depends on this package.
"""

from __future__ import annotations

from semverkit.core.identifiers import (
    is_numeric,
    split_identifiers,
    validate_identifier,
    validate_identifiers,
)
from semverkit.core.precedence import (
    compare_identifiers,
    compare_prerelease,
    compare_versions,
    precedence_key,
)

__all__ = [
    "is_numeric",
    "split_identifiers",
    "validate_identifier",
    "validate_identifiers",
    "compare_identifiers",
    "compare_prerelease",
    "compare_versions",
    "precedence_key",
]
