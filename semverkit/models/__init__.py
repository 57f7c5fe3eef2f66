"""
Unified data model exports for semverkit.

Users can import models directly from ``semverkit.models`` instead of
individual submodules.

Example:
    >>> from semverkit.models import SemanticVersion
"""

from __future__ import annotations

from semverkit.models.semantic_version import SemanticVersion

__all__ = [
    "SemanticVersion",
]
