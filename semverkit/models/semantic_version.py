"""
Semantic version data model for semverkit.

This module defines :class:`SemanticVersion`, a strongly-typed Semantic
Versioning 2.0 value: three numeric fields plus ordered pre-release and
build identifier sequences.

Instances are validated on construction and whenever their pre-release or
build identifiers are replaced, so a live instance is always valid.
Equality, hashing, and ordering follow semver precedence, which ignores
build metadata.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Tuple

from semverkit.constants import (
    BUILD_SEPARATOR,
    IDENTIFIER_SEPARATOR,
    MAX_VERSION_NUMBER,
    PRERELEASE_SEPARATOR,
)
from semverkit.core.identifiers import validate_identifiers
from semverkit.core.precedence import compare_versions
from semverkit.exceptions import InvalidVersionNumberError
from semverkit.utils.logger import get_logger

logger = get_logger("models.semantic_version")


def _validate_number(name: str, value: Any) -> int:
    """Validate a major, minor, or patch number.

    Args:
        name: Field name used in error reporting.
        value: Candidate value.

    Returns:
        The value as a plain ``int``.

    Raises:
        InvalidVersionNumberError: Value is not an integer, is negative,
            or exceeds :data:`MAX_VERSION_NUMBER`.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidVersionNumberError(
            f"{name.capitalize()} version must be an integer, got {type(value).__name__}",
            field=name,
            value=value,
        )
    if value < 0:
        raise InvalidVersionNumberError(
            f"{name.capitalize()} version cannot be negative",
            field=name,
            value=value,
        )
    if value > MAX_VERSION_NUMBER:
        raise InvalidVersionNumberError(
            f"{name.capitalize()} version cannot exceed {MAX_VERSION_NUMBER}",
            field=name,
            value=value,
        )
    return int(value)


class SemanticVersion:
    """
    A strongly-typed Semantic Version number.

    Args:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        prerelease: Dotted pre-release identifiers, e.g. ``"alpha.1"``.
            An empty string means no pre-release identifiers.
        build: Dotted build identifiers, e.g. ``"x86-64.linux"``.

    Raises:
        InvalidVersionNumberError: A numeric field is out of range.
        InvalidIdentifierError: A pre-release or build identifier is invalid.

    Example:
        >>> v = SemanticVersion(1, 0, 0, "Alpha.1", "x86-64")
        >>> str(v)
        '1.0.0-alpha.1+x86-64'
        >>> v < SemanticVersion(1, 0, 0)
        True
    """

    __slots__ = ("_major", "_minor", "_patch", "_prerelease", "_build")

    def __init__(
        self,
        major: int,
        minor: int,
        patch: int,
        prerelease: str = "",
        build: str = "",
    ) -> None:
        self._major = _validate_number("major", major)
        self._minor = _validate_number("minor", minor)
        self._patch = _validate_number("patch", patch)
        self._prerelease: Tuple[str, ...] = validate_identifiers(
            prerelease, field="prerelease"
        )
        self._build: Tuple[str, ...] = validate_identifiers(build, field="build")

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        """Parse a version string such as ``"1.0.0-rc.1+build.5"``.

        Raises:
            VersionParseError: The string is not a valid semantic version.
            InvalidIdentifierError: An identifier is invalid.
        """
        # Imported lazily; the parser depends on this module.
        from semverkit.core.parser import parse_version

        return parse_version(text)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def major(self) -> int:
        """Number of backwards-incompatible changes introduced."""
        return self._major

    @property
    def minor(self) -> int:
        """Number of backwards-compatible features introduced."""
        return self._minor

    @property
    def patch(self) -> int:
        """Number of backwards-compatible fixes introduced."""
        return self._patch

    @property
    def prerelease(self) -> Tuple[str, ...]:
        """Pre-release identifiers, in order."""
        return self._prerelease

    @prerelease.setter
    def prerelease(self, identifiers: Iterable[str]) -> None:
        self.set_prerelease(identifiers)

    @property
    def build(self) -> Tuple[str, ...]:
        """Build metadata identifiers, in order."""
        return self._build

    @build.setter
    def build(self, identifiers: Iterable[str]) -> None:
        self.set_build(identifiers)

    def set_prerelease(self, identifiers: Iterable[str]) -> None:
        """Replace all pre-release identifiers.

        Every identifier is validated before anything is changed; on
        failure the previous identifiers are kept.

        Raises:
            InvalidIdentifierError: An identifier is invalid.
        """
        self._prerelease = validate_identifiers(identifiers, field="prerelease")

    def set_build(self, identifiers: Iterable[str]) -> None:
        """Replace all build identifiers.

        Raises:
            InvalidIdentifierError: An identifier is invalid.
        """
        self._build = validate_identifiers(identifiers, field="build")

    # ------------------------------------------------------------------
    # Increments
    # ------------------------------------------------------------------

    def increment_major(self) -> None:
        """Record a backwards-incompatible change.

        Resets minor and patch to zero and clears pre-release and build
        identifiers.
        """
        self._major += 1
        self._minor = 0
        self._patch = 0
        self._prerelease = ()
        self._build = ()
        logger.debug("Incremented major version: %s", self)

    def increment_minor(self) -> None:
        """Record a backwards-compatible feature.

        Resets patch to zero and clears pre-release and build identifiers.
        """
        self._minor += 1
        self._patch = 0
        self._prerelease = ()
        self._build = ()
        logger.debug("Incremented minor version: %s", self)

    def increment_patch(self) -> None:
        """Record a backwards-compatible fix; clears pre-release and build."""
        self._patch += 1
        self._prerelease = ()
        self._build = ()
        logger.debug("Incremented patch version: %s", self)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def is_initial_development(self) -> bool:
        """Return True for major version zero, where anything may change."""
        return self._major == 0

    def is_public(self) -> bool:
        """Return True once the public API is declared stable (major > 0)."""
        return self._major != 0

    # ------------------------------------------------------------------
    # Rendering & serialization
    # ------------------------------------------------------------------

    def as_tuple(self) -> Tuple[int, int, int]:
        """Return ``(major, minor, patch)``, discarding identifiers."""
        return (self._major, self._minor, self._patch)

    def to_string(self) -> str:
        """Return the canonical ``MAJOR.MINOR.PATCH[-PRE][+BUILD]`` form."""
        text = f"{self._major}.{self._minor}.{self._patch}"
        if self._prerelease:
            text += PRERELEASE_SEPARATOR + IDENTIFIER_SEPARATOR.join(self._prerelease)
        if self._build:
            text += BUILD_SEPARATOR + IDENTIFIER_SEPARATOR.join(self._build)
        return text

    def to_json(self) -> Dict[str, Any]:
        """
        Serialize the version to a JSON-compatible dictionary.

        Returns:
            JSON-safe version representation.
        """
        return {
            "version": self.to_string(),
            "major": self._major,
            "minor": self._minor,
            "patch": self._patch,
            "prerelease": list(self._prerelease),
            "build": list(self._build),
        }

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        # Build metadata does not factor into equality
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return (
            self.as_tuple() == other.as_tuple()
            and self._prerelease == other._prerelease
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((self._major, self._minor, self._patch, self._prerelease))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare_versions(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare_versions(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare_versions(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare_versions(self, other) >= 0
