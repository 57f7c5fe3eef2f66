"""
Custom exception hierarchy for semverkit.

This module defines structured exception types used across semverkit.
All exceptions inherit from :class:`SemverError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.

Every way a version can be rejected (a malformed string, a bad numeric
field, or an illegal identifier) is a :class:`ValidationError`.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class SemverError(Exception):
    """Base exception for all semverkit errors.

    It supports structured metadata via ``details`` for richer error
    reporting and debugging.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 80) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class ValidationError(SemverError):
    """Raised when a version or one of its components is invalid."""

    __slots__ = ()


class InvalidIdentifierError(ValidationError):
    """Raised when a pre-release or build identifier breaks the grammar.

    Args:
        message: Error description.
        identifier: The offending identifier.
        field: Which sequence it belongs to (``prerelease`` or ``build``).
        rule: The violated rule (``empty``, ``leading-zero`` or
            ``illegal-character``).
        character: The offending character for ``illegal-character``.
    """

    __slots__ = ("identifier", "field", "rule", "character")

    def __init__(
        self,
        message: str,
        *,
        identifier: Optional[str] = None,
        field: Optional[str] = None,
        rule: Optional[str] = None,
        character: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "field", field)
        _add_if(details, "rule", rule)
        if identifier is not None:
            details["identifier"] = repr(_truncate(identifier))
        if character is not None:
            details["character"] = repr(character)

        super().__init__(message, details)

        self.identifier = identifier
        self.field = field
        self.rule = rule
        self.character = character


class InvalidVersionNumberError(ValidationError):
    """Raised when a major, minor, or patch number is out of range.

    Args:
        message: Error description.
        field: Name of the numeric field (``major``, ``minor``, ``patch``).
        value: The rejected value.
    """

    __slots__ = ("field", "value")

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Any = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "field", field)
        if value is not None:
            details["value"] = repr(value)

        super().__init__(message, details)

        self.field = field
        self.value = value


class VersionParseError(ValidationError):
    """Raised when a version string cannot be parsed.

    Args:
        message: Error description.
        version_string: Raw input that failed to parse.
        reason: Short machine-friendly reason for the failure.
        index: Position of the input within a batch, if any.
    """

    __slots__ = ("version_string", "reason", "index")

    def __init__(
        self,
        message: str,
        *,
        version_string: Optional[str] = None,
        reason: Optional[str] = None,
        index: Optional[int] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        if version_string is not None:
            details["version"] = repr(_truncate(version_string))
        _add_if(details, "reason", reason)
        _add_if(details, "index", index)

        super().__init__(message, details)

        self.version_string = version_string
        self.reason = reason
        self.index = index


class ConfigError(SemverError):
    """Raised when a configuration file is missing, unreadable, or invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
