"""
Identifier validation for pre-release and build metadata.

An identifier is one dot-separated component of the pre-release or build
field. Every identifier must be non-empty, must not start with ``0``, and
may only contain ASCII alphanumerics and the hyphen. Identifiers are
lower-cased on ingestion.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from semverkit.constants import DIGITS, IDENTIFIER_CHARACTERS, IDENTIFIER_SEPARATOR
from semverkit.exceptions import InvalidIdentifierError

#: Human-readable field labels used in error messages.
_FIELD_LABELS = {
    "prerelease": "Pre-release",
    "build": "Build metadata",
}


def split_identifiers(text: str) -> List[str]:
    """Split a dotted identifier string into its components.

    An empty string means "no identifiers" rather than one empty identifier.

    Examples:
        >>> split_identifiers("alpha.1")
        ['alpha', '1']
        >>> split_identifiers("")
        []
        >>> split_identifiers("alpha..beta")
        ['alpha', '', 'beta']
    """
    if not text:
        return []
    return text.split(IDENTIFIER_SEPARATOR)


def is_numeric(identifier: str) -> bool:
    """Return True if ``identifier`` consists only of ASCII digits."""
    return bool(identifier) and all(char in DIGITS for char in identifier)


def validate_identifier(identifier: str, *, field: str = "prerelease") -> str:
    """Validate a single identifier and return its lower-cased form.

    Args:
        identifier: Raw identifier.
        field: ``prerelease`` or ``build``; used in error reporting.

    Returns:
        The lower-cased identifier.

    Raises:
        InvalidIdentifierError: The identifier is empty, starts with ``0``,
            or contains a character outside ``[0-9A-Za-z-]``.
    """
    label = _FIELD_LABELS.get(field, field)

    if not isinstance(identifier, str):
        raise InvalidIdentifierError(
            f"{label} identifiers must be strings, got {type(identifier).__name__}",
            field=field,
            rule="illegal-character",
        )

    if identifier == "":
        raise InvalidIdentifierError(
            f"{label} identifiers cannot be empty",
            identifier=identifier,
            field=field,
            rule="empty",
        )

    # Stricter than semver 2.0: a lone "0" is rejected as well.
    if identifier[0] == "0":
        raise InvalidIdentifierError(
            f"{label} identifiers cannot have leading zeroes",
            identifier=identifier,
            field=field,
            rule="leading-zero",
        )

    for char in identifier:
        if char not in IDENTIFIER_CHARACTERS:
            raise InvalidIdentifierError(
                f"{label} identifiers may only contain ASCII alphanumerics and hyphens",
                identifier=identifier,
                field=field,
                rule="illegal-character",
                character=char,
            )

    return identifier.lower()


def validate_identifiers(
    identifiers: Iterable[str],
    *,
    field: str = "prerelease",
) -> Tuple[str, ...]:
    """Validate every identifier and return them as a lower-cased tuple.

    Nothing is returned unless all identifiers are valid, so callers can
    commit the result without leaving partial state behind.
    """
    if isinstance(identifiers, str):
        identifiers = split_identifiers(identifiers)
    return tuple(validate_identifier(item, field=field) for item in identifiers)
