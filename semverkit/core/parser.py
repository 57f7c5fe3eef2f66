"""Semantic version string parser.

Splits a version string into its numeric core, pre-release, and build
parts and builds a validated :class:`SemanticVersion` from them:

- Build metadata is everything after the first ``+``.
- Pre-release is everything after the first ``-`` in what remains.
- The numeric core must be exactly three dot-separated decimal fields,
  each without leading zeroes and no larger than ``MAX_VERSION_NUMBER``.

Typical usage::

    from semverkit.core.parser import parse_version, parse_versions

    version = parse_version("1.0.0-rc.1+build.5")
    print(version.prerelease)  # ('rc', '1')

    # Batch parsing fails as a whole on the first invalid input
    versions = parse_versions(["1.0.0", "2.0.0-beta"])
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from semverkit.models.semantic_version import SemanticVersion
from semverkit.exceptions import InvalidIdentifierError, VersionParseError
from semverkit.utils.logger import get_logger
from semverkit.constants import (
    DIGITS,
    BUILD_SEPARATOR,
    MAX_VERSION_NUMBER,
    IDENTIFIER_SEPARATOR,
    PRERELEASE_SEPARATOR,
)

logger = get_logger("core.parser")

_FIELD_NAMES = ("major", "minor", "patch")


def split_version(text: str) -> Tuple[str, str, str]:
    """Split a version string into ``(core, prerelease, build)`` strings.

    The ``+`` is located first, then the first ``-`` before it. A separator
    with nothing after it is left in the core, where it fails numeric
    parsing.

    Examples:
        >>> split_version("1.0.0-alpha-1+build-7")
        ('1.0.0', 'alpha-1', 'build-7')
        >>> split_version("1.2.3")
        ('1.2.3', '', '')
    """
    core, build = text, ""
    plus = core.find(BUILD_SEPARATOR)
    if plus != -1 and len(core) > plus + 1:
        core, build = core[:plus], core[plus + 1 :]

    prerelease = ""
    hyphen = core.find(PRERELEASE_SEPARATOR)
    if hyphen != -1 and len(core) > hyphen + 1:
        core, prerelease = core[:hyphen], core[hyphen + 1 :]

    return core, prerelease, build


def _parse_number(field: str, raw: str, text: str) -> int:
    """Parse one numeric field of the version core."""
    if not raw or any(char not in DIGITS for char in raw):
        raise VersionParseError(
            f"Invalid {field} version number {raw!r}",
            version_string=text,
            reason="non-numeric",
        )
    if len(raw) > 1 and raw[0] == "0":
        raise VersionParseError(
            f"The {field} version number {raw!r} has a leading zero",
            version_string=text,
            reason="leading-zero",
        )
    # Length check first; int() refuses very long digit strings
    value = int(raw) if len(raw) <= len(str(MAX_VERSION_NUMBER)) else None
    if value is None or value > MAX_VERSION_NUMBER:
        raise VersionParseError(
            f"The {field} version number exceeds {MAX_VERSION_NUMBER}",
            version_string=text,
            reason="overflow",
        )
    return value


def parse_version(text: str) -> SemanticVersion:
    """Parse a version string into a :class:`SemanticVersion`.

    Args:
        text: Version string such as ``"1.0.0-alpha.1+x86-64"``. Surrounding
            whitespace is ignored.

    Returns:
        The parsed, validated version.

    Raises:
        VersionParseError: The numeric core is malformed.
        InvalidIdentifierError: A pre-release or build identifier is invalid.
    """
    if not isinstance(text, str):
        raise VersionParseError(
            f"Version must be a string, got {type(text).__name__}",
            reason="type",
        )

    stripped = text.strip()
    if not stripped:
        raise VersionParseError(
            "Version string is empty",
            version_string=text,
            reason="empty",
        )

    core, prerelease, build = split_version(stripped)

    fields = core.split(IDENTIFIER_SEPARATOR)
    if len(fields) != len(_FIELD_NAMES):
        raise VersionParseError(
            f"Expected MAJOR.MINOR.PATCH, got {len(fields)} numeric field(s)",
            version_string=text,
            reason="field-count",
        )

    major, minor, patch = (
        _parse_number(name, raw, text) for name, raw in zip(_FIELD_NAMES, fields)
    )

    version = SemanticVersion(major, minor, patch, prerelease, build)
    logger.debug("Parsed %r as %s", text, version)
    return version


def parse_versions(texts: Iterable[str]) -> List[SemanticVersion]:
    """Parse a batch of version strings.

    The batch fails as a whole: the first invalid input raises and no
    versions are returned.

    Raises:
        VersionParseError: An input is invalid. ``index`` records its
            position and the original error is chained as ``__cause__``.
    """
    versions: List[SemanticVersion] = []
    for index, text in enumerate(texts):
        try:
            versions.append(parse_version(text))
        except VersionParseError as exc:
            exc.index = index
            exc.details["index"] = index
            raise
        except InvalidIdentifierError as exc:
            raise VersionParseError(
                f"Invalid version {text!r}: {exc.message}",
                version_string=text,
                reason=exc.rule,
                index=index,
            ) from exc

    logger.debug("Parsed %d version(s)", len(versions))
    return versions
