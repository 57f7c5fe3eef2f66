"""
Precedence comparison for semantic versions.

Precedence orders versions by major, minor, and patch, then by their
pre-release identifiers. Build metadata never takes part. All comparison
functions return ``-1``, ``0`` or ``1``.

Pre-release rules:

1. A version without pre-release identifiers ranks above one with them.
2. Identifiers are compared left to right:

   - two numeric identifiers compare numerically;
   - a numeric identifier ranks below an alphanumeric one;
   - two alphanumeric identifiers compare by ASCII code point, and a
     strict prefix ranks below the longer identifier.

3. If all compared identifiers are equal, the longer sequence ranks higher.

Example::

    1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta < 1.0.0-beta
        < 1.0.0-beta.2 < 1.0.0-beta.11 < 1.0.0-rc.1 < 1.0.0
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Callable, Sequence

from semverkit.core.identifiers import is_numeric

if TYPE_CHECKING:
    from semverkit.models.semantic_version import SemanticVersion


def _cmp(left: Any, right: Any) -> int:
    """Three-way compare two orderable values without subtracting them."""
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def compare_identifiers(left: str, right: str) -> int:
    """Compare two pre-release identifiers by precedence.

    Examples:
        >>> compare_identifiers("2", "11")
        -1
        >>> compare_identifiers("11", "alpha")
        -1
        >>> compare_identifiers("alpha", "alphabet")
        -1
    """
    left_numeric = is_numeric(left)
    right_numeric = is_numeric(right)

    if left_numeric and right_numeric:
        # No leading zeroes, so the longer digit string is the larger number
        return _cmp((len(left), left), (len(right), right))
    if left_numeric:
        return -1
    if right_numeric:
        return 1

    # str ordering is code point ordering, prefix sorts first
    return _cmp(left, right)


def compare_prerelease(left: Sequence[str], right: Sequence[str]) -> int:
    """Compare two pre-release identifier sequences by precedence."""
    if not left and not right:
        return 0
    # A release outranks any pre-release of the same numeric triple
    if not left:
        return 1
    if not right:
        return -1

    for left_id, right_id in zip(left, right):
        result = compare_identifiers(left_id, right_id)
        if result:
            return result

    return _cmp(len(left), len(right))


def compare_versions(left: "SemanticVersion", right: "SemanticVersion") -> int:
    """Compare two versions by precedence, ignoring build metadata.

    Returns:
        ``-1`` if ``left`` has lower precedence, ``1`` if higher, and ``0``
        if both have equal precedence (which implies ``left == right``).
    """
    result = _cmp(left.as_tuple(), right.as_tuple())
    if result:
        return result
    return compare_prerelease(left.prerelease, right.prerelease)


#: Sort key for ordering versions by precedence, e.g. ``sorted(vs, key=precedence_key)``.
precedence_key: Callable[[Any], Any] = cmp_to_key(compare_versions)
