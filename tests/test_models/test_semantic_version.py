"""Unit tests for semverkit.models.semantic_version module.

Test Coverage:
- Construction from numeric fields and dotted identifier strings
- Identifier validation (empty, leading zero, illegal characters)
- Numeric field validation
- Lower-casing of identifiers
- Validate-before-commit identifier setters
- Increment operations and their resets
- Classification queries
- Rendering, equality, hashing, and precedence ordering
"""

from __future__ import annotations

from itertools import combinations, permutations

import pytest

from semverkit.constants import MAX_VERSION_NUMBER
from semverkit.exceptions import (
    InvalidIdentifierError,
    InvalidVersionNumberError,
    ValidationError,
)
from semverkit.models import SemanticVersion


PRECEDENCE_CHAIN = [
    "alpha",
    "alpha.1",
    "alpha.beta",
    "beta",
    "beta.2",
    "beta.11",
    "rc.1",
    "",
]


@pytest.mark.unit
class TestConstruction:
    """Tests for SemanticVersion construction."""

    def test_numeric_only(self) -> None:
        """Test a numeric triple has no pre-release or build identifiers."""
        version = SemanticVersion(1, 2, 3)

        assert version.major == 1
        assert version.minor == 2
        assert version.patch == 3
        assert version.prerelease == ()
        assert version.build == ()

    def test_with_prerelease_and_build(self) -> None:
        """Test dotted strings are split into identifier tuples."""
        version = SemanticVersion(16, 0, 32, "beta.11", "x86-64.linux")

        assert version.prerelease == ("beta", "11")
        assert version.build == ("x86-64", "linux")

    def test_empty_strings_mean_no_identifiers(self) -> None:
        """Test empty pre-release and build strings yield empty tuples."""
        version = SemanticVersion(1, 0, 0, "", "")

        assert version.prerelease == ()
        assert version.build == ()

    def test_build_without_prerelease(self) -> None:
        """Test build metadata can be given with an empty pre-release."""
        version = SemanticVersion(1, 0, 0, "", "gamma")

        assert version.prerelease == ()
        assert version.build == ("gamma",)

    def test_identifiers_are_lowercased(self) -> None:
        """Test identifiers are lower-cased on ingestion."""
        version = SemanticVersion(1, 0, 0, "Alpha.RC-1", "X86-64")

        assert version.prerelease == ("alpha", "rc-1")
        assert version.build == ("x86-64",)

    def test_accepts_maximum_numbers(self) -> None:
        """Test the largest unsigned 32-bit value is accepted."""
        version = SemanticVersion(MAX_VERSION_NUMBER, MAX_VERSION_NUMBER, 0)

        assert version.major == MAX_VERSION_NUMBER

    def test_parse_classmethod(self) -> None:
        """Test SemanticVersion.parse delegates to the string parser."""
        version = SemanticVersion.parse("1.0.0-rc.1+build.5")

        assert version == SemanticVersion(1, 0, 0, "rc.1")
        assert version.build == ("build", "5")


@pytest.mark.unit
class TestIdentifierValidation:
    """Tests for identifier rules enforced during construction."""

    @pytest.mark.parametrize(
        "prerelease,rule",
        [
            ("01", "leading-zero"),
            ("0", "leading-zero"),
            ("alpha.0beta", "leading-zero"),
            ("alpha..beta", "empty"),
            (".alpha", "empty"),
            ("alpha.", "empty"),
            ("gamma/", "illegal-character"),
            ("/gamma", "illegal-character"),
            ("alpha_beta", "illegal-character"),
            ("bêta", "illegal-character"),
            ("alpha beta", "illegal-character"),
        ],
    )
    def test_invalid_prerelease(self, prerelease: str, rule: str) -> None:
        """Test invalid pre-release identifiers are rejected with a rule."""
        with pytest.raises(InvalidIdentifierError) as exc_info:
            SemanticVersion(1, 0, 0, prerelease)

        assert exc_info.value.rule == rule
        assert exc_info.value.field == "prerelease"

    @pytest.mark.parametrize("build", ["01", "gamma/", "a..b", "x+y"])
    def test_invalid_build(self, build: str) -> None:
        """Test build identifiers follow the same rules."""
        with pytest.raises(InvalidIdentifierError) as exc_info:
            SemanticVersion(1, 0, 0, "", build)

        assert exc_info.value.field == "build"

    def test_illegal_character_is_reported(self) -> None:
        """Test the offending character is carried on the error."""
        with pytest.raises(InvalidIdentifierError) as exc_info:
            SemanticVersion(1, 0, 0, "gamma/")

        error = exc_info.value
        assert error.identifier == "gamma/"
        assert error.character == "/"
        assert "character" in str(error)

    def test_error_is_validation_error(self) -> None:
        """Test identifier errors belong to the validation taxonomy."""
        with pytest.raises(ValidationError):
            SemanticVersion(1, 0, 0, "01")

    @pytest.mark.parametrize("prerelease", ["alpha", "alpha-1", "-", "a1b2", "1", "99"])
    def test_valid_prerelease(self, prerelease: str) -> None:
        """Test valid identifiers are accepted."""
        assert SemanticVersion(1, 0, 0, prerelease).prerelease == (prerelease,)


@pytest.mark.unit
class TestNumberValidation:
    """Tests for major/minor/patch validation."""

    @pytest.mark.parametrize(
        "fields",
        [
            (-1, 0, 0),
            (0, -1, 0),
            (0, 0, -1),
            (MAX_VERSION_NUMBER + 1, 0, 0),
            (1.0, 0, 0),
            ("1", 0, 0),
            (True, 0, 0),
        ],
    )
    def test_rejected(self, fields) -> None:
        """Test out-of-range or non-integer fields are rejected."""
        with pytest.raises(InvalidVersionNumberError):
            SemanticVersion(*fields)

    def test_error_names_field(self) -> None:
        """Test the error identifies which field was rejected."""
        with pytest.raises(InvalidVersionNumberError) as exc_info:
            SemanticVersion(1, 2, -3)

        assert exc_info.value.field == "patch"
        assert exc_info.value.value == -3


@pytest.mark.unit
class TestSetters:
    """Tests for replacing pre-release and build identifiers."""

    def test_set_prerelease(self) -> None:
        """Test pre-release identifiers are replaced wholesale."""
        version = SemanticVersion(1, 0, 0, "alpha")
        version.prerelease = ["Beta", "2"]

        assert version.prerelease == ("beta", "2")

    def test_set_build(self) -> None:
        """Test build identifiers are replaced wholesale."""
        version = SemanticVersion(1, 0, 0, "", "old")
        version.set_build(("x86-64", "linux"))

        assert version.build == ("x86-64", "linux")

    def test_setter_accepts_dotted_string(self) -> None:
        """Test a dotted string is split like in the constructor."""
        version = SemanticVersion(1, 0, 0)
        version.set_prerelease("rc.1")

        assert version.prerelease == ("rc", "1")

    def test_clear_with_empty_sequence(self) -> None:
        """Test an empty sequence removes all identifiers."""
        version = SemanticVersion(1, 0, 0, "alpha", "build")
        version.prerelease = []
        version.build = []

        assert str(version) == "1.0.0"

    def test_invalid_prerelease_keeps_previous(self) -> None:
        """Test a failed replacement leaves the old identifiers in place."""
        version = SemanticVersion(1, 0, 0, "alpha.1")

        with pytest.raises(InvalidIdentifierError):
            version.prerelease = ["beta", "01"]

        assert version.prerelease == ("alpha", "1")

    def test_invalid_build_keeps_previous(self) -> None:
        """Test a failed build replacement leaves the old identifiers."""
        version = SemanticVersion(1, 0, 0, "", "x86-64")

        with pytest.raises(InvalidIdentifierError):
            version.set_build(["ok", ""])

        assert version.build == ("x86-64",)

    def test_numeric_fields_are_read_only(self) -> None:
        """Test major/minor/patch cannot be assigned directly."""
        version = SemanticVersion(1, 2, 3)

        with pytest.raises(AttributeError):
            version.major = 5  # type: ignore[misc]

    def test_returned_tuple_does_not_alias(self) -> None:
        """Test callers cannot mutate identifiers through the accessor."""
        version = SemanticVersion(1, 0, 0, "alpha")

        with pytest.raises(TypeError):
            version.prerelease[0] = "beta"  # type: ignore[index]


@pytest.mark.unit
class TestIncrements:
    """Tests for increment operations."""

    def test_increment_major_resets_everything(self) -> None:
        """Test major increment zeroes minor/patch and clears identifiers."""
        version = SemanticVersion(1, 4, 5, "alpha", "x86-64")
        version.increment_major()

        assert version.as_tuple() == (2, 0, 0)
        assert version.prerelease == ()
        assert version.build == ()

    def test_increment_minor(self) -> None:
        """Test minor increment zeroes patch and clears identifiers."""
        version = SemanticVersion(1, 4, 5, "beta", "x86-64")
        version.increment_minor()

        assert version.as_tuple() == (1, 5, 0)
        assert str(version) == "1.5.0"

    def test_increment_patch(self) -> None:
        """Test patch increment keeps major/minor and clears identifiers."""
        version = SemanticVersion(1, 4, 5, "beta", "x86-64")
        version.increment_patch()

        assert version.as_tuple() == (1, 4, 6)
        assert str(version) == "1.4.6"

    def test_increments_return_none(self) -> None:
        """Test increments mutate in place."""
        version = SemanticVersion(0, 0, 0)

        assert version.increment_patch() is None


@pytest.mark.unit
class TestClassification:
    """Tests for is_initial_development and is_public."""

    @pytest.mark.parametrize(
        "version,initial",
        [
            (SemanticVersion(0, 0, 0), True),
            (SemanticVersion(0, 99, 99, "alpha", "beta"), True),
            (SemanticVersion(1, 0, 0), False),
            (SemanticVersion(1, 99, 99, "alpha", "beta"), False),
        ],
    )
    def test_queries_are_complementary(
        self, version: SemanticVersion, initial: bool
    ) -> None:
        """Test public is the exact negation of initial development."""
        assert version.is_initial_development() is initial
        assert version.is_public() is (not initial)


@pytest.mark.unit
class TestRendering:
    """Tests for string and structured rendering."""

    @pytest.mark.parametrize(
        "args,expected",
        [
            ((1, 0, 0), "1.0.0"),
            ((16, 0, 32, "alpha", "x86-64"), "16.0.32-alpha+x86-64"),
            ((1, 0, 0, "alpha.1"), "1.0.0-alpha.1"),
            ((1, 0, 0, "", "x86-64.linux"), "1.0.0+x86-64.linux"),
        ],
    )
    def test_to_string(self, args, expected: str) -> None:
        """Test canonical rendering."""
        version = SemanticVersion(*args)

        assert str(version) == expected
        assert version.to_string() == expected

    def test_as_tuple(self) -> None:
        """Test the integer-triple projection discards identifiers."""
        assert SemanticVersion(12, 34, 56, "rc", "b").as_tuple() == (12, 34, 56)

    def test_repr(self) -> None:
        """Test the debug representation."""
        assert repr(SemanticVersion(1, 0, 0, "rc")) == "SemanticVersion('1.0.0-rc')"

    def test_to_json(self) -> None:
        """Test the JSON-compatible representation."""
        assert SemanticVersion(1, 2, 3, "rc.1", "b5").to_json() == {
            "version": "1.2.3-rc.1+b5",
            "major": 1,
            "minor": 2,
            "patch": 3,
            "prerelease": ["rc", "1"],
            "build": ["b5"],
        }

    def test_round_trip(self) -> None:
        """Test parsing the rendered form yields an equal value."""
        for args in [
            (1, 0, 0),
            (0, 1, 2, "alpha.1"),
            (16, 0, 32, "gamma", "x86-64.linux"),
            (99, 999, 9999, "11.gamma"),
        ]:
            version = SemanticVersion(*args)
            reparsed = SemanticVersion.parse(str(version))

            assert reparsed == version
            assert str(reparsed) == str(version)


@pytest.mark.unit
class TestEquality:
    """Tests for equality and hashing."""

    def test_build_is_ignored(self) -> None:
        """Test versions differing only in build metadata are equal."""
        left = SemanticVersion(1, 0, 0, "alpha", "x")
        right = SemanticVersion(1, 0, 0, "alpha", "y")

        assert left == right
        assert not left < right
        assert not left > right
        assert hash(left) == hash(right)

    @pytest.mark.parametrize(
        "left,right",
        [
            ("alpha", "beta"),
            ("alpha", "alpha.jk"),
            ("alpha.7", "alpha"),
        ],
    )
    def test_prerelease_matters(self, left: str, right: str) -> None:
        """Test differing pre-release identifiers make versions unequal."""
        assert SemanticVersion(1, 0, 0, left) != SemanticVersion(1, 0, 0, right)

    def test_case_insensitive_identifiers(self) -> None:
        """Test identifiers compare equal after lower-casing."""
        assert SemanticVersion(1, 0, 0, "RC") == SemanticVersion(1, 0, 0, "rc")

    def test_other_types(self) -> None:
        """Test comparison with other types is not supported."""
        version = SemanticVersion(1, 0, 0)

        assert version != "1.0.0"
        assert (version == (1, 0, 0)) is False
        with pytest.raises(TypeError):
            version < "2.0.0"  # noqa: B015

    def test_usable_as_dict_key(self) -> None:
        """Test hashing is consistent with equality."""
        table = {SemanticVersion(1, 0, 0, "rc", "a"): "first"}

        assert table[SemanticVersion(1, 0, 0, "rc", "b")] == "first"
        assert len({SemanticVersion(1, 0, 0), SemanticVersion(1, 0, 0, "", "z")}) == 1


@pytest.mark.unit
class TestOrdering:
    """Tests for precedence ordering via rich comparison operators."""

    def test_numeric_fields(self) -> None:
        """Test major, minor, and patch are compared in order."""
        assert SemanticVersion(1, 0, 0) < SemanticVersion(2, 0, 0)
        assert SemanticVersion(1, 0, 0) < SemanticVersion(1, 1, 0)
        assert SemanticVersion(1, 0, 0) < SemanticVersion(1, 0, 1)
        assert SemanticVersion(2, 0, 0) > SemanticVersion(1, 99, 99)

    def test_extreme_numbers_do_not_overflow(self) -> None:
        """Test the largest field values compare correctly."""
        big = SemanticVersion(MAX_VERSION_NUMBER, 0, 0)

        assert big > SemanticVersion(0, 0, 0)
        assert SemanticVersion(0, 0, 0) < big

    def test_release_outranks_prerelease(self) -> None:
        """Test a release has higher precedence than its pre-releases."""
        assert SemanticVersion(1, 0, 0, "rc.1") < SemanticVersion(1, 0, 0)

    def test_documented_chain(self) -> None:
        """Test every pair in the documented precedence chain."""
        chain = [SemanticVersion(1, 0, 0, pre) for pre in PRECEDENCE_CHAIN]

        for lower, higher in combinations(chain, 2):
            assert lower < higher
            assert higher > lower
            assert lower <= higher
            assert lower != higher

    def test_sorted_restores_chain(self) -> None:
        """Test sorted() orders a shuffled chain correctly."""
        chain = [SemanticVersion(1, 0, 0, pre) for pre in PRECEDENCE_CHAIN]

        assert sorted(reversed(chain)) == chain

    def test_total_order(self) -> None:
        """Test exactly one relation holds and ordering is transitive."""
        versions = [
            SemanticVersion(1, 0, 0),
            SemanticVersion(1, 0, 0, "beta"),
            SemanticVersion(1, 0, 0, "alpha.1"),
            SemanticVersion(1, 0, 0, "alpha.beta"),
            SemanticVersion(1, 0, 0, "beta.11"),
            SemanticVersion(99, 999, 9999, "11.gamma"),
            SemanticVersion(16, 0, 32, "beta.11", "x86-64"),
            SemanticVersion(16, 0, 32, "99.gamma", "x86-64"),
            SemanticVersion(16, 0, 32, "gamma", "x86-64.linux"),
            SemanticVersion(16, 0, 32, "gamma", "other"),
        ]

        for a in versions:
            for b in versions:
                relations = [a < b, a == b, a > b]
                assert relations.count(True) == 1

        for a, b, c in permutations(versions, 3):
            if a < b and b < c:
                assert a < c
            if a <= b and b <= c:
                assert a <= c
