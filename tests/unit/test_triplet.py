"""
Unit tests for version triplet validation and bumping.

Tests:
- Single-digit triplet validation
- Bump arithmetic for every non-ceiling triplet
- Ceiling rejection without carry
"""

import itertools
from unittest.mock import patch

import pytest

from versionsync.errors import FormatError, VersionOverflowError
from versionsync.limits import Limits
from versionsync.modes import Action
from versionsync.triplet import VersionTriplet, bump_triplet, is_single_digit_triplet, parse_triplet

BELOW_CEILING = range(0, 9)


class TestVersionTriplet:
    """Tests for the VersionTriplet value object."""

    def test_string_form(self):
        assert str(VersionTriplet(1, 2, 3)) == "1.2.3"

    def test_as_tuple(self):
        assert VersionTriplet(0, 0, 9).as_tuple() == (0, 0, 9)

    def test_equality(self):
        assert VersionTriplet(1, 2, 3) == VersionTriplet(1, 2, 3)
        assert VersionTriplet(1, 2, 3) != VersionTriplet(1, 2, 4)

    @pytest.mark.parametrize("components", [(10, 0, 0), (0, -1, 0), (0, 0, 42)])
    def test_out_of_range_rejected(self, components):
        with pytest.raises(ValueError, match="must be in range"):
            VersionTriplet(*components)

    def test_non_int_rejected(self):
        with pytest.raises(ValueError, match="must be an int"):
            VersionTriplet("1", 2, 3)

    def test_immutable(self):
        triplet = VersionTriplet(1, 2, 3)
        with pytest.raises(AttributeError):
            triplet.major = 4


class TestIsSingleDigitTriplet:
    """Tests for is_single_digit_triplet."""

    @pytest.mark.parametrize("value", ["0.0.0", "1.2.3", "9.9.9"])
    def test_valid(self, value):
        assert is_single_digit_triplet(value)

    @pytest.mark.parametrize(
        "value",
        [
            "1.2",  # missing component
            "1.2.3.4",  # extra component
            "1.10.0",  # multi-digit component
            "01.2.3",  # leading zero makes two digits
            "1.2.a",  # non-digit
            " 1.2.3",  # leading whitespace
            "1.2.3 ",  # trailing whitespace
            "1.2.3\n",  # trailing newline
            "1-2-3",  # wrong separator
            "١.2.3",  # non-ASCII digit
            "",
        ],
    )
    def test_invalid(self, value):
        assert not is_single_digit_triplet(value)

    def test_non_string(self):
        assert not is_single_digit_triplet(None)
        assert not is_single_digit_triplet(123)


class TestParseTriplet:
    """Tests for parse_triplet."""

    def test_parse(self):
        assert parse_triplet("4.5.6", "Cargo.toml") == VersionTriplet(4, 5, 6)

    def test_format_error_names_manifest_and_value(self):
        with pytest.raises(FormatError) as excinfo:
            parse_triplet("1.2", "Cargo.toml")
        assert excinfo.value.manifest_name == "Cargo.toml"
        assert excinfo.value.value == "1.2"
        assert "Cargo.toml version '1.2'" in str(excinfo.value)

    def test_format_error_includes_path(self, tmp_path):
        path = tmp_path / "PKGBUILD"
        with pytest.raises(FormatError, match="PKGBUILD") as excinfo:
            parse_triplet("1.2.10", "PKGBUILD", path)
        assert excinfo.value.path == path

    def test_component_count_is_enforced(self):
        with patch.object(Limits, "COMPONENT_COUNT", 4):
            with pytest.raises(FormatError):
                parse_triplet("1.2.3", "Cargo.toml")


class TestBumpTriplet:
    """Tests for bump_triplet."""

    def test_minor_example(self):
        assert bump_triplet(VersionTriplet(1, 2, 3), Action.MINOR) == VersionTriplet(1, 3, 0)

    def test_accepts_action_name(self):
        assert bump_triplet(VersionTriplet(1, 2, 3), "subminor") == VersionTriplet(1, 2, 4)

    def test_sync_is_identity(self):
        current = VersionTriplet(9, 9, 9)
        assert bump_triplet(current, Action.SYNC) is current

    def test_major_resets_right_components(self):
        for major, minor, subminor in itertools.product(BELOW_CEILING, repeat=3):
            bumped = bump_triplet(VersionTriplet(major, minor, subminor), Action.MAJOR)
            assert bumped == VersionTriplet(major + 1, 0, 0)

    def test_minor_keeps_major_and_resets_subminor(self):
        for major, minor, subminor in itertools.product(BELOW_CEILING, repeat=3):
            bumped = bump_triplet(VersionTriplet(major, minor, subminor), Action.MINOR)
            assert bumped == VersionTriplet(major, minor + 1, 0)

    def test_subminor_keeps_left_components(self):
        for major, minor, subminor in itertools.product(BELOW_CEILING, repeat=3):
            bumped = bump_triplet(VersionTriplet(major, minor, subminor), Action.SUBMINOR)
            assert bumped == VersionTriplet(major, minor, subminor + 1)

    @pytest.mark.parametrize(
        "current, action",
        [
            (VersionTriplet(9, 0, 0), Action.MAJOR),
            (VersionTriplet(1, 9, 0), Action.MINOR),
            (VersionTriplet(1, 2, 9), Action.SUBMINOR),
        ],
    )
    def test_ceiling_is_a_hard_stop(self, current, action):
        with pytest.raises(VersionOverflowError, match=f"cannot bump {action.value} beyond 9"):
            bump_triplet(current, action)

    def test_overflow_is_an_overflow_error(self):
        with pytest.raises(OverflowError):
            bump_triplet(VersionTriplet(1, 2, 9), Action.SUBMINOR)

    def test_no_carry_from_full_subminor_on_minor_bump(self):
        # Only the targeted component is checked against the ceiling
        assert bump_triplet(VersionTriplet(1, 2, 9), Action.MINOR) == VersionTriplet(1, 3, 0)
        assert bump_triplet(VersionTriplet(1, 9, 9), Action.MAJOR) == VersionTriplet(2, 0, 0)


class TestAction:
    """Tests for the Action enum."""

    def test_names(self):
        assert Action.names() == ["major", "minor", "subminor", "sync"]

    def test_from_string(self):
        assert Action.from_string("sync") is Action.SYNC

    def test_from_string_unknown(self):
        with pytest.raises(ValueError, match="Unknown action"):
            Action.from_string("patch")

    def test_is_bump(self):
        assert Action.MAJOR.is_bump
        assert not Action.SYNC.is_bump
