# SPDX-License-Identifier: MIT
"""Unit tests for deriving new versions."""

import pytest

from theversion import EMPTY_VERSION, parse_version


class TestBump:
    """Tests for the bump_* methods."""

    def test_bump_patch(self):
        assert str(parse_version("1.2.3").bump_patch()) == "1.2.4"

    def test_bump_major_resets_present_segments(self):
        assert str(parse_version("1.2.3").bump_major()) == "2.0.0"

    def test_bump_minor(self):
        assert str(parse_version("1.2.3").bump_minor()) == "1.3.0"

    def test_bump_build_adds_segment(self):
        assert str(parse_version("1.2.3").bump_build()) == "1.2.3.1"

    def test_bump_keeps_shape(self):
        """Test that only segments present in the source are reset."""
        assert str(parse_version("1.2").bump_major()) == "2.0"
        assert str(parse_version("1").bump_major()) == "2"
        assert str(parse_version("1.2.3.4").bump_minor()) == "1.3.0.0"

    def test_bump_lower_segment_than_present(self):
        """Test bumping a segment the source did not have."""
        assert str(parse_version("1").bump_minor()) == "1.1"
        assert str(parse_version("1.2").bump_patch()) == "1.2.1"
        assert str(parse_version("1").bump_patch()) == "1.0.1"

    def test_bump_normalizes_leading_zeros(self):
        assert str(parse_version("1.02.3").bump_patch()) == "1.2.4"

    def test_suffix_survives_bump_patch(self):
        assert str(parse_version("1.0.0-beta1").bump_patch()) == "1.0.1-beta1"

    def test_suffix_survives_every_bump(self):
        v = parse_version("1.0.0-beta1")
        assert str(v.bump_major()) == "2.0.0-beta1"
        assert str(v.bump_minor()) == "1.1.0-beta1"
        assert str(v.bump_build()) == "1.0.0.1-beta1"

    def test_glued_suffix(self):
        bumped = parse_version("1.1alpha").bump_minor()
        assert str(bumped) == "1.2alpha"
        assert bumped.is_alpha is True

    def test_dot_separator_before_suffix_not_restored(self):
        """Test that the consumed dot before a suffix is not written back."""
        bumped = parse_version("2.0.0.rc1").bump_patch()
        assert str(bumped) == "2.0.1rc1"
        assert bumped.special == "rc1"

    def test_empty_version(self):
        assert str(EMPTY_VERSION.bump_major()) == "1"
        assert str(EMPTY_VERSION.bump_last_part()) == "1"

    def test_original_unchanged(self):
        v = parse_version("1.2.3")
        v.bump_major()
        assert str(v) == "1.2.3"
        assert v.major == 1

    def test_result_is_valid(self):
        bumped = parse_version("9.9.9").bump_patch()
        assert bumped.is_valid is True
        assert bumped.parts == (9, 9, 10, 0)
        assert bumped > parse_version("9.9.9")


class TestBumpLastPart:
    """Tests for bump_last_part."""

    @pytest.mark.parametrize(
        "version,expected",
        [
            ("7", "8"),
            ("1.2", "1.3"),
            ("1.2.3", "1.2.4"),
            ("1.2.3.4", "1.2.3.5"),
            ("1.2-rc1", "1.3-rc1"),
        ],
    )
    def test_bumps_deepest_present_segment(self, version, expected):
        assert str(parse_version(version).bump_last_part()) == expected


class TestSet:
    """Tests for the set_* methods."""

    def test_set_major(self):
        assert str(parse_version("1.2.3").set_major(3)) == "3.0.0"

    def test_set_minor(self):
        assert str(parse_version("1.2.3").set_minor(7)) == "1.7.0"

    def test_set_patch(self):
        assert str(parse_version("1.2.3").set_patch(0)) == "1.2.0"

    def test_set_build(self):
        assert str(parse_version("1.2.3").set_build(9)) == "1.2.3.9"

    def test_set_keeps_suffix(self):
        assert str(parse_version("1.2-beta").set_minor(5)) == "1.5-beta"

    def test_set_lower_value(self):
        """Test that set may move a version backwards."""
        assert str(parse_version("3.1").set_major(2)) == "2.0"

    def test_negative_value_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            parse_version("1.2.3").set_minor(-1)


class TestByName:
    """Tests for bump(part) and set(part, value)."""

    def test_bump_by_name(self):
        v = parse_version("1.2.3")
        assert str(v.bump("major")) == "2.0.0"
        assert str(v.bump("minor")) == "1.3.0"
        assert str(v.bump("patch")) == "1.2.4"
        assert str(v.bump("build")) == "1.2.3.1"
        assert str(v.bump("last")) == "1.2.4"

    def test_set_by_name(self):
        assert str(parse_version("1.2.3").set("patch", 8)) == "1.2.8"

    def test_unknown_part(self):
        with pytest.raises(ValueError, match="Unknown version part"):
            parse_version("1.2.3").bump("micro")

    def test_set_last_rejected(self):
        with pytest.raises(ValueError, match="Unknown version part"):
            parse_version("1.2.3").set("last", 1)
