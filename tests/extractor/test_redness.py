"""
Unit tests for the red-dominance color predicate.
"""

import pytest

from mcq_toolkit.extractor.redness import is_redish, parse_hex_color


class TestIsRedish:
    """Tests for is_redish()."""

    @pytest.mark.parametrize("color", ["FF0000", "ff0000", "#FF0000", "C00000", "FFB2B2", "FF0000FF", " E00000 "])
    def test_when_red_dominant_then_true(self, color):
        """Strong red with weak green/blue qualifies."""
        assert is_redish(color)

    @pytest.mark.parametrize("color", [None, "", "auto", "AUTO", "000000", "FF00", "#F00", "0000FF", "FFB3B3", "960000", "ZZZZZZ"])
    def test_when_not_red_dominant_then_false(self, color):
        """Missing, short, keyword, black, non-red or malformed values are rejected."""
        assert not is_redish(color)

    def test_threshold_is_exclusive(self):
        """R must exceed 150 strictly."""
        assert not is_redish("960000")  # 150
        assert is_redish("970000")      # 151

    def test_only_one_leading_hash_is_stripped(self):
        """A doubled hash leaves a malformed value."""
        assert not is_redish("##FF0000")


class TestParseHexColor:
    """Tests for parse_hex_color()."""

    def test_decodes_first_six_characters(self):
        assert parse_hex_color("C0FF10AA") == (0xC0, 0xFF, 0x10)

    def test_returns_none_when_malformed(self):
        assert parse_hex_color("GG0000") is None
        assert parse_hex_color("FFF") is None
