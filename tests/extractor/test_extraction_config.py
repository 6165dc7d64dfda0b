"""
Unit tests for ExtractionConfig validation.
"""

import pytest

from mcq_toolkit.extractor.config import SENTINEL, ExtractionConfig


class TestExtractionConfig:
    """Tests for ExtractionConfig."""

    def test_defaults(self):
        """Defaults match the standard exam layout."""
        config = ExtractionConfig()
        assert config.sentinel == SENTINEL == "[[CORRECT_ANS]]"
        assert config.document_part == "word/document.xml"
        assert config.option_labels == "ABCD"
        assert "Câu" in config.question_keywords

    def test_is_hashable(self):
        """Config can be used as a cache key."""
        assert hash(ExtractionConfig()) == hash(ExtractionConfig())

    @pytest.mark.parametrize("sentinel", ["", " [[X]]", "[[X]] "])
    def test_when_bad_sentinel_then_raises_error(self, sentinel):
        with pytest.raises(ValueError, match="sentinel"):
            ExtractionConfig(sentinel=sentinel)

    def test_when_repeated_labels_then_raises_error(self):
        with pytest.raises(ValueError, match="must not repeat"):
            ExtractionConfig(option_labels="ABCA")

    def test_when_too_many_labels_then_raises_error(self):
        with pytest.raises(ValueError, match="at most 8"):
            ExtractionConfig(option_labels="ABCDEFGHI")

    def test_when_label_outside_alphabet_then_raises_error(self):
        with pytest.raises(ValueError, match="drawn from"):
            ExtractionConfig(option_labels="ABX")

    def test_when_blank_keyword_then_raises_error(self):
        with pytest.raises(ValueError, match="blank"):
            ExtractionConfig(question_keywords=("Câu", " "))
