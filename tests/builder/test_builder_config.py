"""
Unit tests for BuilderConfig validation.
"""

from pathlib import Path

import pytest

from mcq_toolkit.builder.config import BuilderConfig


class TestBuilderConfig:
    """Tests for BuilderConfig."""

    def test_defaults(self):
        config = BuilderConfig()
        assert config.version_count == 3
        assert config.output_path == Path("Shuffled_Exams.zip")
        assert config.output_format == "docx"
        assert config.seed is None

    @pytest.mark.parametrize("count", [1, 50])
    def test_version_count_bounds_accepted(self, count):
        assert BuilderConfig(version_count=count).version_count == count

    @pytest.mark.parametrize("count", [0, 51])
    def test_when_version_count_out_of_range_then_raises(self, count):
        with pytest.raises(ValueError, match="version_count must be between 1 and 50"):
            BuilderConfig(version_count=count)

    def test_when_unknown_format_then_raises(self):
        with pytest.raises(ValueError, match="output_format"):
            BuilderConfig(output_format="odt")

    def test_when_title_lacks_placeholder_then_raises(self):
        with pytest.raises(ValueError, match="title_template"):
            BuilderConfig(title_template="Exam")

    def test_string_output_path_is_normalised(self):
        assert BuilderConfig(output_path="out/a.zip").output_path == Path("out/a.zip")

    def test_member_names_and_titles(self):
        config = BuilderConfig(output_format="pdf")
        assert config.member_name(1) == "Test_Version_001.pdf"
        assert config.member_name(12) == "Test_Version_012.pdf"
        assert config.title_for(2) == "Exam Version 2"
