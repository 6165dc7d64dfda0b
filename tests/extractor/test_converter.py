"""
Unit tests for the docx -> block text converter.
"""

import pytest

from mcq_toolkit.extractor.converter import convert_to_blocks, html_to_blocks
from mcq_toolkit.extractor.errors import DocumentConversionError, ExtractionError
from mcq_toolkit.extractor.marker import mark_package


class TestHtmlToBlocks:
    """Tests for html_to_blocks()."""

    def test_paragraphs_and_headings_are_blocks(self):
        html = "<h1>Exam</h1><p>Câu 1: x</p><p>A. <strong>y</strong></p>"
        assert html_to_blocks(html) == ["Exam", "Câu 1: x", "A. y"]

    def test_list_items_are_blocks_with_nested_lists_following(self):
        html = "<ul><li>A. a<ul><li>nested</li></ul></li><li>B. b</li></ul>"
        assert html_to_blocks(html) == ["A. a", "nested", "B. b"]

    def test_table_cells_yield_paragraph_blocks(self):
        html = (
            "<table><tr>"
            "<td><p>A. 1</p><p>B. 2</p></td>"
            "<td>C. 3</td>"
            "</tr></table>"
        )
        assert html_to_blocks(html) == ["A. 1", "B. 2", "C. 3"]

    def test_line_break_becomes_space(self):
        assert html_to_blocks("<p>A. 1<br />B. 2</p>") == ["A. 1 B. 2"]

    def test_whitespace_is_not_stripped(self):
        """Blocks keep leading space so the tokenizer sees marker boundaries."""
        assert html_to_blocks("<p> [[CORRECT_ANS]]B. 4</p>") == [" [[CORRECT_ANS]]B. 4"]


class TestConvertToBlocks:
    """Tests for convert_to_blocks()."""

    def test_converts_document_in_order(self, docx_factory):
        package = docx_factory(["Câu 1: 2+2=?", "A. 3", "B. 4"])
        result = convert_to_blocks(package)
        assert [b.strip() for b in result.blocks] == ["Câu 1: 2+2=?", "A. 3", "B. 4"]
        assert result.html.startswith("<p>")

    def test_sentinel_survives_conversion(self, docx_factory):
        """Marker text injected into runs reaches the block texts verbatim."""
        package = docx_factory([["A. 3 B. ", ("4", "red"), " C. 5"]])
        marked = mark_package(package)
        result = convert_to_blocks(marked.package)
        assert len(result.blocks) == 1
        assert "[[CORRECT_ANS]]4" in result.blocks[0]
        assert result.blocks[0].index("B.") < result.blocks[0].index("[[CORRECT_ANS]]")

    def test_when_not_a_package_then_raises_conversion_error(self):
        """Converter failures are reported as DocumentConversionError."""
        with pytest.raises(DocumentConversionError, match="Document conversion failed") as excinfo:
            convert_to_blocks(b"not a docx")
        assert isinstance(excinfo.value, ExtractionError)
