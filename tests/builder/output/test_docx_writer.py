"""
Unit tests for the Word variant renderer.
"""

import io
import random

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt

from mcq_toolkit.builder.output.docx_writer import render_variant_docx
from mcq_toolkit.builder.variants import generate_variants


class TestRenderVariantDocx:
    """Tests for render_variant_docx()."""

    def test_layout(self, reviewed_questions):
        variant = generate_variants(reviewed_questions, 1, random.Random(3))[0]
        data = render_variant_docx(variant, "Exam Version 1")

        doc = Document(io.BytesIO(data))
        paragraphs = doc.paragraphs

        title = paragraphs[0]
        assert title.text == "Exam Version 1"
        assert title.alignment == WD_ALIGN_PARAGRAPH.CENTER
        assert title.runs[0].bold
        assert title.runs[0].font.size == Pt(16)

        first = variant.questions[0]
        stem = paragraphs[1]
        assert stem.text == f"1. {first.question.text}"
        assert stem.runs[0].bold

        options = paragraphs[2:2 + len(first.options)]
        assert [p.text for p in options] == [
            f"{letter}. {opt.text}" for letter, opt in zip("ABCD", first.options)
        ]
        assert all(p.paragraph_format.left_indent == Inches(0.5) for p in options)

    def test_every_question_is_numbered(self, reviewed_questions):
        variant = generate_variants(reviewed_questions, 1, random.Random(1))[0]
        doc = Document(io.BytesIO(render_variant_docx(variant, "T")))
        stems = [p.text for p in doc.paragraphs if p.runs and p.runs[0].bold][1:]
        assert [s.split(".")[0] for s in stems] == ["1", "2"]
