"""
Module: builder.output.docx_writer

Purpose:
    Render one exam variant as a Word document in memory.

Key Functions:
    - render_variant_docx(): ExamVariant -> .docx bytes

Dependencies:
    - python-docx: Document construction

Used By:
    - builder.controller: Build pipeline (docx format)
"""

from __future__ import annotations

import io
import logging

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt

from mcq_toolkit.core.models import OPTION_LETTERS

from ..variants import ExamVariant

logger = logging.getLogger(__name__)

TITLE_SIZE = Pt(16)
QUESTION_SIZE = Pt(12)
OPTION_INDENT = Inches(0.5)


def render_variant_docx(variant: ExamVariant, title: str) -> bytes:
    """
    Render a variant to .docx bytes.

    Layout:
        Exam Version N                (bold, centered, 16pt)
        1. <question stem>            (bold, 12pt)
            A. <option>               (indented 0.5")
            B. <option>

    Args:
        variant: Variant to render
        title: Title line

    Returns:
        Serialized document bytes
    """
    doc = Document()

    heading = doc.add_paragraph()
    heading.alignment = WD_ALIGN_PARAGRAPH.CENTER
    run = heading.add_run(title)
    run.bold = True
    run.font.size = TITLE_SIZE

    for number, item in enumerate(variant.questions, start=1):
        stem = doc.add_paragraph()
        stem_run = stem.add_run(f"{number}. {item.question.text}")
        stem_run.bold = True
        stem_run.font.size = QUESTION_SIZE

        for letter, option in zip(OPTION_LETTERS, item.options):
            para = doc.add_paragraph(f"{letter}. {option.text}")
            para.paragraph_format.left_indent = OPTION_INDENT

    buffer = io.BytesIO()
    doc.save(buffer)
    data = buffer.getvalue()
    logger.debug(f"Rendered variant {variant.version} to docx ({len(data)} bytes)")
    return data
