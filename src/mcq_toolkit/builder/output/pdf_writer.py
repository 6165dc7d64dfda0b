"""
Module: builder.output.pdf_writer

Purpose:
    Render one exam variant as a PDF in memory, using the same layout as
    the Word output.

Key Functions:
    - render_variant_pdf(): ExamVariant -> .pdf bytes

Dependencies:
    - reportlab: PDF generation (platypus flowables)
"""

from __future__ import annotations

import logging
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm, inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from mcq_toolkit.core.models import OPTION_LETTERS

from ..variants import ExamVariant

logger = logging.getLogger(__name__)


def _styles():
    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(
        name="VariantTitle",
        parent=styles["Normal"],
        fontName="Helvetica-Bold",
        fontSize=16,
        leading=20,
        alignment=TA_CENTER,
        spaceAfter=12,
    ))
    styles.add(ParagraphStyle(
        name="QuestionStem",
        parent=styles["Normal"],
        fontName="Helvetica-Bold",
        fontSize=12,
        leading=15,
        spaceBefore=8,
        spaceAfter=4,
    ))
    styles.add(ParagraphStyle(
        name="OptionText",
        parent=styles["Normal"],
        fontName="Helvetica",
        fontSize=11,
        leading=14,
        leftIndent=0.5 * inch,
        spaceAfter=2,
    ))
    return styles


def render_variant_pdf(variant: ExamVariant, title: str) -> bytes:
    """
    Render a variant to PDF bytes.

    Text is escaped before being handed to Paragraph, which parses a
    small markup language.

    Args:
        variant: Variant to render
        title: Title line

    Returns:
        PDF bytes
    """
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=2 * cm,
        rightMargin=2 * cm,
        topMargin=2 * cm,
        bottomMargin=2 * cm,
        title=title,
    )
    styles = _styles()

    story = [Paragraph(escape(title), styles["VariantTitle"]), Spacer(1, 6)]
    for number, item in enumerate(variant.questions, start=1):
        story.append(Paragraph(f"{number}. {escape(item.question.text)}", styles["QuestionStem"]))
        for letter, option in zip(OPTION_LETTERS, item.options):
            story.append(Paragraph(f"{letter}. {escape(option.text)}", styles["OptionText"]))

    doc.build(story)
    data = buffer.getvalue()
    logger.debug(f"Rendered variant {variant.version} to pdf ({len(data)} bytes)")
    return data
