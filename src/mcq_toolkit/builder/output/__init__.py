"""
Output Package

Variant document renderers (Word, PDF) and the archive writer.
"""

from .docx_writer import render_variant_docx
from .pdf_writer import render_variant_pdf
from .zip_writer import write_exam_zip

__all__ = [
    "render_variant_docx",
    "render_variant_pdf",
    "write_exam_zip",
]
