"""
Module: extractor.errors

Purpose:
    Exception types raised by the extraction pipeline. Conversion failures
    and "no questions found" are kept distinct so callers can tell an
    internal failure from a user-correctable format mismatch.

Key Classes:
    - ExtractionError: Base class
    - DocumentConversionError: The docx -> HTML converter rejected the package
    - NoQuestionsFoundError: Parsing succeeded but no question matched

Used By:
    - extractor.converter
    - extractor.pipeline
    - cli
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .diagnostics import DiagnosticsLog


class ExtractionError(Exception):
    """Error during question extraction."""
    pass


class DocumentConversionError(ExtractionError):
    """The document could not be converted to markup."""
    pass


class NoQuestionsFoundError(ExtractionError):
    """
    No question start was recognised in the document.

    Attributes:
        diagnostics: Log collected while parsing, for inspection
    """

    def __init__(self, message: str, diagnostics: Optional[DiagnosticsLog] = None):
        super().__init__(message)
        self.diagnostics = diagnostics
