"""
Module: extractor

Purpose:
    Extraction pipeline turning a styled multiple-choice .docx exam into
    Question/Option records. Correct answers are inferred purely from run
    formatting (red-dominant color or underline), carried through the
    docx -> HTML conversion by a sentinel token.

Key Functions:
    - parse_document(): Main entry point (mark -> convert -> segment)
    - mark_package(): Inject the sentinel into answer-styled runs
    - convert_to_blocks(): mammoth conversion to block texts
    - segment_blocks(): Block texts -> questions
    - is_redish(): Correct-answer color predicate

Key Classes:
    - ExtractionConfig: Sentinel, label alphabet and keywords
    - ParseResult: Questions plus diagnostics
    - DiagnosticsLog: Parse diagnostics

Dependencies:
    - lxml / python-docx: Body XML rewriting
    - mammoth / bs4: Semantic conversion

Used By:
    - mcq_toolkit.cli
"""

from .config import ExtractionConfig, SENTINEL
from .converter import ConversionResult, convert_to_blocks
from .diagnostics import DiagnosticsLog
from .errors import DocumentConversionError, ExtractionError, NoQuestionsFoundError
from .marker import MarkResult, mark_package
from .pipeline import ParseResult, parse_document
from .redness import is_redish
from .segmenter import segment_blocks

__all__ = [
    # Config
    "ExtractionConfig",
    "SENTINEL",
    # Stages
    "is_redish",
    "mark_package",
    "MarkResult",
    "convert_to_blocks",
    "ConversionResult",
    "segment_blocks",
    # Pipeline
    "parse_document",
    "ParseResult",
    "DiagnosticsLog",
    # Errors
    "ExtractionError",
    "DocumentConversionError",
    "NoQuestionsFoundError",
]
