"""
Module: extractor.pipeline

Purpose:
    Main pipeline orchestrator for question extraction from a styled
    .docx exam. Mark -> Convert -> Segment.

Key Functions:
    - parse_document(): Main entry point for extraction

Key Classes:
    - ParseResult: Questions plus the diagnostics collected on the way

Dependencies:
    - extractor.marker: Sentinel injection into answer-styled runs
    - extractor.converter: mammoth docx -> block texts
    - extractor.segmenter: Block texts -> Question records

Used By:
    - cli: inspect / generate commands
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from mcq_toolkit.core.models import Question

from .config import ExtractionConfig
from .converter import convert_to_blocks
from .diagnostics import DiagnosticsLog
from .errors import NoQuestionsFoundError
from .marker import detect_colors, mark_package
from .segmenter import segment_blocks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """
    Result of parsing an exam document.

    Attributes:
        questions: Questions in document order
        file_name: Source file name ("" for raw bytes)
        diagnostics: Log, marked XML, converter HTML and detected colors
    """
    questions: Tuple[Question, ...]
    file_name: str
    diagnostics: DiagnosticsLog

    @property
    def missing_answers(self) -> int:
        """Number of questions without any detected answer."""
        return sum(1 for q in self.questions if not q.has_detected_answer)


def parse_document(
    source: Union[Path, bytes],
    config: Optional[ExtractionConfig] = None,
    *,
    file_name: str = "",
) -> ParseResult:
    """
    Extract questions from a styled multiple-choice .docx exam.

    Pipeline:
    1. Mark answer-styled runs with the sentinel (non-fatal on failure)
    2. Convert the marked package to block texts (fatal on failure)
    3. Segment blocks into Question/Option records

    Args:
        source: Path to a .docx file, or its bytes
        config: Optional extraction configuration
        file_name: Display name when source is bytes

    Returns:
        ParseResult with questions and diagnostics

    Raises:
        FileNotFoundError: If source path doesn't exist
        DocumentConversionError: If the converter rejects the package
        NoQuestionsFoundError: If no question start was recognised

    Example:
        >>> result = parse_document(Path("exam.docx"))
        >>> print(f"Parsed {len(result.questions)} questions, "
        ...       f"{result.missing_answers} need review")
        Parsed 40 questions, 2 need review
    """
    config = config or ExtractionConfig()
    diagnostics = DiagnosticsLog()
    start_time = time.perf_counter()

    if isinstance(source, Path):
        if not source.exists():
            raise FileNotFoundError(f"Document not found: {source}")
        file_name = file_name or source.name
        package = source.read_bytes()
    else:
        package = source

    logger.info(f"Parsing {file_name or 'document'} ({len(package)} bytes)")

    # 1. Mark answer runs
    marked = mark_package(package, config, diagnostics)
    diagnostics.document_xml = marked.document_xml
    diagnostics.detected_colors = detect_colors(package, config)

    # 2. Convert (DocumentConversionError propagates)
    try:
        conversion = convert_to_blocks(marked.package)
    except Exception as e:
        diagnostics.record("converter", f"Conversion error: {e}", level=logging.ERROR)
        raise
    diagnostics.html = conversion.html
    diagnostics.record("converter", f"HTML Generated Length: {len(conversion.html)}")
    for message in conversion.messages:
        diagnostics.record("converter", message, level=logging.DEBUG)

    # 3. Segment
    questions = segment_blocks(conversion.blocks, config)
    diagnostics.record("segmenter", f"Parsed {len(questions)} questions.")

    if not questions:
        raise NoQuestionsFoundError(
            "No questions found. Check that questions are numbered like "
            "'Câu 1:' or 'Question 1.' and options are labelled 'A.' to "
            f"'{config.option_labels[-1]}.'",
            diagnostics=diagnostics,
        )

    for question in questions:
        if not question.options:
            diagnostics.warning("segmenter", f"Question {question.original_number} has no options")
        elif not question.has_detected_answer:
            diagnostics.record("segmenter", f"Question {question.original_number}: no answer detected")
        elif len(question.correct_options) > 1:
            diagnostics.warning(
                "segmenter",
                f"Question {question.original_number}: {len(question.correct_options)} answers detected",
            )

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Parsed {len(questions)} questions from {file_name or 'document'} in {elapsed:.2f}s "
        f"({sum(1 for q in questions if not q.has_detected_answer)} without detected answers)"
    )

    return ParseResult(
        questions=questions,
        file_name=file_name,
        diagnostics=diagnostics,
    )
