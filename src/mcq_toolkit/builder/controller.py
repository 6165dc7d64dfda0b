"""
Module: builder.controller

Purpose:
    Orchestrate variant generation and packaging.
    Shuffle → Answer key → Render → Archive

Key Functions:
    - build_exams(): Main entry point for building the exam archive

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.variants: Shuffled variants
    - builder.answer_key: Answer key compilation
    - builder.output: docx/pdf rendering and ZIP packaging

Used By:
    - mcq_toolkit.cli: generate command
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from mcq_toolkit.core.models import Question

from .answer_key import AnswerKey, build_answer_key
from .config import BuilderConfig
from .output import render_variant_docx, render_variant_pdf, write_exam_zip
from .variants import ERROR_LETTER, ExamVariant, generate_variants

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]

_RENDERERS = {
    "docx": render_variant_docx,
    "pdf": render_variant_pdf,
}


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        archive_path: Path to the written ZIP archive
        variants: Generated variants, version order
        answer_key: Compiled answer key
        member_names: Variant document names inside the archive
        warnings: Any warnings during build

    Example:
        >>> result = build_exams(questions, BuilderConfig(version_count=3))
        >>> print(f"Wrote {len(result.variants)} versions to {result.archive_path}")
    """
    archive_path: Path
    variants: Tuple[ExamVariant, ...]
    answer_key: AnswerKey
    member_names: Tuple[str, ...]
    warnings: Tuple[str, ...]


def build_exams(
    questions: Sequence[Question],
    config: BuilderConfig,
    progress_callback: Optional[ProgressCallback] = None,
) -> BuildResult:
    """
    Build the shuffled exam archive.

    Pipeline:
    1. Generate variants (question and option order shuffled)
    2. Compile answer key
    3. Render every variant document in memory
    4. Write the archive (only after all members rendered)

    Args:
        questions: Reviewed questions (one correct option each)
        config: Build configuration
        progress_callback: Called with (done, total) before rendering and
            after each variant

    Returns:
        BuildResult with archive path, variants and answer key

    Raises:
        BuildError: If any step fails; no archive is left behind
    """
    warnings: List[str] = []
    start_time = time.perf_counter()
    total = config.version_count

    if not questions:
        raise BuildError("No questions to build")

    logger.info(
        f"Starting build of {total} versions from {len(questions)} questions "
        f"(format={config.output_format}, seed={config.seed})"
    )

    # 1. Variants
    rng = random.Random(config.seed)
    variants = generate_variants(questions, total, rng)

    # 2. Answer key
    try:
        answer_key = build_answer_key(questions, variants)
    except KeyError as e:
        raise BuildError(f"Failed to build answer key: {e}") from e

    for question in questions:
        if len(question.correct_options) != 1:
            warnings.append(
                f"Question {question.original_number}: expected exactly one correct option"
            )
    error_cells = sum(row.count(ERROR_LETTER) for row in answer_key.rows)
    if error_cells:
        warnings.append(f"Answer key contains {error_cells} '{ERROR_LETTER}' entries")
    for warning in warnings:
        logger.warning(warning)

    # 3. Render in memory
    render = _RENDERERS[config.output_format]
    documents: Dict[str, bytes] = {}
    _notify(progress_callback, 0, total)
    for variant in variants:
        name = config.member_name(variant.version)
        try:
            documents[name] = render(variant, config.title_for(variant.version))
        except Exception as e:
            raise BuildError(f"Failed to render {name}: {e}") from e
        _notify(progress_callback, variant.version, total)
    logger.info(f"Rendered {len(documents)} {config.output_format} documents")

    # 4. Archive
    try:
        archive_path = write_exam_zip(documents, answer_key, config.output_path)
    except OSError as e:
        raise BuildError(f"Failed to write archive {config.output_path}: {e}") from e
    logger.info(f"Wrote archive: {archive_path}")

    elapsed = time.perf_counter() - start_time
    logger.info(f"Exam generation completed in {elapsed:.2f}s")

    return BuildResult(
        archive_path=archive_path,
        variants=variants,
        answer_key=answer_key,
        member_names=tuple(documents),
        warnings=tuple(warnings),
    )


def _notify(callback: Optional[ProgressCallback], done: int, total: int) -> None:
    if callback is not None:
        callback(done, total)
