"""
Module: builder.variants

Purpose:
    Generate N shuffled exam variants. Each variant reorders the questions
    and, independently per question, the options. Correctness travels with
    the Option objects themselves, so the answer letter of a variant is
    always the position of the option flagged correct in that variant.

Key Functions:
    - generate_variants(): Produce ExamVariant records
    - answer_letter(): Letter of the first correct option, or "ERR"

Key Classes:
    - VariantQuestion: One question as it appears in a variant
    - ExamVariant: One shuffled exam

Dependencies:
    - builder.shuffle: Fisher-Yates shuffle
    - core.models: Question, Option, OPTION_LETTERS

Used By:
    - builder.controller: Build pipeline
    - builder.answer_key: Answer key compilation
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from mcq_toolkit.core.models import OPTION_LETTERS, Option, Question

from .config import MAX_VERSIONS, MIN_VERSIONS
from .shuffle import shuffled

logger = logging.getLogger(__name__)

ERROR_LETTER = "ERR"


def answer_letter(options: Sequence[Option]) -> str:
    """
    Letter of the first correct option in the given order.

    Args:
        options: Options in display order

    Returns:
        "A".."H", or "ERR" if there are more options than letters or
        none is flagged correct
    """
    if len(options) > len(OPTION_LETTERS):
        return ERROR_LETTER
    for index, option in enumerate(options):
        if option.is_correct:
            return OPTION_LETTERS[index]
    return ERROR_LETTER


@dataclass(frozen=True)
class VariantQuestion:
    """
    A question as displayed in one variant.

    Attributes:
        question: Source question (identity preserved)
        options: Source options in this variant's display order
        answer: Letter of the correct option in this order
    """
    question: Question
    options: Tuple[Option, ...]
    answer: str


@dataclass(frozen=True)
class ExamVariant:
    """
    One shuffled exam (immutable).

    Attributes:
        version: 1-based version number
        questions: Questions in this variant's display order
    """
    version: int
    questions: Tuple[VariantQuestion, ...]

    @property
    def answers(self) -> Dict[str, str]:
        """Answer letter keyed by question id."""
        return {vq.question.id: vq.answer for vq in self.questions}


def generate_variants(
    questions: Sequence[Question],
    count: int,
    rng: Optional[random.Random] = None,
) -> Tuple[ExamVariant, ...]:
    """
    Generate shuffled exam variants.

    Args:
        questions: Reviewed questions (never mutated)
        count: Number of variants (1..50)
        rng: Random source; a fresh unseeded Random if omitted

    Returns:
        count ExamVariant records, version 1..count

    Raises:
        ValueError: If count is out of range

    Example:
        >>> variants = generate_variants(questions, 3, random.Random(7))
        >>> variants[0].answers["q001"]
        'C'
    """
    if not MIN_VERSIONS <= count <= MAX_VERSIONS:
        raise ValueError(f"count must be between {MIN_VERSIONS} and {MAX_VERSIONS}: {count}")

    rng = rng or random.Random()
    variants = []
    for version in range(1, count + 1):
        order = shuffled(questions, rng)
        items = []
        for question in order:
            options = tuple(shuffled(question.options, rng))
            items.append(VariantQuestion(question, options, answer_letter(options)))
        variants.append(ExamVariant(version=version, questions=tuple(items)))
        logger.debug(f"Generated variant {version} with {len(items)} questions")

    logger.info(f"Generated {count} variants of {len(questions)} questions")
    return tuple(variants)
