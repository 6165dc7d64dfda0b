"""
Module: extractor.segmenter

Purpose:
    Rebuild Question/Option records from the ordered block texts produced
    by the converter. Blocks are tokenized into events
    (extractor.tokenizer) and folded through a small state machine:

        SEEKING_QUESTION --QuestionStart--> IN_STEM --OptionLabel--> IN_OPTIONS
                ^                                                       |
                +---------------------- QuestionStart ------------------+

Key Functions:
    - segment_blocks(): Block texts -> tuple of Question
    - consume(): Apply one event to a SegmenterState

Key Classes:
    - SegmenterState: Explicit accumulator threaded through the fold
    - Phase: State machine phase

Dependencies:
    - core.models: Option, Question
    - extractor.tokenizer: Events

Used By:
    - extractor.pipeline: Final stage of parse_document()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from mcq_toolkit.core.models import Option, Question

from .config import ExtractionConfig
from .tokenizer import Event, OptionLabel, QuestionStart, TextSpan, tokenize_block

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    """Segmentation phase."""
    SEEKING_QUESTION = "seeking_question"  # Preamble before the first question
    IN_STEM = "in_stem"                    # Question opened, no options yet
    IN_OPTIONS = "in_options"              # At least one option seen


@dataclass
class OptionBuilder:
    """
    Mutable builder for constructing Option objects.

    Converted to an immutable Option once segmentation finishes.
    """
    id: str
    text: str = ""
    is_correct: bool = False
    original_label: Optional[str] = None

    def build(self) -> Option:
        return Option(
            id=self.id,
            text=self.text,
            is_correct=self.is_correct,
            original_label=self.original_label,
        )


@dataclass
class QuestionBuilder:
    """Mutable builder for constructing Question objects."""
    id: str
    text: str
    original_number: int
    options: List[OptionBuilder] = field(default_factory=list)

    def add_option(self, letter: str, is_correct: bool) -> OptionBuilder:
        option = OptionBuilder(
            id=f"{self.id}.o{len(self.options) + 1}",
            is_correct=is_correct,
            original_label=letter if letter != "?" else None,
        )
        self.options.append(option)
        return option

    def build(self) -> Question:
        return Question(
            id=self.id,
            text=self.text,
            options=tuple(opt.build() for opt in self.options),
            original_number=self.original_number,
        )


@dataclass
class SegmenterState:
    """
    Accumulator for one segmentation pass.

    Attributes:
        phase: Current state machine phase
        questions: Questions opened so far, in document order
        next_number: Fallback number for questions printed as 0
        next_index: Sequence used to allocate question ids
    """
    phase: Phase = Phase.SEEKING_QUESTION
    questions: List[QuestionBuilder] = field(default_factory=list)
    next_number: int = 1
    next_index: int = 1

    @property
    def current(self) -> Optional[QuestionBuilder]:
        if self.phase is Phase.SEEKING_QUESTION:
            return None
        return self.questions[-1]

    def finish(self) -> Tuple[Question, ...]:
        return tuple(builder.build() for builder in self.questions)


def consume(state: SegmenterState, event: Event) -> SegmenterState:
    """
    Apply one event to the state.

    Args:
        state: Accumulator (updated in place)
        event: Event from tokenize_block()

    Returns:
        The same state, for folding
    """
    if isinstance(event, QuestionStart):
        return _open_question(state, event)

    current = state.current
    if current is None:
        # Preamble before the first recognised question
        return state

    if isinstance(event, OptionLabel):
        current.add_option(event.letter, event.flagged)
        state.phase = Phase.IN_OPTIONS
    elif isinstance(event, TextSpan):
        if event.after_label and current.options:
            option = current.options[-1]
            option.text = _join(option.text, event.content)
            option.is_correct = option.is_correct or event.flagged
        elif not current.options:
            current.text = _join(current.text, event.content)
        else:
            option = current.options[-1]
            option.text = _join(option.text, event.content)
            if event.flagged:
                option.is_correct = True
    return state


def segment_blocks(
    blocks: Iterable[str],
    config: Optional[ExtractionConfig] = None,
) -> Tuple[Question, ...]:
    """
    Reconstruct questions from converted block texts.

    Args:
        blocks: Block texts in document order (may contain sentinels)
        config: Extraction config

    Returns:
        Questions in document order. Questions with zero options are kept.

    Example:
        >>> questions = segment_blocks(["Câu 1: 2+2=?", "A. 3", "[[CORRECT_ANS]]B. 4"])
        >>> questions[0].correct_index
        1
    """
    config = config or ExtractionConfig()
    state = SegmenterState()
    for block in blocks:
        for event in tokenize_block(block, config):
            state = consume(state, event)

    questions = state.finish()
    logger.debug(
        f"Segmented {len(questions)} questions "
        f"({sum(1 for q in questions if q.has_detected_answer)} with detected answers)"
    )
    return questions


def _open_question(state: SegmenterState, event: QuestionStart) -> SegmenterState:
    number = event.number
    if number is None:
        number = state.next_number
        state.next_number += 1

    builder = QuestionBuilder(
        id=f"q{state.next_index:03d}",
        text=event.body,
        original_number=number,
    )
    state.next_index += 1
    state.questions.append(builder)
    state.phase = Phase.IN_STEM
    logger.debug(f"Opened question {builder.id} (number {number})")
    return state


def _join(existing: str, addition: str) -> str:
    """Space-join two text fragments, ignoring empty ones."""
    return " ".join(part for part in (existing, addition) if part)
