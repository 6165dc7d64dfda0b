"""
Module: questions

Purpose:
    Provides the Question dataclass - the main data structure passed between
    extractor, review and builder. Represents one multiple-choice question
    with its ordered options. Immutable with calculated answer state.

Key Functions:
    - Question.has_detected_answer: Always calculated from options
    - Question.correct_index: Index of first correct option
    - Question.with_answer(option_id): Copy with exactly one correct option
    - Question.to_dict() / Question.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .options.Option

Used By:
    - extractor.segmenter
    - review.session
    - builder.variants / builder.answer_key
    - core.utils.serialization

Design Note:
    has_detected_answer is NEVER stored. Every edit produces a new Question,
    so the flag can never drift from the options it describes.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .options import Option


@dataclass(frozen=True)
class Question:
    """
    Multiple-choice question (immutable).

    Attributes:
        id: Identity key, unique within a parse. Correlates the question
            across every generated variant; never regenerated.
        text: Question stem (never contains the sentinel token)
        options: Ordered answer choices as they appear in the source
        original_number: Number printed in the source ("Câu 12" -> 12).
            Preserved through review, shuffling and the answer key.

    Invariants:
        - has_detected_answer is always calculated from options
        - option ids are unique within the question

    Example:
        >>> q = Question(
        ...     id="q001",
        ...     text="2+2=?",
        ...     options=(Option("q001.o1", "3"), Option("q001.o2", "4", True)),
        ...     original_number=1,
        ... )
        >>> q.has_detected_answer
        True
        >>> q.correct_index
        1
    """

    id: str
    text: str
    options: tuple[Option, ...] = ()
    original_number: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not self.id:
            raise ValueError("Question id must be non-empty")
        ids = [opt.id for opt in self.options]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate option ids in question {self.id!r}: {ids}")

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties (NEVER stored)
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def has_detected_answer(self) -> bool:
        """True iff at least one option is flagged correct."""
        return any(opt.is_correct for opt in self.options)

    @property
    def correct_options(self) -> list[Option]:
        """Options flagged correct, in document order."""
        return [opt for opt in self.options if opt.is_correct]

    @property
    def correct_index(self) -> Optional[int]:
        """
        Index of the first correct option.

        Returns:
            0-based index, or None when no option is flagged
        """
        for index, opt in enumerate(self.options):
            if opt.is_correct:
                return index
        return None

    # ─────────────────────────────────────────────────────────────────────────
    # Query / Edit Methods
    # ─────────────────────────────────────────────────────────────────────────

    def option_by_id(self, option_id: str) -> Optional[Option]:
        """Find an option by id."""
        for opt in self.options:
            if opt.id == option_id:
                return opt
        return None

    def with_answer(self, option_id: str) -> Question:
        """
        Return a copy with exactly one option marked correct.

        Ids, text and original_number are carried over unchanged.

        Args:
            option_id: Id of the option to mark correct

        Returns:
            New Question instance

        Raises:
            KeyError: If no option has that id
        """
        if self.option_by_id(option_id) is None:
            raise KeyError(f"Question {self.id!r} has no option {option_id!r}")
        options = tuple(opt.with_correct(opt.id == option_id) for opt in self.options)
        return replace(self, options=options)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON storage.

        Note: has_detected_answer is included for readers of the export,
        but from_dict ignores it and recalculates.
        """
        d = {
            "id": self.id,
            "text": self.text,
            "options": [opt.to_dict() for opt in self.options],
            "has_detected_answer": self.has_detected_answer,
        }
        if self.original_number is not None:
            d["original_number"] = self.original_number
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Question:
        return cls(
            id=data["id"],
            text=data.get("text", ""),
            options=tuple(Option.from_dict(o) for o in data.get("options", [])),
            original_number=data.get("original_number"),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"Question({self.id!r}, number={self.original_number}, "
            f"options={len(self.options)}, answered={self.has_detected_answer})"
        )
