"""
Module: options

Purpose:
    Provides the Option dataclass - one answer choice of a multiple-choice
    question. Immutable; correctness changes produce a new Option.

Key Functions:
    - Option.with_correct(flag): Copy with a different correctness flag
    - Option.to_dict() / Option.from_dict(): Serialization

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.questions.Question
    - extractor.segmenter
    - builder.variants
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

# Letters used to label options in generated variants and the answer key
OPTION_LETTERS = ("A", "B", "C", "D", "E", "F", "G", "H")


@dataclass(frozen=True)
class Option:
    """
    Single answer choice (immutable).

    Attributes:
        id: Identity key, unique within its Question
        text: Visible option text (never contains the sentinel token)
        is_correct: Whether this option is the correct answer
        original_label: Letter printed in the source document ("A", "B"...)

    Example:
        >>> opt = Option(id="q001.o2", text="4", is_correct=True, original_label="B")
        >>> opt.with_correct(False).is_correct
        False
    """

    id: str
    text: str
    is_correct: bool = False
    original_label: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate option on construction."""
        if not self.id:
            raise ValueError("Option id must be non-empty")
        if self.original_label is not None and len(self.original_label) != 1:
            raise ValueError(
                f"original_label must be a single letter: {self.original_label!r}"
            )

    def with_correct(self, is_correct: bool) -> Option:
        """Return a copy with the given correctness flag."""
        if is_correct == self.is_correct:
            return self
        return replace(self, is_correct=is_correct)

    def to_dict(self) -> dict:
        d = {
            "id": self.id,
            "text": self.text,
            "is_correct": self.is_correct,
        }
        if self.original_label is not None:
            d["original_label"] = self.original_label
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Option:
        return cls(
            id=data["id"],
            text=data.get("text", ""),
            is_correct=bool(data.get("is_correct", False)),
            original_label=data.get("original_label"),
        )
