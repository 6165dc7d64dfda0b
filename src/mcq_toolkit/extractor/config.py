"""
Module: extractor.config

Purpose:
    Configuration dataclass for the extraction pipeline. Immutable settings
    for the sentinel token, the body part location and the label grammar.

Key Classes:
    - ExtractionConfig: Main configuration for extraction

Dependencies:
    - dataclasses (std)
    - core.models.options: OPTION_LETTERS (output alphabet cap)

Used By:
    - extractor.marker: Sentinel token and body part path
    - extractor.tokenizer: Label alphabet and question keywords
    - extractor.pipeline: Passes config through all stages
"""

from __future__ import annotations

from dataclasses import dataclass

from mcq_toolkit.core.models.options import OPTION_LETTERS

# Reserved marker injected into answer-styled runs. Must never occur in
# ordinary exam text.
SENTINEL = "[[CORRECT_ANS]]"

# Main body part inside a .docx package
DOCUMENT_PART = "word/document.xml"

DEFAULT_OPTION_LABELS = "ABCD"

# Words that may precede a question number ("Câu 1:", "Question 2.")
DEFAULT_QUESTION_KEYWORDS = ("Câu", "Question", "Bài", "Số")


@dataclass(frozen=True)
class ExtractionConfig:
    """
    Configuration for the question extraction pipeline (immutable).

    Attributes:
        sentinel: Token smuggled through conversion to flag answer runs
        document_part: Path of the main body XML inside the package
        option_labels: Capital letters recognised as option labels.
            At most len(OPTION_LETTERS) letters, so every detected option
            can be relabelled in generated variants.
        question_keywords: Optional words preceding a question number

    Example:
        >>> config = ExtractionConfig(option_labels="ABCDE")
        >>> config.sentinel
        '[[CORRECT_ANS]]'
    """

    sentinel: str = SENTINEL
    document_part: str = DOCUMENT_PART
    option_labels: str = DEFAULT_OPTION_LABELS
    question_keywords: tuple[str, ...] = DEFAULT_QUESTION_KEYWORDS

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.sentinel or self.sentinel != self.sentinel.strip():
            raise ValueError(f"sentinel must be non-empty without outer whitespace: {self.sentinel!r}")
        if not self.document_part:
            raise ValueError("document_part must be non-empty")
        if not self.option_labels:
            raise ValueError("option_labels must contain at least one letter")
        if len(set(self.option_labels)) != len(self.option_labels):
            raise ValueError(f"option_labels must not repeat letters: {self.option_labels!r}")
        if len(self.option_labels) > len(OPTION_LETTERS):
            raise ValueError(
                f"option_labels supports at most {len(OPTION_LETTERS)} letters: "
                f"{self.option_labels!r}"
            )
        invalid = [c for c in self.option_labels if c not in OPTION_LETTERS]
        if invalid:
            raise ValueError(f"option_labels must be drawn from {''.join(OPTION_LETTERS)}: {invalid}")
        if any(not kw.strip() for kw in self.question_keywords):
            raise ValueError("question_keywords must not contain blank entries")
