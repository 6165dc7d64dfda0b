"""
Module: review.session

Purpose:
    Reviewer step between extraction and generation. Lets the reviewer pick
    the correct option for questions where formatting detection failed or
    was ambiguous, and gates progression until every question has exactly
    one correct option.

Key Classes:
    - ReviewSession: Holds the session's question list
    - ReviewIssue: Why a question blocks generation
    - ReviewIncompleteError: Raised by confirm() when issues remain

Dependencies:
    - core.models: Question, OPTION_LETTERS

Used By:
    - cli: generate command
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from mcq_toolkit.core.models import OPTION_LETTERS, Question

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReviewIssue:
    """A question that blocks generation."""
    question_id: str
    original_number: Optional[int]
    reason: str

    def __str__(self) -> str:
        number = self.original_number if self.original_number is not None else "?"
        return f"#{number}: {self.reason}"


class ReviewIncompleteError(Exception):
    """
    Review cannot be confirmed yet.

    Attributes:
        issues: Questions still blocking generation
    """

    def __init__(self, issues: List[ReviewIssue]):
        self.issues = issues
        super().__init__(
            f"Please select a correct answer for the {len(issues)} highlighted questions."
        )


class ReviewSession:
    """
    Ephemeral review state for one parsed document.

    Questions are immutable; selecting an answer swaps in a new Question
    built with Question.with_answer(), so ids and original numbers never
    change and options are never added or removed.

    Example:
        >>> session = ReviewSession(result.questions)
        >>> session.missing_answers
        1
        >>> session.select_answer("q003", "q003.o2")
        >>> questions = session.confirm()
    """

    def __init__(self, questions: Iterable[Question]):
        self._questions: List[Question] = list(questions)

    @property
    def questions(self) -> Tuple[Question, ...]:
        return tuple(self._questions)

    @property
    def total(self) -> int:
        return len(self._questions)

    @property
    def missing_answers(self) -> int:
        """Questions with no detected answer at all."""
        return sum(1 for q in self._questions if not q.has_detected_answer)

    def get(self, question_id: str) -> Question:
        for question in self._questions:
            if question.id == question_id:
                return question
        raise KeyError(f"Unknown question id: {question_id!r}")

    def find_by_number(self, original_number: int) -> Question:
        """First question printed with the given number."""
        for question in self._questions:
            if question.original_number == original_number:
                return question
        raise KeyError(f"No question numbered {original_number}")

    def select_answer(self, question_id: str, option_id: str) -> Question:
        """
        Mark one option correct and every other option of the question wrong.

        Args:
            question_id: Question to edit
            option_id: Option to mark correct

        Returns:
            The updated Question

        Raises:
            KeyError: If either id is unknown
        """
        for index, question in enumerate(self._questions):
            if question.id == question_id:
                updated = question.with_answer(option_id)
                self._questions[index] = updated
                logger.debug(f"Question {question_id}: answer set to {option_id}")
                return updated
        raise KeyError(f"Unknown question id: {question_id!r}")

    def select_answer_letter(self, original_number: int, letter: str) -> Question:
        """
        Mark the option at a letter position ("A" = first) correct.

        Args:
            original_number: Printed question number
            letter: Position letter in the source option order

        Raises:
            KeyError: If the question is unknown
            ValueError: If the letter is out of range for the question
        """
        question = self.find_by_number(original_number)
        letter = letter.strip().upper()
        if letter not in OPTION_LETTERS or OPTION_LETTERS.index(letter) >= len(question.options):
            raise ValueError(
                f"Question {original_number} has {len(question.options)} options; "
                f"cannot select {letter!r}"
            )
        option = question.options[OPTION_LETTERS.index(letter)]
        return self.select_answer(question.id, option.id)

    def issues(self) -> List[ReviewIssue]:
        """
        List questions that block generation.

        A question blocks when it has no options, more options than the
        output letter alphabet, or not exactly one correct option.
        """
        issues: List[ReviewIssue] = []
        for question in self._questions:
            reason = _blocking_reason(question)
            if reason:
                issues.append(ReviewIssue(question.id, question.original_number, reason))
        return issues

    @property
    def unresolved(self) -> int:
        return len(self.issues())

    def confirm(self) -> Tuple[Question, ...]:
        """
        Finish the review.

        Returns:
            The reviewed questions, ready for variant generation

        Raises:
            ReviewIncompleteError: If any question still blocks generation
        """
        issues = self.issues()
        if issues:
            logger.warning(f"Review incomplete: {len(issues)} questions unresolved")
            raise ReviewIncompleteError(issues)
        logger.info(f"Review confirmed for {len(self._questions)} questions")
        return self.questions


def _blocking_reason(question: Question) -> Optional[str]:
    if not question.options:
        return "no options detected"
    if len(question.options) > len(OPTION_LETTERS):
        return f"{len(question.options)} options exceed the {len(OPTION_LETTERS)}-letter alphabet"
    correct = len(question.correct_options)
    if correct == 0:
        return "no correct answer selected"
    if correct > 1:
        return f"{correct} options marked correct"
    return None
