"""
Core Models Package

Immutable, validated data models that serve as the single source of truth.

All models in this package are frozen dataclasses. Review edits and
shuffling never mutate a record: review produces new Question copies via
Question.with_answer(), and shuffling produces new orderings that refer to
the same Option objects by identity.
"""

from .options import OPTION_LETTERS, Option
from .questions import Question

__all__ = [
    "OPTION_LETTERS",
    "Option",
    "Question",
]
