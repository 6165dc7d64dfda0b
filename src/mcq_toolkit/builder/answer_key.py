"""
Module: builder.answer_key

Purpose:
    Compile the consolidated answer key: one row per original question,
    one column per variant.

Key Functions:
    - build_answer_key(): Questions + variants -> AnswerKey

Key Classes:
    - AnswerKey: Header and rows, with CSV rendering
"""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from mcq_toolkit.core.models import Question

from .variants import ExamVariant, answer_letter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnswerKey:
    """
    Answer key table (immutable).

    Attributes:
        header: Original_Q_Num, Original_Answer, Ver_1_Ans .. Ver_N_Ans
        rows: One row per source question, sorted by original number
    """
    header: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]

    def to_csv(self, delimiter: str = ",") -> str:
        """
        Render as delimited text, rows joined by "\\n".

        Fields containing the delimiter or quotes are quoted.
        """
        buffer = io.StringIO()
        writer = csv.writer(
            buffer,
            delimiter=delimiter,
            lineterminator="\n",
            quoting=csv.QUOTE_MINIMAL,
        )
        writer.writerow(self.header)
        writer.writerows(self.rows)
        return buffer.getvalue().rstrip("\n")


def build_answer_key(
    questions: Sequence[Question],
    variants: Sequence[ExamVariant],
) -> AnswerKey:
    """
    Build the answer key for a set of variants.

    Rows are sorted stably by original number; a missing number sorts as 0
    and renders as "?". Each version column holds the letter the question's
    correct option received in that variant.

    Args:
        questions: Source questions in document order
        variants: Generated variants, in version order

    Returns:
        AnswerKey

    Raises:
        KeyError: If a variant does not contain one of the questions
    """
    header = ("Original_Q_Num", "Original_Answer") + tuple(
        f"Ver_{variant.version}_Ans" for variant in variants
    )
    answers = [variant.answers for variant in variants]

    rows = []
    for question in sorted(questions, key=lambda q: q.original_number or 0):
        number = str(question.original_number) if question.original_number is not None else "?"
        row = [number, answer_letter(question.options)]
        row.extend(per_variant[question.id] for per_variant in answers)
        rows.append(tuple(row))

    logger.debug(f"Answer key: {len(rows)} rows x {len(header)} columns")
    return AnswerKey(header=header, rows=tuple(rows))
