"""
Serialization Utilities

Provides to/from JSON utilities for the question models.

- Clean separation: `serialize_*` and `deserialize_*` functions
- All models have `to_dict()` and `from_dict()` methods
- Never trust calculated values (has_detected_answer) on load
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from ..models.questions import Question


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: Question) -> dict[str, Any]:
    """
    Serialize a Question to a dictionary.

    Args:
        question: Question instance to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return question.to_dict()


def deserialize_question(data: dict[str, Any]) -> Question:
    """
    Deserialize a Question from a dictionary.

    Args:
        data: Dictionary from JSON

    Returns:
        Question instance

    Raises:
        ValueError: If data is missing required keys or is invalid
    """
    if "id" not in data:
        raise ValueError(f"Question payload missing 'id': {sorted(data)}")
    if not isinstance(data.get("options", []), list):
        raise ValueError(f"Question {data['id']!r}: 'options' must be a list")
    return Question.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# JSONL Files
# ─────────────────────────────────────────────────────────────────────────────

def load_questions_jsonl(path: Path) -> list[Question]:
    """
    Load questions from a JSONL file.

    Args:
        path: Path to questions.jsonl file

    Returns:
        List of Question instances in file order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If any line is not a valid question
    """
    if not path.exists():
        raise FileNotFoundError(f"Questions file not found: {path}")

    questions = []
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                data = json.loads(line)
                questions.append(deserialize_question(data))
            except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                raise ValueError(f"{path.name}:{line_no}: invalid question: {e}") from e

    return questions


def save_questions_jsonl(questions: Iterable[Question], path: Path) -> None:
    """
    Save questions to a JSONL file.

    Args:
        questions: Question instances to save
        path: Output path for questions.jsonl
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        for question in questions:
            data = serialize_question(question)
            f.write(json.dumps(data, ensure_ascii=False))
            f.write("\n")
