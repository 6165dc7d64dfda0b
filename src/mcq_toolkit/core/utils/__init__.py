"""
Utils Package

Serialization helpers for the core models.
"""

from .serialization import (
    serialize_question,
    deserialize_question,
    load_questions_jsonl,
    save_questions_jsonl,
)

__all__ = [
    "serialize_question",
    "deserialize_question",
    "load_questions_jsonl",
    "save_questions_jsonl",
]
