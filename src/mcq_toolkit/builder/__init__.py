"""
Module: builder

Purpose:
    Variant generation pipeline: shuffle reviewed questions into N exam
    versions, compile the answer key, render each version and bundle
    everything into one archive.

Key Functions:
    - generate_variants(): Shuffled ExamVariant records
    - build_answer_key(): Consolidated answer key
    - build_exams(): Main entry point for archive generation

Key Classes:
    - BuilderConfig: Configuration for building
    - ExamVariant: One shuffled exam
    - AnswerKey: Answer key table

Dependencies:
    - python-docx / reportlab: Variant documents

Used By:
    - mcq_toolkit.cli: generate command
"""

from .answer_key import AnswerKey, build_answer_key
from .config import BuilderConfig
from .controller import BuildError, BuildResult, build_exams
from .shuffle import shuffled
from .variants import ExamVariant, VariantQuestion, answer_letter, generate_variants

__all__ = [
    # Config
    "BuilderConfig",
    # Variants
    "shuffled",
    "answer_letter",
    "generate_variants",
    "ExamVariant",
    "VariantQuestion",
    # Answer key
    "build_answer_key",
    "AnswerKey",
    # Controller
    "build_exams",
    "BuildResult",
    "BuildError",
]
