import io
import sys
from pathlib import Path

import pytest
from docx import Document
from docx.shared import RGBColor

# Add src to sys.path so we can import mcq_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from mcq_toolkit.core.models import Option, Question  # noqa: E402


RED = RGBColor(0xFF, 0x00, 0x00)
DARK_RED = RGBColor(0xC0, 0x00, 0x00)
BLUE = RGBColor(0x00, 0x00, 0xFF)


def build_docx(paragraphs) -> bytes:
    """
    Build a .docx package in memory.

    Each paragraph is either a plain string or a list of runs, where a run
    is a string or a (text, style) tuple. Style is "red", "dark_red",
    "blue" or "underline".
    """
    doc = Document()
    for paragraph in paragraphs:
        runs = [paragraph] if isinstance(paragraph, str) else paragraph
        p = doc.add_paragraph()
        for run_def in runs:
            text, style = (run_def, None) if isinstance(run_def, str) else run_def
            run = p.add_run(text)
            if style == "red":
                run.font.color.rgb = RED
            elif style == "dark_red":
                run.font.color.rgb = DARK_RED
            elif style == "blue":
                run.font.color.rgb = BLUE
            elif style == "underline":
                run.underline = True
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def make_question(number, texts, correct=0, qid=None) -> Question:
    """Helper to create a question with options labelled from A."""
    qid = qid or f"q{number:03d}"
    options = tuple(
        Option(
            id=f"{qid}.o{i}",
            text=text,
            is_correct=(i - 1 == correct),
            original_label="ABCDEFGH"[i - 1] if i <= 8 else None,
        )
        for i, text in enumerate(texts, start=1)
    )
    return Question(id=qid, text=f"Question {number}?", options=options, original_number=number)


# Common test fixtures
@pytest.fixture
def docx_factory():
    """Return the in-memory .docx builder."""
    return build_docx


@pytest.fixture
def question_factory():
    """Return the Question builder helper."""
    return make_question


@pytest.fixture
def sample_exam_bytes() -> bytes:
    """Two questions: one red answer, one underlined answer."""
    return build_docx([
        "Đề kiểm tra",
        "Câu 1: 2+2=?",
        "A. 3",
        [("B. 4", "red")],
        "C. 5",
        "D. 6",
        "Câu 2: Capital of France?",
        "A. Berlin",
        "B. Madrid",
        [("C. Paris", "underline")],
        "D. Rome",
    ])


@pytest.fixture
def sample_exam_path(tmp_path: Path, sample_exam_bytes: bytes) -> Path:
    path = tmp_path / "exam.docx"
    path.write_bytes(sample_exam_bytes)
    return path


@pytest.fixture
def reviewed_questions():
    """Two answered questions ready for generation."""
    return [
        make_question(1, ["3", "4", "5", "6"], correct=1),
        make_question(2, ["Berlin", "Madrid", "Paris", "Rome"], correct=2),
    ]
