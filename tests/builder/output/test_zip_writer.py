"""
Unit tests for zip_writer.py.
"""

import zipfile
from unittest.mock import patch

import pytest

from mcq_toolkit.builder.answer_key import AnswerKey
from mcq_toolkit.builder.output.zip_writer import write_exam_zip


@pytest.fixture
def answer_key():
    return AnswerKey(header=("Original_Q_Num", "Original_Answer", "Ver_1_Ans"), rows=(("1", "B", "C"),))


class TestZipWriter:
    """Tests for archive export."""

    def test_writes_members_and_answer_key(self, tmp_path, answer_key):
        path = write_exam_zip(
            {"Test_Version_001.docx": b"doc1", "Test_Version_002.docx": b"doc2"},
            answer_key,
            tmp_path / "Shuffled_Exams.zip",
        )
        with zipfile.ZipFile(path) as zf:
            assert zf.namelist() == ["Test_Version_001.docx", "Test_Version_002.docx", "Answer_Key.csv"]
            assert zf.read("Test_Version_002.docx") == b"doc2"
            assert zf.read("Answer_Key.csv").decode("utf-8") == (
                "Original_Q_Num,Original_Answer,Ver_1_Ans\n1,B,C"
            )

    def test_appends_zip_suffix_and_creates_parent(self, tmp_path, answer_key):
        path = write_exam_zip({}, answer_key, tmp_path / "nested" / "exams")
        assert path == tmp_path / "nested" / "exams.zip"
        assert path.exists()

    def test_when_write_fails_then_no_partial_archive(self, tmp_path, answer_key):
        target = tmp_path / "a.zip"
        with patch("zipfile.ZipFile.writestr", side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                write_exam_zip({"x.docx": b"1"}, answer_key, target)
        assert not target.exists()
