"""
Unit tests for the review session and its confirm gate.
"""

import pytest

from mcq_toolkit.core.models import Option, Question
from mcq_toolkit.review import ReviewIncompleteError, ReviewSession


@pytest.fixture
def unanswered(question_factory):
    """Question 2 has no detected answer."""
    q1 = question_factory(1, ["3", "4"], correct=1)
    q2 = question_factory(2, ["x", "y", "z"], correct=None)
    return [q1, q2]


class TestReviewSession:
    """Tests for ReviewSession."""

    def test_statistics(self, unanswered):
        session = ReviewSession(unanswered)
        assert session.total == 2
        assert session.missing_answers == 1
        assert session.unresolved == 1

    def test_confirm_when_missing_answer_then_raises(self, unanswered):
        session = ReviewSession(unanswered)
        with pytest.raises(ReviewIncompleteError) as excinfo:
            session.confirm()
        assert str(excinfo.value) == "Please select a correct answer for the 1 highlighted questions."
        assert [issue.question_id for issue in excinfo.value.issues] == ["q002"]

    def test_select_answer_then_confirm(self, unanswered):
        session = ReviewSession(unanswered)
        updated = session.select_answer("q002", "q002.o3")

        assert updated.correct_index == 2
        confirmed = session.confirm()
        assert [q.correct_index for q in confirmed] == [1, 2]
        # Inputs untouched
        assert not unanswered[1].has_detected_answer

    def test_select_answer_is_radio_style(self, unanswered):
        """Selecting a new option clears the previous one."""
        session = ReviewSession(unanswered)
        session.select_answer("q001", "q001.o1")
        assert [o.is_correct for o in session.get("q001").options] == [True, False]

    def test_select_answer_preserves_identity(self, unanswered):
        session = ReviewSession(unanswered)
        updated = session.select_answer("q002", "q002.o1")
        assert updated.id == "q002"
        assert updated.original_number == 2
        assert [o.id for o in updated.options] == [o.id for o in unanswered[1].options]

    def test_select_answer_when_unknown_ids_then_raises(self, unanswered):
        session = ReviewSession(unanswered)
        with pytest.raises(KeyError):
            session.select_answer("q999", "q999.o1")
        with pytest.raises(KeyError):
            session.select_answer("q001", "q001.o9")

    def test_select_answer_letter(self, unanswered):
        session = ReviewSession(unanswered)
        session.select_answer_letter(2, "b")
        assert session.get("q002").correct_index == 1

    def test_select_answer_letter_when_out_of_range_then_raises(self, unanswered):
        session = ReviewSession(unanswered)
        with pytest.raises(ValueError, match="has 3 options"):
            session.select_answer_letter(2, "D")
        with pytest.raises(KeyError):
            session.select_answer_letter(9, "A")

    def test_multiple_correct_blocks_confirm(self):
        q = Question(
            id="q001",
            text="?",
            options=(Option("q001.o1", "a", True), Option("q001.o2", "b", True)),
            original_number=1,
        )
        session = ReviewSession([q])
        assert session.missing_answers == 0
        assert "2 options marked correct" in str(session.issues()[0])
        with pytest.raises(ReviewIncompleteError):
            session.confirm()

    def test_no_options_blocks_confirm(self):
        session = ReviewSession([Question(id="q001", text="?", original_number=4)])
        assert str(session.issues()[0]) == "#4: no options detected"

    def test_too_many_options_blocks_confirm(self, question_factory):
        q = question_factory(1, [str(i) for i in range(9)], correct=0)
        session = ReviewSession([q])
        assert "exceed" in session.issues()[0].reason
