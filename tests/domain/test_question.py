"""Tests for Question and Configuration entities."""
import pytest

from app.domain.question import Configuration, Question


class TestQuestion:
    def test_empty_text_rejected(self):
        with pytest.raises(ValueError):
            Question("q1", "", "right")

    def test_player_view_hides_which_answer_is_right(self):
        q = Question("q1", "2+2?", "4", ["3", "5"])
        view = q.to_dict_for_player()
        assert "right_answer" not in view
        assert sorted(view["answers"]) == ["3", "4", "5"]

    def test_wrong_answers_copy(self):
        q = Question("q1", "2+2?", "4", ["3"])
        q.wrong_answers.append("x")
        assert q.wrong_answers == ["3"]


class TestConfiguration:
    def test_player_view(self):
        config = Configuration("cfg", [Question("q1", "2+2?", "4")], volume_level=20)
        view = config.to_dict_for_player()
        assert view["id"] == "cfg"
        assert view["volume_level"] == 20
        assert len(view["questions"]) == 1
