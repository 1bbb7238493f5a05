"""Question and configuration entities -- the question set of one game."""
from typing import List


class Question:
    """A quiz question with its right answer and distractors. Immutable."""

    def __init__(
        self,
        question_id: str,
        text: str,
        right_answer: str,
        wrong_answers: List[str] | None = None,
    ):
        if not text:
            raise ValueError("Question text cannot be empty")
        self._id = question_id
        self._text = text
        self._right_answer = right_answer
        self._wrong_answers = list(wrong_answers or [])

    @property
    def id(self) -> str:
        return self._id

    @property
    def text(self) -> str:
        return self._text

    @property
    def right_answer(self) -> str:
        return self._right_answer

    @property
    def wrong_answers(self) -> List[str]:
        return list(self._wrong_answers)

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "text": self._text,
            "right_answer": self._right_answer,
            "wrong_answers": list(self._wrong_answers),
        }

    def to_dict_for_player(self) -> dict:
        """Question text and answer pool, without marking the right one."""
        return {
            "id": self._id,
            "text": self._text,
            "answers": sorted([self._right_answer, *self._wrong_answers]),
        }


class Configuration:
    """Question set used by one tower defense game."""

    def __init__(
        self,
        configuration_id: str,
        questions: List[Question],
        volume_level: int | None = None,
    ):
        self._id = configuration_id
        self._questions = list(questions)
        self._volume_level = volume_level

    @property
    def id(self) -> str:
        return self._id

    @property
    def questions(self) -> List[Question]:
        return list(self._questions)

    @property
    def volume_level(self) -> int | None:
        return self._volume_level

    def to_dict_for_player(self) -> dict:
        return {
            "id": self._id,
            "questions": [q.to_dict_for_player() for q in self._questions],
            "volume_level": self._volume_level,
        }
