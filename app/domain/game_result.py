"""Game result entities -- submitted payload, Overworld summary, stored record."""
from uuid import uuid4
from datetime import datetime, timezone
from typing import List

from app.domain.question import Question


GAME_TYPE = "TOWERDEFENSE"


class AnsweredQuestion:
    """Question id plus the answer text the player chose. Immutable."""

    def __init__(self, question_id: str, answer: str):
        if not question_id:
            raise ValueError("Question id cannot be empty")
        if not answer or not answer.strip():
            raise ValueError("Answer cannot be blank")
        self._question_id = str(question_id)
        self._answer = answer

    @property
    def question_id(self) -> str:
        return self._question_id

    @property
    def answer(self) -> str:
        return self._answer

    def to_dict(self) -> dict:
        return {"question_id": self._question_id, "answer": self._answer}


class GameResultSubmission:
    """A finished game as sent by the client. Player id is not part of it."""

    def __init__(
        self,
        question_count: int,
        correct_count: int,
        wrong_count: int,
        points: int,
        correct_answered_questions: List[AnsweredQuestion],
        wrong_answered_questions: List[AnsweredQuestion],
        configuration_id: str,
    ):
        self.question_count = question_count
        self.correct_count = correct_count
        self.wrong_count = wrong_count
        self.points = points
        self.correct_answered_questions = list(correct_answered_questions)
        self.wrong_answered_questions = list(wrong_answered_questions)
        self.configuration_id = configuration_id

    def to_dict(self) -> dict:
        return {
            "question_count": self.question_count,
            "correct_count": self.correct_count,
            "wrong_count": self.wrong_count,
            "points": self.points,
            "correct_answered_questions": [q.to_dict() for q in self.correct_answered_questions],
            "wrong_answered_questions": [q.to_dict() for q in self.wrong_answered_questions],
            "configuration_id": self.configuration_id,
        }


class QuestionResult:
    """A resolved question together with the submitted answer. Immutable."""

    def __init__(self, question: Question, answer: str, result_id: str | None = None):
        self._id = result_id or str(uuid4())
        self._question = question
        self._answer = answer

    @property
    def id(self) -> str:
        return self._id

    @property
    def question(self) -> Question:
        return self._question

    @property
    def answer(self) -> str:
        return self._answer

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "question": self._question.to_dict(),
            "answer": self._answer,
        }


class UpstreamResultSummary:
    """Privacy-trimmed projection sent to the Overworld backend."""

    def __init__(self, configuration_id: str, score: int, user_id: str, rewards: int):
        self.game = GAME_TYPE
        self.configuration_id = configuration_id
        self.score = score
        self.user_id = user_id
        self.rewards = rewards

    def to_payload(self) -> dict:
        """Wire format expected by the Overworld backend."""
        return {
            "game": self.game,
            "configurationId": self.configuration_id,
            "score": self.score,
            "userId": self.user_id,
            "rewards": self.rewards,
        }


class GameResult:
    """
    Everything stored after one tower defense game.
    Created once per successful submission and never mutated afterwards.
    """

    def __init__(
        self,
        question_count: int,
        correct_count: int,
        wrong_count: int,
        points: int,
        correct_answered_questions: List[QuestionResult],
        wrong_answered_questions: List[QuestionResult],
        configuration_id: str,
        player_id: str,
        score: int,
        rewards: int,
        result_id: str | None = None,
        played_time: str | None = None,
    ):
        self._id = result_id or str(uuid4())
        self._question_count = question_count
        self._correct_count = correct_count
        self._wrong_count = wrong_count
        self._points = points
        self._correct = tuple(correct_answered_questions)
        self._wrong = tuple(wrong_answered_questions)
        self._configuration_id = configuration_id
        self._player_id = player_id
        self._score = score
        self._rewards = rewards
        self._played_time = played_time or datetime.now(timezone.utc).isoformat()

    @property
    def id(self) -> str:
        return self._id

    @property
    def question_count(self) -> int:
        return self._question_count

    @property
    def correct_count(self) -> int:
        return self._correct_count

    @property
    def wrong_count(self) -> int:
        return self._wrong_count

    @property
    def points(self) -> int:
        return self._points

    @property
    def correct_answered_questions(self) -> List[QuestionResult]:
        return list(self._correct)

    @property
    def wrong_answered_questions(self) -> List[QuestionResult]:
        return list(self._wrong)

    @property
    def configuration_id(self) -> str:
        return self._configuration_id

    @property
    def player_id(self) -> str:
        return self._player_id

    @property
    def score(self) -> int:
        return self._score

    @property
    def rewards(self) -> int:
        return self._rewards

    @property
    def played_time(self) -> str:
        return self._played_time

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "question_count": self._question_count,
            "correct_count": self._correct_count,
            "wrong_count": self._wrong_count,
            "points": self._points,
            "correct_answered_questions": [q.to_dict() for q in self._correct],
            "wrong_answered_questions": [q.to_dict() for q in self._wrong],
            "configuration_id": self._configuration_id,
            "player_id": self._player_id,
            "played_time": self._played_time,
            "score": self._score,
            "rewards": self._rewards,
        }
