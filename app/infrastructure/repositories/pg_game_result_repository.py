"""PostgreSQL-backed game result repository."""
import logging
from datetime import datetime
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from app.domain.errors import StorageFailureError
from app.domain.game_result import GameResult, QuestionResult
from app.infrastructure.database.models import GameResultModel, QuestionResultModel
from app.infrastructure.repositories.pg_question_repository import question_to_domain

log = logging.getLogger("towerdefense.storage")

CORRECT = "correct"
WRONG = "wrong"


class PgGameResultRepository:
    """Game result persistence via PostgreSQL. One transaction per result."""

    def __init__(self, session_factory):
        self._sf = session_factory

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def save(self, result: GameResult) -> str:
        """Insert the result and its answered questions in a single commit."""
        try:
            with self._sf() as session:
                row = GameResultModel(
                    id=result.id,
                    question_count=result.question_count,
                    correct_count=result.correct_count,
                    wrong_count=result.wrong_count,
                    points=result.points,
                    configuration_id=result.configuration_id,
                    player_id=result.player_id,
                    played_time=datetime.fromisoformat(result.played_time),
                    score=result.score,
                    rewards=result.rewards,
                )
                row.question_results = (
                    self._question_rows(result.correct_answered_questions, CORRECT)
                    + self._question_rows(result.wrong_answered_questions, WRONG)
                )
                session.add(row)
                session.commit()
        except SQLAlchemyError as exc:
            log.error("Could not store result %s: %s: %s", result.id, type(exc).__name__, exc)
            raise StorageFailureError("The result could not be stored.") from exc
        return result.id

    @staticmethod
    def _question_rows(question_results: List[QuestionResult], outcome: str) -> list:
        return [
            QuestionResultModel(
                id=qr.id,
                question_id=qr.question.id,
                outcome=outcome,
                position=position,
                answer=qr.answer,
            )
            for position, qr in enumerate(question_results)
        ]

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get(self, result_id: str) -> GameResult | None:
        try:
            with self._sf() as session:
                row = session.get(GameResultModel, result_id)
                return self._to_domain(row) if row else None
        except SQLAlchemyError as exc:
            log.error("Could not load result %s: %s: %s", result_id, type(exc).__name__, exc)
            raise StorageFailureError("Stored results could not be read.") from exc

    def find_by_player_id(self, player_id: str) -> List[GameResult]:
        try:
            with self._sf() as session:
                rows = (
                    session.query(GameResultModel)
                    .filter(GameResultModel.player_id == player_id)
                    .order_by(GameResultModel.played_time)
                    .all()
                )
                return [self._to_domain(r) for r in rows]
        except SQLAlchemyError as exc:
            log.error(
                "Could not load results of player %s: %s: %s",
                player_id, type(exc).__name__, exc,
            )
            raise StorageFailureError("Stored results could not be read.") from exc

    @staticmethod
    def _to_domain(row: GameResultModel) -> GameResult:
        correct, wrong = [], []
        for qr in row.question_results:
            target = correct if qr.outcome == CORRECT else wrong
            target.append(QuestionResult(
                question=question_to_domain(qr.question),
                answer=qr.answer,
                result_id=qr.id,
            ))
        return GameResult(
            question_count=row.question_count,
            correct_count=row.correct_count,
            wrong_count=row.wrong_count,
            points=row.points,
            correct_answered_questions=correct,
            wrong_answered_questions=wrong,
            configuration_id=row.configuration_id,
            player_id=row.player_id,
            score=row.score,
            rewards=row.rewards,
            result_id=row.id,
            played_time=row.played_time.isoformat() if row.played_time else None,
        )
