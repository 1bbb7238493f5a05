"""PostgreSQL-backed configuration and question repository."""
import logging

from sqlalchemy.exc import SQLAlchemyError

from app.domain.errors import StorageFailureError
from app.domain.question import Configuration, Question
from app.infrastructure.database.models import ConfigurationModel, QuestionModel

log = logging.getLogger("towerdefense.storage")


def question_to_domain(row: QuestionModel) -> Question:
    return Question(
        question_id=row.id,
        text=row.text,
        right_answer=row.right_answer,
        wrong_answers=list(row.wrong_answers or []),
    )


class PgQuestionRepository:
    """Read-only question lookup via PostgreSQL."""

    def __init__(self, session_factory):
        self._sf = session_factory

    def get_question(self, question_id: str) -> Question | None:
        try:
            with self._sf() as session:
                row = session.get(QuestionModel, str(question_id))
                return question_to_domain(row) if row else None
        except SQLAlchemyError as exc:
            log.error("Could not load question %s: %s: %s", question_id, type(exc).__name__, exc)
            raise StorageFailureError("Questions could not be loaded.") from exc

    def get_configuration(self, configuration_id: str) -> Configuration | None:
        try:
            with self._sf() as session:
                row = session.get(ConfigurationModel, str(configuration_id))
                return self._to_domain(row) if row else None
        except SQLAlchemyError as exc:
            log.error(
                "Could not load configuration %s: %s: %s",
                configuration_id, type(exc).__name__, exc,
            )
            raise StorageFailureError("Questions could not be loaded.") from exc

    @staticmethod
    def _to_domain(row: ConfigurationModel) -> Configuration:
        return Configuration(
            configuration_id=row.id,
            questions=[question_to_domain(q) for q in row.questions],
            volume_level=row.volume_level,
        )
