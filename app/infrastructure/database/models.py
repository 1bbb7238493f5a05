"""SQLAlchemy ORM models -- PostgreSQL schema definition."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Column, String, Integer, DateTime, Text, SmallInteger, ForeignKey, JSON,
)
from sqlalchemy.orm import DeclarativeBase, relationship


def _utcnow():
    return datetime.now(timezone.utc)


def _new_uuid():
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

class Base(DeclarativeBase):
    pass


# ---------------------------------------------------------------------------
# Configurations and questions (read-only for the result workflow)
# ---------------------------------------------------------------------------

class ConfigurationModel(Base):
    __tablename__ = "configurations"

    id = Column(String(36), primary_key=True, default=_new_uuid)
    volume_level = Column(SmallInteger, nullable=True)

    questions = relationship(
        "QuestionModel",
        back_populates="configuration",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class QuestionModel(Base):
    __tablename__ = "questions"

    id = Column(String(36), primary_key=True, default=_new_uuid)
    configuration_id = Column(
        String(36), ForeignKey("configurations.id"), nullable=True, index=True,
    )
    text = Column(Text, nullable=False)
    right_answer = Column(Text, nullable=False)
    wrong_answers = Column(JSON, nullable=False, default=list)

    configuration = relationship("ConfigurationModel", back_populates="questions")


# ---------------------------------------------------------------------------
# Game results
# ---------------------------------------------------------------------------

class GameResultModel(Base):
    __tablename__ = "game_results"

    id = Column(String(36), primary_key=True, default=_new_uuid)
    question_count = Column(Integer, nullable=False)
    correct_count = Column(Integer, nullable=False)
    wrong_count = Column(Integer, nullable=False)
    points = Column(Integer, nullable=False)
    configuration_id = Column(String(36), nullable=False)
    player_id = Column(String(64), nullable=False, index=True)
    played_time = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    score = Column(Integer, nullable=False)
    rewards = Column(Integer, nullable=False)

    question_results = relationship(
        "QuestionResultModel",
        back_populates="game_result",
        cascade="all, delete-orphan",
        order_by="QuestionResultModel.position",
        lazy="selectin",
    )


class QuestionResultModel(Base):
    __tablename__ = "question_results"

    id = Column(String(36), primary_key=True, default=_new_uuid)
    game_result_id = Column(
        String(36), ForeignKey("game_results.id"), nullable=False, index=True,
    )
    question_id = Column(String(36), ForeignKey("questions.id"), nullable=False)
    # "correct" or "wrong"; position keeps the submitted order inside a group
    outcome = Column(String(10), nullable=False)
    position = Column(Integer, nullable=False)
    answer = Column(Text, nullable=False)

    game_result = relationship("GameResultModel", back_populates="question_results")
    question = relationship("QuestionModel", lazy="joined")
