"""
Shared pytest fixtures for the Tower Defense test suite.

Strategy:
- Domain tests: pure in-memory, zero I/O.
- Workflow tests: in-memory fakes for the Overworld sink, the question
  resolver and the result store.
- API tests: FastAPI TestClient with JSON repos in a tmp directory and a
  fake Overworld sink. DATABASE_URL is cleared so nothing touches a real DB.
"""
import os
import json
import shutil
import tempfile
from datetime import datetime, timedelta, timezone

import pytest

# ---------------------------------------------------------------------------
# Ensure no real database or Overworld is touched during the test run
# ---------------------------------------------------------------------------
os.environ.pop("DATABASE_URL", None)
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production-123456")
os.environ.setdefault("ENV", "test")

from jose import jwt

from app.domain.errors import StorageFailureError
from app.domain.game_result import AnsweredQuestion, GameResultSubmission
from app.domain.question import Configuration, Question


CONFIG_ID = "c0nf1g00-0000-0000-0000-000000000001"


# ---------------------------------------------------------------------------
# Domain helpers (reusable across many test modules)
# ---------------------------------------------------------------------------

def make_question(question_id="q1", text=None, right_answer="right") -> Question:
    return Question(
        question_id=question_id,
        text=text or f"Question {question_id}?",
        right_answer=right_answer,
        wrong_answers=["wrong A", "wrong B"],
    )


def make_submission(
    question_count=10,
    correct_count=8,
    wrong_count=2,
    points=800,
    correct_ids=None,
    wrong_ids=None,
    configuration_id=CONFIG_ID,
) -> GameResultSubmission:
    if correct_ids is None:
        correct_ids = [f"q{i}" for i in range(correct_count)]
    if wrong_ids is None:
        wrong_ids = [f"q{i}" for i in range(correct_count, correct_count + wrong_count)]
    return GameResultSubmission(
        question_count=question_count,
        correct_count=correct_count,
        wrong_count=wrong_count,
        points=points,
        correct_answered_questions=[AnsweredQuestion(q, "right") for q in correct_ids],
        wrong_answered_questions=[AnsweredQuestion(q, "wrong A") for q in wrong_ids],
        configuration_id=configuration_id,
    )


def make_token(sub="player-1", secret=None, expires_in=timedelta(hours=1)) -> str:
    now = datetime.now(timezone.utc)
    payload = {"sub": sub, "iat": now, "exp": now + expires_in}
    return jwt.encode(payload, secret or os.environ["JWT_SECRET_KEY"], algorithm="HS256")


# ---------------------------------------------------------------------------
# In-memory collaborators
# ---------------------------------------------------------------------------

class FakeQuestionResolver:
    def __init__(self, question_ids=()):
        self.questions = {qid: make_question(qid) for qid in question_ids}
        self.lookups = []

    def get_question(self, question_id):
        self.lookups.append(question_id)
        return self.questions.get(question_id)

    def get_configuration(self, configuration_id):
        if configuration_id != CONFIG_ID:
            return None
        return Configuration(CONFIG_ID, list(self.questions.values()), volume_level=10)


class FakeSink:
    """Records submitted summaries; raises ``error`` when set."""

    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def submit(self, access_token, summary):
        self.calls.append((access_token, summary))
        if self.error is not None:
            raise self.error


class FakeStore:
    def __init__(self, fail=False):
        self.saved = []
        self.fail = fail

    def save(self, result):
        if self.fail:
            raise StorageFailureError("The result could not be stored.")
        self.saved.append(result)
        return result.id

    def get(self, result_id):
        return next((r for r in self.saved if r.id == result_id), None)

    def find_by_player_id(self, player_id):
        return [r for r in self.saved if r.player_id == player_id]


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def resolver():
    return FakeQuestionResolver([f"q{i}" for i in range(10)])


@pytest.fixture
def sink():
    return FakeSink()


@pytest.fixture
def store():
    return FakeStore()


# ---------------------------------------------------------------------------
# FastAPI TestClient with JSON-file repos in a temp directory
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_data_dir():
    d = tempfile.mkdtemp(prefix="towerdefense_test_")
    configurations = [
        {
            "id": CONFIG_ID,
            "volume_level": 30,
            "questions": [
                {
                    "id": f"q{i}",
                    "text": f"Question {i}?",
                    "right_answer": "right",
                    "wrong_answers": ["wrong A", "wrong B"],
                }
                for i in range(10)
            ],
        }
    ]
    with open(os.path.join(d, "configurations.json"), "w") as f:
        json.dump(configurations, f)
    yield d
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def api_sink():
    return FakeSink()


@pytest.fixture
def test_app(tmp_data_dir, api_sink):
    """FastAPI app wired with JSON repos and a fake Overworld sink."""
    from fastapi import FastAPI
    from app.api.routes.result_routes import router, init_result_routes
    from app.application.submit_game_result import ResultSubmissionWorkflow
    from app.infrastructure.repositories.game_result_repository import GameResultRepository
    from app.infrastructure.repositories.question_repository import QuestionRepository

    question_repo = QuestionRepository(os.path.join(tmp_data_dir, "configurations.json"))
    result_repo = GameResultRepository(os.path.join(tmp_data_dir, "game_results.json"))
    workflow = ResultSubmissionWorkflow(question_repo, api_sink, result_repo)

    app = FastAPI()
    init_result_routes(workflow, result_repo, question_repo)
    app.include_router(router)
    return app


@pytest.fixture
def client(test_app):
    from fastapi.testclient import TestClient
    return TestClient(test_app)


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {make_token('player-1')}"}
