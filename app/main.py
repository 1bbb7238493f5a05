"""Entry point. Wires repositories, the Overworld client and the result workflow into routes.

Persistence strategy:
  - If DATABASE_URL is set  -> PostgreSQL via SQLAlchemy.
  - Otherwise               -> JSON file fallback (development only).
"""
import logging
import os
from dotenv import load_dotenv

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_DIR = os.path.dirname(BASE_DIR)
load_dotenv(os.path.join(PROJECT_DIR, ".env"))

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes.result_routes import router as result_router, init_result_routes
from app.application.submit_game_result import ResultSubmissionWorkflow
from app.domain.reward_decay import RewardDecayState
from app.domain.scoring import RewardCalculator
from app.infrastructure.clients.overworld_client import OverworldResultClient

log = logging.getLogger("towerdefense.startup")

DATA_DIR = os.path.join(BASE_DIR, "data")
CONFIGURATIONS_FILE = os.path.join(DATA_DIR, "configurations.json")

DATABASE_URL = os.environ.get("DATABASE_URL", "")

app = FastAPI(
    title="Tower Defense Backend",
    description="Result submission service for the Tower Defense minigame.",
    version="1.0.0",
)

# CORS configuration: read allowed origins from env (comma-separated).
_allowed = os.environ.get("ALLOWED_ORIGINS", "").strip()
if _allowed:
    allow_origins = [o.strip() for o in _allowed.split(",") if o.strip()]
else:
    allow_origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Persistence wiring
# ---------------------------------------------------------------------------

if DATABASE_URL:
    from app.infrastructure.database.connection import (
        init_engine, create_tables, get_session_factory,
    )
    from app.infrastructure.database.seed import seed_configurations
    from app.infrastructure.repositories.pg_question_repository import PgQuestionRepository
    from app.infrastructure.repositories.pg_game_result_repository import PgGameResultRepository

    init_engine()
    create_tables()
    _sf = get_session_factory()

    seed_configurations(_sf, CONFIGURATIONS_FILE)

    question_repo = PgQuestionRepository(_sf)
    result_repo = PgGameResultRepository(_sf)
    _persistence = "postgresql"
else:
    from app.infrastructure.repositories.question_repository import QuestionRepository
    from app.infrastructure.repositories.game_result_repository import GameResultRepository

    question_repo = QuestionRepository(data_path=CONFIGURATIONS_FILE)
    result_repo = GameResultRepository(
        data_path=os.path.join(DATA_DIR, "game_results.json")
    )
    _persistence = "json"

log.info("Persistence: %s", _persistence)

# Decay counters are per player and live for the process lifetime.
workflow = ResultSubmissionWorkflow(
    question_resolver=question_repo,
    result_sink=OverworldResultClient(),
    result_store=result_repo,
    reward_calculator=RewardCalculator(RewardDecayState()),
)

init_result_routes(workflow, result_repo, question_repo)
app.include_router(result_router)


@app.get("/health")
def health():
    result = {
        "status": "online",
        "system": "Tower Defense Backend v1.0.0",
        "persistence": _persistence,
    }
    if DATABASE_URL:
        from app.infrastructure.database.connection import check_health
        result["database"] = "connected" if check_health() else "disconnected"
    return result


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
