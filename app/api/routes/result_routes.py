"""Result API routes -- submit a finished game, read stored results."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from app.domain.errors import TowerDefenseError
from app.domain.game_result import AnsweredQuestion, GameResultSubmission
from app.infrastructure.auth.dependencies import get_current_player


router = APIRouter(prefix="/api/v1", tags=["results"])

MAX_QUESTION_COUNT = 100


class AnsweredQuestionRequest(BaseModel):
    question_id: str = Field(..., min_length=1, max_length=64)
    answer: str = Field(..., min_length=1)


class SubmitGameResultRequest(BaseModel):
    question_count: int = Field(..., ge=0, le=MAX_QUESTION_COUNT)
    correct_count: int = Field(..., ge=0, le=MAX_QUESTION_COUNT)
    wrong_count: int = Field(..., ge=0, le=MAX_QUESTION_COUNT)
    points: int = Field(..., ge=0)
    correct_answered_questions: List[AnsweredQuestionRequest] = Field(default_factory=list)
    wrong_answered_questions: List[AnsweredQuestionRequest] = Field(default_factory=list)
    configuration_id: str = Field(..., min_length=1, max_length=64)

    def to_domain(self) -> GameResultSubmission:
        return GameResultSubmission(
            question_count=self.question_count,
            correct_count=self.correct_count,
            wrong_count=self.wrong_count,
            points=self.points,
            correct_answered_questions=[
                AnsweredQuestion(q.question_id, q.answer) for q in self.correct_answered_questions
            ],
            wrong_answered_questions=[
                AnsweredQuestion(q.question_id, q.answer) for q in self.wrong_answered_questions
            ],
            configuration_id=self.configuration_id,
        )


_workflow = None
_result_repo = None
_question_repo = None


def init_result_routes(workflow, result_repo, question_repo):
    global _workflow, _result_repo, _question_repo
    _workflow = workflow
    _result_repo = result_repo
    _question_repo = question_repo


def _http_error(exc: TowerDefenseError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@router.post("/results")
def api_submit_result(req: SubmitGameResultRequest, current_player: dict = Depends(get_current_player)):
    """Score, report and store a finished game. Returns the payload with score and rewards."""
    try:
        submission = req.to_domain()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        score, rewards = _workflow.submit(
            submission=submission,
            player_id=current_player["sub"],
            access_token=current_player["token"],
        )
    except TowerDefenseError as e:
        raise _http_error(e)

    return {**req.model_dump(), "score": score, "rewards": rewards}


@router.get("/results")
def api_get_my_results(current_player: dict = Depends(get_current_player)):
    """List the authenticated player's stored results."""
    try:
        results = _result_repo.find_by_player_id(current_player["sub"])
    except TowerDefenseError as e:
        raise _http_error(e)
    return [r.to_dict() for r in results]


@router.get("/results/{result_id}")
def api_get_result(result_id: str, current_player: dict = Depends(get_current_player)):
    """Get one stored result (owner only)."""
    try:
        result = _result_repo.get(result_id)
    except TowerDefenseError as e:
        raise _http_error(e)
    if not result:
        raise HTTPException(status_code=404, detail="Result not found")
    if result.player_id != current_player["sub"]:
        raise HTTPException(status_code=403, detail="Access denied.")
    return result.to_dict()


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@router.get("/configurations/{configuration_id}")
def api_get_configuration(configuration_id: str):
    """Get a configuration's questions (without marking right answers). Public."""
    try:
        configuration = _question_repo.get_configuration(configuration_id)
    except TowerDefenseError as e:
        raise _http_error(e)
    if not configuration:
        raise HTTPException(status_code=404, detail="Configuration not found")
    return configuration.to_dict_for_player()
