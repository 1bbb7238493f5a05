"""Use case: score a finished game, report it to the Overworld and store it."""
import logging
from typing import List, Tuple

from app.domain.errors import (
    StorageFailureError,
    UnknownPlayerError,
    UnknownQuestionError,
    UpstreamUnavailableError,
)
from app.domain.game_result import (
    AnsweredQuestion,
    GameResult,
    GameResultSubmission,
    QuestionResult,
    UpstreamResultSummary,
)
from app.domain.invariant import validate_submission
from app.domain.scoring import RewardCalculator, calculate_score

log = logging.getLogger("towerdefense.results")


class ResultSubmissionWorkflow:
    """
    Orchestrates one result submission.

    Collaborators:
      question_resolver -- ``get_question(question_id) -> Question | None``
      result_sink       -- ``submit(access_token, summary)``
      result_store      -- ``save(game_result) -> result_id``

    Everything that can fail on bad input (validation, question lookup) runs
    before the remote call. After the Overworld accepted the summary only the
    local write can still fail.
    """

    def __init__(
        self,
        question_resolver,
        result_sink,
        result_store,
        reward_calculator: RewardCalculator | None = None,
    ):
        self._questions = question_resolver
        self._sink = result_sink
        self._store = result_store
        self._rewards = reward_calculator or RewardCalculator()

    def submit(
        self,
        submission: GameResultSubmission,
        player_id: str,
        access_token: str,
    ) -> Tuple[int, int]:
        """Process a submission and return ``(score, reward)``."""
        validate_submission(submission, player_id, access_token)

        score = calculate_score(submission.correct_count, submission.question_count)

        correct_questions = self._resolve(submission.correct_answered_questions)
        wrong_questions = self._resolve(submission.wrong_answered_questions)

        # Computed once: a second call would consume another perfect-score slot.
        reward = self._rewards.calculate(score, player_id)

        summary = UpstreamResultSummary(
            configuration_id=submission.configuration_id,
            score=score,
            user_id=player_id,
            rewards=reward,
        )
        try:
            self._sink.submit(access_token, summary)
        except UpstreamUnavailableError as exc:
            log.error(
                "Overworld unavailable, result of player %s NOT saved: %s",
                player_id, exc,
            )
            raise
        except UnknownPlayerError as exc:
            log.error("Overworld rejected player %s: %s", player_id, exc)
            raise

        result = GameResult(
            question_count=submission.question_count,
            correct_count=submission.correct_count,
            wrong_count=submission.wrong_count,
            points=submission.points,
            correct_answered_questions=correct_questions,
            wrong_answered_questions=wrong_questions,
            configuration_id=submission.configuration_id,
            player_id=player_id,
            score=score,
            rewards=reward,
        )
        try:
            self._store.save(result)
        except StorageFailureError:
            log.error(
                "Result %s of player %s reached the Overworld but was not stored",
                result.id, player_id,
            )
            raise

        log.info(
            "Stored result %s for player %s (score=%d, rewards=%d)",
            result.id, player_id, score, reward,
        )
        return score, reward

    def _resolve(self, answered: List[AnsweredQuestion]) -> List[QuestionResult]:
        """Resolve answered questions in order. Raises on the first unknown id."""
        results = []
        for item in answered:
            question = self._questions.get_question(item.question_id)
            if question is None:
                log.warning("Unknown question %s in submitted result", item.question_id)
                raise UnknownQuestionError(item.question_id)
            results.append(QuestionResult(question=question, answer=item.answer))
        return results
