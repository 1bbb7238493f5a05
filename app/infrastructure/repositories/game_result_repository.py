"""Game result persistence (JSON file + in-memory cache)."""
import json
import logging
import os
import threading
from typing import Dict, List

from app.domain.errors import StorageFailureError
from app.domain.game_result import GameResult, QuestionResult
from app.infrastructure.repositories.question_repository import question_from_dict

log = logging.getLogger("towerdefense.storage")


def _question_result_from_dict(item: dict) -> QuestionResult:
    return QuestionResult(
        question=question_from_dict(item["question"]),
        answer=item["answer"],
        result_id=item["id"],
    )


def game_result_from_dict(data: dict) -> GameResult:
    return GameResult(
        question_count=data["question_count"],
        correct_count=data["correct_count"],
        wrong_count=data["wrong_count"],
        points=data["points"],
        correct_answered_questions=[
            _question_result_from_dict(q) for q in data.get("correct_answered_questions", [])
        ],
        wrong_answered_questions=[
            _question_result_from_dict(q) for q in data.get("wrong_answered_questions", [])
        ],
        configuration_id=data["configuration_id"],
        player_id=data["player_id"],
        score=data["score"],
        rewards=data["rewards"],
        result_id=data["id"],
        played_time=data.get("played_time"),
    )


class GameResultRepository:
    """JSON-backed game result storage. Append-only."""

    def __init__(self, data_path: str = "data/game_results.json"):
        self._data_path = data_path
        self._results: Dict[str, GameResult] = {}
        self._lock = threading.Lock()
        # Fail at startup, before any submission reaches the Overworld.
        self._load()

    def save(self, result: GameResult) -> str:
        """Persist a new result. The file is replaced atomically."""
        with self._lock:
            if result.id in self._results:
                raise StorageFailureError(f"Result {result.id} already exists.")
            self._results[result.id] = result
            try:
                self._persist()
            except OSError as exc:
                del self._results[result.id]
                log.error("Could not write %s: %s", self._data_path, exc)
                raise StorageFailureError("The result could not be stored.") from exc
        return result.id

    def get(self, result_id: str) -> GameResult | None:
        with self._lock:
            return self._results.get(result_id)

    def find_by_player_id(self, player_id: str) -> List[GameResult]:
        """All results of one player, oldest first."""
        with self._lock:
            results = [r for r in self._results.values() if r.player_id == player_id]
        results.sort(key=lambda r: r.played_time)
        return results

    def _persist(self) -> None:
        directory = os.path.dirname(self._data_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        data = {rid: r.to_dict() for rid, r in self._results.items()}
        # Write to tempfile then replace so readers never see a partial file
        tmp_path = f"{self._data_path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, self._data_path)

    def _load(self) -> None:
        if os.path.exists(self._data_path):
            # A file that fails to parse must never be overwritten.
            try:
                with open(self._data_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, IOError) as exc:
                log.error("Unreadable results file %s: %s", self._data_path, exc)
                raise StorageFailureError("Stored results could not be read.") from exc
            try:
                results = {rid: game_result_from_dict(rdata) for rid, rdata in data.items()}
            except (AttributeError, KeyError, TypeError, ValueError) as exc:
                log.error("Malformed record in results file %s: %r", self._data_path, exc)
                raise StorageFailureError("Stored results could not be read.") from exc
            self._results.update(results)
