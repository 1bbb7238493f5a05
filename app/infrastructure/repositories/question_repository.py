"""Loads configurations and their questions from JSON into domain entities."""
import json
import os
from typing import Dict

from app.domain.question import Configuration, Question


def question_from_dict(item: dict) -> Question:
    return Question(
        question_id=str(item["id"]),
        text=item["text"],
        right_answer=item["right_answer"],
        wrong_answers=item.get("wrong_answers", []),
    )


class QuestionRepository:
    """JSON-backed, read-only configuration and question storage."""

    def __init__(self, data_path: str):
        self._data_path = data_path
        self._configurations: Dict[str, Configuration] = {}
        self._questions: Dict[str, Question] = {}
        self._load()

    def _load(self) -> None:
        self._configurations = {}
        self._questions = {}
        if not os.path.exists(self._data_path):
            return

        with open(self._data_path, "r", encoding="utf-8") as f:
            raw = json.load(f)

        for item in raw:
            questions = [question_from_dict(q) for q in item.get("questions", [])]
            configuration = Configuration(
                configuration_id=str(item["id"]),
                questions=questions,
                volume_level=item.get("volume_level"),
            )
            self._configurations[configuration.id] = configuration
            for q in questions:
                self._questions[q.id] = q

    def get_question(self, question_id: str) -> Question | None:
        return self._questions.get(str(question_id))

    def get_configuration(self, configuration_id: str) -> Configuration | None:
        return self._configurations.get(str(configuration_id))
