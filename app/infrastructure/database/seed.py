"""Seed configuration and question data from JSON into PostgreSQL."""
import json
import logging
import os

from app.infrastructure.database.models import ConfigurationModel, QuestionModel

log = logging.getLogger("towerdefense.seed")


def seed_configurations(session_factory, json_path: str) -> int:
    """Insert configurations from a JSON file that are not stored yet.

    Existing configurations are left untouched so stored results keep
    pointing at the questions they were played with.
    Returns the number of configurations seeded.
    """
    if not os.path.exists(json_path):
        return 0

    with open(json_path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    count = 0
    with session_factory() as session:
        for item in raw:
            config_id = str(item["id"])
            if session.get(ConfigurationModel, config_id) is not None:
                continue
            model = ConfigurationModel(
                id=config_id,
                volume_level=item.get("volume_level"),
                questions=[
                    QuestionModel(
                        id=str(q["id"]),
                        text=q["text"],
                        right_answer=q["right_answer"],
                        wrong_answers=q.get("wrong_answers", []),
                    )
                    for q in item.get("questions", [])
                ],
            )
            session.add(model)
            count += 1
        session.commit()

    if count:
        log.info("Seeded %d configurations from %s", count, json_path)
    return count
