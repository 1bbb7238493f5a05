"""Validation guards applied before a submission has any side effect."""
from app.domain.errors import InvalidInputError


def validate_present(value, name: str) -> None:
    """Raises if a required argument is missing or blank."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidInputError(f"{name} is missing")


def validate_counts(question_count: int, correct_count: int, wrong_count: int) -> None:
    """Raises if the answer counters cannot describe a real game."""
    if question_count < 0 or correct_count < 0 or wrong_count < 0:
        raise InvalidInputError("Question and answer counts cannot be negative.")
    if correct_count > question_count:
        raise InvalidInputError(
            f"Cannot answer {correct_count} of {question_count} questions correctly."
        )
    if correct_count + wrong_count > question_count:
        raise InvalidInputError(
            f"Cannot answer {correct_count + wrong_count} of {question_count} questions."
        )


def validate_points(points: int) -> None:
    if points < 0:
        raise InvalidInputError("Points cannot be negative.")


def validate_submission(submission, player_id: str, access_token: str) -> None:
    """Raises InvalidInputError on the first violated precondition."""
    validate_present(submission, "Game result")
    validate_present(player_id, "Player id")
    validate_present(access_token, "Access token")
    validate_present(submission.configuration_id, "Configuration id")
    validate_counts(
        submission.question_count,
        submission.correct_count,
        submission.wrong_count,
    )
    validate_points(submission.points)
