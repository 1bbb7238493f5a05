"""Domain error taxonomy for result submission.

Each error carries the HTTP status category the API layer maps it to.
Messages are safe to show to the caller.
"""


class TowerDefenseError(Exception):
    """Base class for all classified submission failures."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInputError(TowerDefenseError, ValueError):
    """Malformed or out-of-range input. Not retryable as-is."""

    status_code = 400


class UnknownPlayerError(TowerDefenseError):
    """The Overworld backend does not know the player."""

    status_code = 404


class UnknownQuestionError(TowerDefenseError):
    """An answered question id does not resolve to a stored question."""

    status_code = 404

    def __init__(self, question_id: str):
        self.question_id = question_id
        super().__init__(f"There is no question with id {question_id}.")


class UpstreamUnavailableError(TowerDefenseError):
    """The Overworld backend is unreachable or failed. Retryable."""

    status_code = 503


class StorageFailureError(TowerDefenseError):
    """The result could not be written durably. Retryable."""

    status_code = 500
