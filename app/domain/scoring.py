"""Scoring and reward rules for a finished tower defense game."""
from app.domain.errors import InvalidInputError
from app.domain.reward_decay import RewardDecayState


MAX_SCORE = 100


def calculate_score(correct_answers: int, number_of_questions: int) -> int:
    """
    Percentage of correctly answered questions, truncated to an int.
    A game without questions scores 0.
    """
    if correct_answers < 0 or number_of_questions < correct_answers:
        raise InvalidInputError(
            f"{correct_answers} correct answers out of {number_of_questions} "
            "questions is not possible"
        )
    if number_of_questions == 0:
        return 0
    return (MAX_SCORE * correct_answers) // number_of_questions


class RewardCalculator:
    """Reward points with a decaying bonus for repeated perfect games."""

    PERFECT_REWARD = 10
    DECAYED_PERFECT_REWARD = 5
    FULL_REWARD_LIMIT = 3  # perfect games paid in full per player

    def __init__(self, decay_state: RewardDecayState | None = None):
        self._decay_state = decay_state or RewardDecayState()

    def calculate(self, score: int, player_id: str) -> int:
        """
        Reward for one submission. Not idempotent: a perfect score consumes
        one of the player's full-reward slots.
        """
        if score < 0:
            raise InvalidInputError("Result score cannot be less than zero")
        if score > MAX_SCORE:
            raise InvalidInputError(f"Result score cannot be more than {MAX_SCORE}")
        if score == MAX_SCORE:
            if self._decay_state.increment_if_below(player_id, self.FULL_REWARD_LIMIT):
                return self.PERFECT_REWARD
            return self.DECAYED_PERFECT_REWARD
        return score // 10
