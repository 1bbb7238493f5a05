"""Unit tests for calculate_score and RewardCalculator."""
import pytest

from app.domain.errors import InvalidInputError
from app.domain.reward_decay import RewardDecayState
from app.domain.scoring import RewardCalculator, calculate_score


class TestCalculateScore:
    def test_all_correct_is_100(self):
        assert calculate_score(10, 10) == 100

    def test_none_correct_is_0(self):
        assert calculate_score(0, 10) == 0

    def test_eight_of_ten(self):
        assert calculate_score(8, 10) == 80

    def test_truncates_instead_of_rounding(self):
        # 2/3 = 66.67%
        assert calculate_score(2, 3) == 66

    def test_one_of_three(self):
        assert calculate_score(1, 3) == 33

    def test_no_questions_scores_zero(self):
        assert calculate_score(0, 0) == 0

    @pytest.mark.parametrize("total", [1, 3, 7, 10, 33, 100])
    def test_always_within_bounds(self, total):
        scores = [calculate_score(c, total) for c in range(total + 1)]
        assert all(0 <= s <= 100 for s in scores)
        assert scores == sorted(scores)

    def test_negative_correct_raises(self):
        with pytest.raises(InvalidInputError, match="not possible"):
            calculate_score(-1, 10)

    def test_more_correct_than_total_raises(self):
        with pytest.raises(InvalidInputError):
            calculate_score(11, 10)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            calculate_score(5, 4)


class TestRewardCalculator:
    def test_partial_scores_are_tenths(self):
        calc = RewardCalculator()
        for score in range(0, 100):
            assert calc.calculate(score, "p1") == score // 10

    def test_perfect_score_pays_ten_three_times_then_five(self):
        calc = RewardCalculator()
        rewards = [calc.calculate(100, "p1") for _ in range(6)]
        assert rewards == [10, 10, 10, 5, 5, 5]

    def test_perfect_reward_never_above_ten(self):
        calc = RewardCalculator()
        assert max(calc.calculate(100, "p1") for _ in range(10)) == 10

    def test_counter_stops_at_limit(self):
        state = RewardDecayState()
        calc = RewardCalculator(state)
        for _ in range(5):
            calc.calculate(100, "p1")
        assert state.count("p1") == 3

    def test_partial_score_does_not_touch_counter(self):
        state = RewardDecayState()
        calc = RewardCalculator(state)
        calc.calculate(90, "p1")
        assert state.count("p1") == 0

    def test_decay_is_per_player(self):
        calc = RewardCalculator()
        for _ in range(3):
            calc.calculate(100, "p1")
        assert calc.calculate(100, "p1") == 5
        assert calc.calculate(100, "p2") == 10

    def test_negative_score_raises(self):
        with pytest.raises(InvalidInputError, match="less than zero"):
            RewardCalculator().calculate(-1, "p1")

    def test_score_above_100_raises(self):
        with pytest.raises(InvalidInputError):
            RewardCalculator().calculate(101, "p1")

    def test_constants_defined(self):
        assert RewardCalculator.PERFECT_REWARD == 10
        assert RewardCalculator.DECAYED_PERFECT_REWARD == 5
        assert RewardCalculator.FULL_REWARD_LIMIT == 3
