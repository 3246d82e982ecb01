"""Unit tests for GoalCalorieService."""

import pytest

from domain.nutritional_profile.calculation.goal_calorie_service import (
    GoalCalorieService,
)
from domain.nutritional_profile.core.value_objects import (
    ActivityLevel,
    Goal,
    GoalTarget,
)
from domain.nutritional_profile.core.value_objects.tdee import TDEE


class TestGoalCalorieService:
    """Test goal calorie adjustment."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = GoalCalorieService()
        self.tdee = TDEE(value=2500, activity_level=ActivityLevel.MODERATE)

    def test_weight_loss_fixed_delta(self):
        """Test weight loss subtracts 500 kcal."""
        tdee = TDEE(value=2595, activity_level=ActivityLevel.MODERATE)

        assert self.service.calculate(tdee, Goal.WEIGHT_LOSS, 70.0) == 2095

    @pytest.mark.parametrize(
        "goal,expected",
        [
            (Goal.MAINTENANCE, 2500),
            (Goal.MILD_LOSS, 2250),
            (Goal.WEIGHT_LOSS, 2000),
            (Goal.EXTREME_LOSS, 1750),
            (Goal.MILD_GAIN, 2750),
            (Goal.WEIGHT_GAIN, 3000),
        ],
    )
    def test_fixed_deltas(self, goal, expected):
        """Test fixed per-goal deltas without a target."""
        assert self.service.calculate(self.tdee, goal, 70.0) == expected

    def test_no_tdee_returns_none(self):
        """Test BMR-only mode yields no goal calories."""
        assert self.service.calculate(None, Goal.WEIGHT_LOSS, 70.0) is None

    def test_planned_loss(self):
        """Test target-based deficit spread over the timeframe."""
        target = GoalTarget(target_weight_kg=75.0, weeks_to_target=10)

        result = self.service.calculate(self.tdee, Goal.WEIGHT_LOSS, 80.0, target)

        # 5 kg * 7700 / 70 days = 550 kcal/day
        assert result == 1950

    def test_planned_gain(self):
        """Test target-based surplus spread over the timeframe."""
        target = GoalTarget(target_weight_kg=75.0, weeks_to_target=10)

        result = self.service.calculate(self.tdee, Goal.WEIGHT_GAIN, 70.0, target)

        assert result == 3050

    def test_planned_adjustment_is_rounded(self):
        """Test fractional daily adjustment is rounded half-up."""
        target = GoalTarget(target_weight_kg=75.0, weeks_to_target=12)

        result = self.service.calculate(self.tdee, Goal.MILD_LOSS, 80.0, target)

        # 38500 / 84 = 458.33 -> 2041.67 -> 2042
        assert result == 2042

    def test_equal_target_falls_back_to_fixed_delta(self):
        """Test target equal to current weight uses the fixed delta."""
        target = GoalTarget(target_weight_kg=70.0, weeks_to_target=8)

        result = self.service.calculate(self.tdee, Goal.WEIGHT_LOSS, 70.0, target)

        assert result == 2000

    def test_wrong_direction_target_falls_back(self):
        """Test target above current weight with a loss goal is ignored."""
        target = GoalTarget(target_weight_kg=75.0, weeks_to_target=8)

        result = self.service.calculate(self.tdee, Goal.WEIGHT_LOSS, 70.0, target)

        assert result == 2000

    def test_gain_target_below_weight_falls_back(self):
        """Test target below current weight with a gain goal is ignored."""
        target = GoalTarget(target_weight_kg=65.0, weeks_to_target=8)

        result = self.service.calculate(self.tdee, Goal.MILD_GAIN, 70.0, target)

        assert result == 2750

    def test_zero_weeks_falls_back(self):
        """Test a zero timeframe uses the fixed delta."""
        target = GoalTarget(target_weight_kg=65.0, weeks_to_target=0)

        result = self.service.calculate(self.tdee, Goal.WEIGHT_LOSS, 70.0, target)

        assert result == 2000

    def test_maintenance_ignores_target(self):
        """Test maintenance always returns TDEE."""
        target = GoalTarget(target_weight_kg=65.0, weeks_to_target=8)

        result = self.service.calculate(self.tdee, Goal.MAINTENANCE, 70.0, target)

        assert result == 2500
