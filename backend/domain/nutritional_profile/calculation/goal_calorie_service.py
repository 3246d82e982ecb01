"""GoalCalorieService - daily calorie target for a weight goal."""

from typing import Optional

from domain.shared.rounding import round_half_up

from ..core.ports.calculators import IGoalCalorieCalculator
from ..core.value_objects.goal import Goal
from ..core.value_objects.goal_target import GoalTarget
from ..core.value_objects.tdee import TDEE

# Energy stored in one kilogram of body mass
KCAL_PER_KG = 7700


class GoalCalorieService(IGoalCalorieCalculator):
    """Derive a daily calorie target from TDEE and a weight goal.

    Rules, first match wins:
        1. No TDEE: no target. Maintenance: target = TDEE.
        2. Target weight in the goal's direction with a positive timeframe:
           the whole weight change (× 7700 kcal/kg) is spread linearly
           over the timeframe and subtracted from (loss) or added to
           (gain) TDEE.
        3. Otherwise the fixed per-goal delta is applied:
           mild loss -250, loss -500, extreme loss -750,
           mild gain +250, gain +500.

    A target weight on the wrong side of the current weight (or equal to
    it) is not an error; rule 3 applies.
    """

    def calculate(
        self,
        tdee: Optional[TDEE],
        goal: Goal,
        weight_kg: float,
        goal_target: Optional[GoalTarget] = None,
    ) -> Optional[int]:
        """Calculate the daily calorie target.

        Args:
            tdee: Total daily energy expenditure, None in BMR-only mode
            goal: Weight goal
            weight_kg: Current body weight in kg
            goal_target: Optional target weight and timeframe

        Returns:
            Daily calorie target in kcal/day, or None without TDEE

        Example:
            >>> service = GoalCalorieService()
            >>> tdee = TDEE(value=2595, activity_level=ActivityLevel.MODERATE)
            >>> service.calculate(tdee, Goal.WEIGHT_LOSS, 70.0)
            2095
        """
        if tdee is None:
            return None

        if goal is Goal.MAINTENANCE:
            return tdee.value

        daily_adjustment = self._planned_adjustment(goal, weight_kg, goal_target)
        if daily_adjustment is not None:
            return round_half_up(tdee.value + daily_adjustment)

        return tdee.value + goal.calorie_delta()

    def _planned_adjustment(
        self,
        goal: Goal,
        weight_kg: float,
        goal_target: Optional[GoalTarget],
    ) -> Optional[float]:
        """Signed kcal/day change needed to reach the target, if usable."""
        if goal_target is None or not goal_target.has_timeframe():
            return None

        target_kg = goal_target.target_weight_kg
        if goal.is_loss() and target_kg < weight_kg:
            sign = -1
        elif goal.is_gain() and target_kg > weight_kg:
            sign = 1
        else:
            return None

        total_energy = abs(weight_kg - target_kg) * KCAL_PER_KG
        return sign * total_energy / goal_target.days_to_target()
