"""Goal value object - user's weight objective."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Goal(str, Enum):
    """User's weight goal determining the daily calorie adjustment.

    Loss goals subtract a fixed amount from TDEE, gain goals add one.
    When a target weight and timeframe are supplied the fixed amount is
    replaced by a linear plan (see GoalCalorieService).
    """

    MAINTENANCE = "maintenance"
    MILD_LOSS = "mild_loss"
    WEIGHT_LOSS = "weight_loss"
    EXTREME_LOSS = "extreme_loss"
    MILD_GAIN = "mild_gain"
    WEIGHT_GAIN = "weight_gain"

    def calorie_delta(self) -> int:
        """Get the fixed daily calorie adjustment (kcal/day).

        Example:
            >>> Goal.WEIGHT_LOSS.calorie_delta()
            -500
        """
        return GOAL_CALORIE_DELTAS[self]

    def is_loss(self) -> bool:
        """True for the weight loss goals."""
        return self in (Goal.MILD_LOSS, Goal.WEIGHT_LOSS, Goal.EXTREME_LOSS)

    def is_gain(self) -> bool:
        """True for the weight gain goals."""
        return self in (Goal.MILD_GAIN, Goal.WEIGHT_GAIN)


GOAL_CALORIE_DELTAS: Mapping[Goal, int] = MappingProxyType(
    {
        Goal.MAINTENANCE: 0,
        Goal.MILD_LOSS: -250,
        Goal.WEIGHT_LOSS: -500,
        Goal.EXTREME_LOSS: -750,
        Goal.MILD_GAIN: 250,
        Goal.WEIGHT_GAIN: 500,
    }
)
