"""GoalTarget value object - target weight and timeframe."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GoalTarget:
    """Target weight to reach within a number of weeks.

    A non-positive ``weeks_to_target`` is accepted: the goal calorie
    calculation then falls back to the fixed per-goal delta.

    Attributes:
        target_weight_kg: Desired body weight in kilograms (> 0)
        weeks_to_target: Timeframe in weeks
    """

    target_weight_kg: float
    weeks_to_target: int

    def __post_init__(self) -> None:
        """Validate target weight.

        Raises:
            InvalidGoalTargetError: If target weight is not positive
        """
        from ..exceptions.domain_errors import InvalidGoalTargetError

        if self.target_weight_kg <= 0:
            raise InvalidGoalTargetError(
                f"Target weight must be positive, got {self.target_weight_kg}"
            )

    def has_timeframe(self) -> bool:
        """True when the timeframe can spread a weight change."""
        return self.weeks_to_target > 0

    def days_to_target(self) -> int:
        """Timeframe expressed in days."""
        return self.weeks_to_target * 7
