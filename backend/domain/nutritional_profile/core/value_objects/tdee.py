"""TDEE value object - Total Daily Energy Expenditure."""

from dataclasses import dataclass

from .activity_level import ActivityLevel


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure in kcal/day.

    Calculated as: TDEE = BMR × PAL (Physical Activity Level), rounded
    to the nearest integer.

    Attributes:
        value: TDEE in kcal/day
        activity_level: Activity level whose multiplier produced the value
    """

    value: int
    activity_level: ActivityLevel

    def __str__(self) -> str:
        return f"{self.value} kcal/day ({self.activity_level.value})"
