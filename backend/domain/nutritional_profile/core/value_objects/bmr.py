"""BMR value object - Basal Metabolic Rate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day, rounded to the nearest integer.

    Represents the minimum calories needed for basic bodily functions
    at rest (breathing, circulation, cell production, nutrient processing).

    Attributes:
        value: BMR in kcal/day
    """

    value: int

    def __str__(self) -> str:
        return f"{self.value} kcal/day"
