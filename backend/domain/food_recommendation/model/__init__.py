"""Food recommendation domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class FitnessGoal(str, Enum):
    """Training goal selecting the food list and calorie adjustment."""

    BULKING = "bulking"  # +500 kcal
    CUTTING = "cutting"  # -500 kcal
    MAINTENANCE = "maintenance"  # 0 kcal
    STRENGTH = "strength"  # +200 kcal

    def calorie_adjustment(self) -> int:
        """Daily kcal added to the estimated expenditure."""
        return _ADJUSTMENTS[self]

    def label(self) -> str:
        return _LABELS[self]


_ADJUSTMENTS: Mapping[FitnessGoal, int] = MappingProxyType(
    {
        FitnessGoal.BULKING: 500,
        FitnessGoal.CUTTING: -500,
        FitnessGoal.MAINTENANCE: 0,
        FitnessGoal.STRENGTH: 200,
    }
)

_LABELS: Mapping[FitnessGoal, str] = MappingProxyType(
    {
        FitnessGoal.BULKING: "Muscle Building (Bulking)",
        FitnessGoal.CUTTING: "Fat Loss (Cutting)",
        FitnessGoal.MAINTENANCE: "Maintain Weight",
        FitnessGoal.STRENGTH: "Strength Training",
    }
)


class Difficulty(str, Enum):
    """Preparation difficulty."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


@dataclass(slots=True, frozen=True)
class FoodRecommendation:
    """A single curated food suggestion."""

    id: str
    name: str
    category: str
    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    benefits: Tuple[str, ...]
    best_time: str
    serving_size: str
    difficulty: Difficulty
    prep_time_min: int
    rating: float


@dataclass(slots=True, frozen=True)
class RecommendationPlan:
    """Daily calorie estimate with the foods suggested for a goal."""

    goal: FitnessGoal
    daily_calories: int
    foods: Tuple[FoodRecommendation, ...]

    @property
    def count(self) -> int:
        return len(self.foods)
