"""GraphQL types for food recommendations."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

import strawberry

from graphql_api.types_calculators import ActivityLevelEnum, GenderEnum


@strawberry.enum
class FitnessGoalEnum(str, Enum):
    """Training goal."""

    BULKING = "bulking"
    CUTTING = "cutting"
    MAINTENANCE = "maintenance"
    STRENGTH = "strength"


@strawberry.type
class FoodRecommendationType:
    """Curated food suggestion."""

    id: str
    name: str
    category: str
    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    benefits: List[str]
    best_time: str
    serving_size: str
    difficulty: str  # Easy | Medium | Hard
    prep_time_min: int
    rating: float


@strawberry.type
class RecommendationPlanType:
    """Daily calorie estimate with suggested foods."""

    goal: FitnessGoalEnum
    goal_label: str
    daily_calories: int
    foods: List[FoodRecommendationType]


@strawberry.input
class FoodRecommendationInput:
    """Input for food recommendations. Measurements are metric."""

    weight_kg: float
    height_cm: float
    gender: GenderEnum
    goal: FitnessGoalEnum
    activity_level: Optional[ActivityLevelEnum] = None
    age: int = 25
