"""Food recommendation service.

Estimates daily calories with the revised Harris-Benedict equation and
returns the curated foods for the chosen fitness goal.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Tuple

from domain.food_recommendation.model import (
    FitnessGoal,
    FoodRecommendation,
    RecommendationPlan,
)
from domain.food_recommendation.model.catalog import FOOD_CATALOG
from domain.nutritional_profile.core.value_objects.activity_level import (
    ActivityLevel,
)
from domain.nutritional_profile.core.value_objects.anthropometric_input import (
    AnthropometricInput,
)
from domain.nutritional_profile.core.value_objects.gender import Gender
from domain.nutritional_profile.core.value_objects.measurements import (
    BodyMeasurements,
)
from domain.shared.rounding import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_AGE_YEARS = 25
DEFAULT_ACTIVITY_LEVEL = ActivityLevel.MODERATE


class FoodRecommendationService:
    """Build a recommendation plan for a fitness goal.

    Calorie estimate (revised Harris-Benedict, Roza & Shizgal 1984):
        Men:   88.362 + 13.397 × weight + 4.799 × height - 5.677 × age
        Women: 447.593 + 9.247 × weight + 3.098 × height - 4.330 × age

    The result is multiplied by the activity PAL (moderate when not
    given), adjusted by the goal and rounded.
    """

    def __init__(
        self,
        catalog: Mapping[FitnessGoal, Tuple[FoodRecommendation, ...]] = FOOD_CATALOG,
    ) -> None:
        self._catalog = catalog

    def estimate_daily_calories(
        self,
        data: AnthropometricInput,
        goal: FitnessGoal,
        activity_level: Optional[ActivityLevel] = None,
    ) -> int:
        """Estimate daily calories for a goal."""
        if data.gender is Gender.MALE:
            bmr = (
                88.362
                + 13.397 * data.weight_kg
                + 4.799 * data.height_cm
                - 5.677 * data.age_years
            )
        else:
            bmr = (
                447.593
                + 9.247 * data.weight_kg
                + 3.098 * data.height_cm
                - 4.33 * data.age_years
            )

        level = activity_level or DEFAULT_ACTIVITY_LEVEL
        expenditure = bmr * level.pal_multiplier()
        return round_half_up(expenditure + goal.calorie_adjustment())

    def foods_for(self, goal: FitnessGoal) -> Tuple[FoodRecommendation, ...]:
        """Curated foods for a goal (empty when none are catalogued)."""
        return self._catalog.get(goal, ())

    def recommend(
        self,
        weight_kg: float,
        height_cm: float,
        gender: Gender,
        goal: FitnessGoal,
        activity_level: Optional[ActivityLevel] = None,
        age_years: int = DEFAULT_AGE_YEARS,
    ) -> RecommendationPlan:
        """Build the recommendation plan.

        Raises:
            InvalidAnthropometricDataError: If weight, height or age is invalid
            InvalidMeasurementError: If weight or height is outside the
                accepted metric range
        """
        data = AnthropometricInput(
            weight_kg=weight_kg,
            height_cm=height_cm,
            age_years=age_years,
            gender=gender,
        )
        # Constructed for its range validation only
        BodyMeasurements(weight=weight_kg, height=height_cm)
        plan = RecommendationPlan(
            goal=goal,
            daily_calories=self.estimate_daily_calories(data, goal, activity_level),
            foods=self.foods_for(goal),
        )

        logger.info(
            "food_recommendation.generated",
            extra={
                "goal": goal.value,
                "daily_calories": plan.daily_calories,
                "foods": plan.count,
            },
        )
        return plan
