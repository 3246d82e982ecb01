"""Query resolvers for food recommendations."""

from typing import Optional

import strawberry

from domain.food_recommendation.model import FitnessGoal, RecommendationPlan
from domain.nutritional_profile.core.value_objects import ActivityLevel, Gender
from graphql_api.types_food_recommendation import (
    FitnessGoalEnum,
    FoodRecommendationInput,
    FoodRecommendationType,
    RecommendationPlanType,
)


def map_domain_plan_to_graphql(plan: RecommendationPlan) -> RecommendationPlanType:
    """Map domain RecommendationPlan to GraphQL RecommendationPlanType."""
    return RecommendationPlanType(
        goal=FitnessGoalEnum(plan.goal.value),
        goal_label=plan.goal.label(),
        daily_calories=plan.daily_calories,
        foods=[
            FoodRecommendationType(
                id=food.id,
                name=food.name,
                category=food.category,
                calories=food.calories,
                protein_g=food.protein_g,
                carbs_g=food.carbs_g,
                fat_g=food.fat_g,
                benefits=list(food.benefits),
                best_time=food.best_time,
                serving_size=food.serving_size,
                difficulty=food.difficulty.value,
                prep_time_min=food.prep_time_min,
                rating=food.rating,
            )
            for food in plan.foods
        ],
    )


@strawberry.type
class FoodRecommendationQueries:
    """GraphQL queries for food recommendations."""

    @strawberry.field
    def recommend(
        self,
        info: strawberry.types.Info,
        input: FoodRecommendationInput,
    ) -> RecommendationPlanType:
        """Suggest foods and a daily calorie estimate for a fitness goal.

        Example:
            query {
              foodRecommendation {
                recommend(input: {
                  weightKg: 80, heightCm: 180, gender: MALE, goal: BULKING
                }) {
                  dailyCalories
                  foods { name calories }
                }
              }
            }
        """
        service = info.context.get("recommendation_service")
        if not service:
            raise Exception("Missing recommendation_service in GraphQL context")

        activity_level: Optional[ActivityLevel] = None
        if input.activity_level is not None:
            activity_level = ActivityLevel(input.activity_level.value)

        plan = service.recommend(
            weight_kg=input.weight_kg,
            height_cm=input.height_cm,
            gender=Gender(input.gender.value),
            goal=FitnessGoal(input.goal.value),
            activity_level=activity_level,
            age_years=input.age,
        )
        return map_domain_plan_to_graphql(plan)
