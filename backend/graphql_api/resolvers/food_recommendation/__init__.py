"""Food recommendation GraphQL resolvers."""

from graphql_api.resolvers.food_recommendation.queries import (
    FoodRecommendationQueries,
)

__all__ = ["FoodRecommendationQueries"]
