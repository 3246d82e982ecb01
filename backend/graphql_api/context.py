"""GraphQL context factory for dependency injection.

Provides the dependencies required by GraphQL resolvers:
- Energy orchestrator (BMR/TDEE/goal/macro/BMI calculators)
- Food recommendation service
"""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from application.nutritional_profile.orchestrators.energy_orchestrator import (
    EnergyOrchestrator,
)
from domain.food_recommendation.application.recommendation_service import (
    FoodRecommendationService,
)


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    This context is injected into all GraphQL resolvers via the
    `info` parameter. Resolvers access dependencies using
    `info.context.get("service_name")`.

    Attributes:
        energy_orchestrator: Orchestrator for the energy calculators
        recommendation_service: Food recommendation service
        request: FastAPI request object
    """

    def __init__(
        self,
        energy_orchestrator: EnergyOrchestrator,
        recommendation_service: FoodRecommendationService,
        request: Optional[Request] = None,
    ) -> None:
        """Initialize GraphQL context with all dependencies."""
        super().__init__()
        self.energy_orchestrator = energy_orchestrator
        self.recommendation_service = recommendation_service
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name (for resolver compatibility).

        Args:
            key: Dependency name (e.g., "energy_orchestrator")

        Returns:
            Dependency instance or None if not found

        Example:
            >>> context = info.context
            >>> orchestrator = context.get("energy_orchestrator")
        """
        return getattr(self, key, None)


def create_context(
    energy_orchestrator: EnergyOrchestrator,
    recommendation_service: FoodRecommendationService,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies.

    Args:
        energy_orchestrator: Energy orchestrator instance
        recommendation_service: Food recommendation service instance
        request: Optional FastAPI request

    Returns:
        GraphQLContext ready for resolver injection
    """
    return GraphQLContext(
        energy_orchestrator=energy_orchestrator,
        recommendation_service=recommendation_service,
        request=request,
    )
