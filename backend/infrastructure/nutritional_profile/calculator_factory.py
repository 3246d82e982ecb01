"""Factory for the calculator orchestrator and recommendation service."""

from typing import Optional

from application.nutritional_profile.orchestrators.energy_orchestrator import (
    EnergyOrchestrator,
)
from domain.food_recommendation.application.recommendation_service import (
    FoodRecommendationService,
)
from domain.nutritional_profile.calculation import (
    BMIService,
    BMRService,
    GoalCalorieService,
    MacroService,
    TDEEService,
)

# Singleton instances (calculators are stateless)
_energy_orchestrator: Optional[EnergyOrchestrator] = None
_recommendation_service: Optional[FoodRecommendationService] = None


def create_energy_orchestrator() -> EnergyOrchestrator:
    """
    Wire the calculation services into an orchestrator.

    Returns:
        EnergyOrchestrator using the domain calculation services
    """
    return EnergyOrchestrator(
        bmr_service=BMRService(),
        tdee_service=TDEEService(),
        goal_calorie_service=GoalCalorieService(),
        macro_service=MacroService(),
        bmi_service=BMIService(),
    )


def get_energy_orchestrator() -> EnergyOrchestrator:
    """
    Get singleton energy orchestrator.

    Lazy initialization on first call.
    """
    global _energy_orchestrator
    if _energy_orchestrator is None:
        _energy_orchestrator = create_energy_orchestrator()
    return _energy_orchestrator


def get_recommendation_service() -> FoodRecommendationService:
    """
    Get singleton food recommendation service.

    Lazy initialization on first call.
    """
    global _recommendation_service
    if _recommendation_service is None:
        _recommendation_service = FoodRecommendationService()
    return _recommendation_service


def reset_calculators() -> None:
    """
    Reset singleton instances.

    Useful for testing to ensure clean state.
    """
    global _energy_orchestrator, _recommendation_service
    _energy_orchestrator = None
    _recommendation_service = None
