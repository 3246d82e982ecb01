"""Unit tests for calculator factory wiring."""

from application.nutritional_profile.orchestrators.energy_orchestrator import (
    EnergyOrchestrator,
)
from domain.food_recommendation.application.recommendation_service import (
    FoodRecommendationService,
)
from infrastructure.nutritional_profile.calculator_factory import (
    create_energy_orchestrator,
    get_energy_orchestrator,
    get_recommendation_service,
    reset_calculators,
)


class TestCalculatorFactory:
    """Test singleton creation and reset."""

    def setup_method(self):
        """Reset singletons."""
        reset_calculators()

    def teardown_method(self):
        """Reset singletons."""
        reset_calculators()

    def test_create_returns_new_instances(self):
        """Test create builds a fresh orchestrator each call."""
        first = create_energy_orchestrator()
        second = create_energy_orchestrator()

        assert isinstance(first, EnergyOrchestrator)
        assert first is not second

    def test_get_returns_singleton(self):
        """Test get returns the same instance until reset."""
        orchestrator = get_energy_orchestrator()
        service = get_recommendation_service()

        assert get_energy_orchestrator() is orchestrator
        assert isinstance(service, FoodRecommendationService)
        assert get_recommendation_service() is service

    def test_reset(self):
        """Test reset drops the cached instances."""
        orchestrator = get_energy_orchestrator()
        service = get_recommendation_service()

        reset_calculators()

        assert get_energy_orchestrator() is not orchestrator
        assert get_recommendation_service() is not service
