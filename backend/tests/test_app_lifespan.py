"""Tests for FastAPI lifespan context manager - calculator wiring.

Tests verify:
- Calculators are wired during startup
- The same singletons are served to requests afterwards
"""

import pytest
from unittest.mock import MagicMock, patch

from app import app, lifespan
from infrastructure.nutritional_profile.calculator_factory import (
    get_energy_orchestrator,
    get_recommendation_service,
)


class TestLifespanContextManager:
    """Test suite for FastAPI lifespan context manager."""

    @pytest.mark.asyncio
    async def test_lifespan_wires_calculators(self):
        """Test that lifespan initializes both calculator singletons.

        GIVEN: Patched factory getters
        WHEN: Lifespan context manager is entered
        THEN: Both getters are called once
        """
        with (
            patch("app.get_energy_orchestrator", MagicMock()) as mock_orchestrator,
            patch("app.get_recommendation_service", MagicMock()) as mock_service,
        ):
            async with lifespan(app):
                mock_orchestrator.assert_called_once()
                mock_service.assert_called_once()

    @pytest.mark.asyncio
    async def test_lifespan_keeps_singletons(self):
        """Test that startup instances are reused after startup."""
        async with lifespan(app):
            orchestrator = get_energy_orchestrator()
            service = get_recommendation_service()

            assert get_energy_orchestrator() is orchestrator
            assert get_recommendation_service() is service
