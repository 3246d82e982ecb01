"""Unit test configuration.

Shared fixtures for domain, application and presentation unit tests.
Unit tests exercise objects directly and never go through the ASGI app.
"""

import pytest

from application.nutritional_profile.orchestrators.energy_orchestrator import (
    EnergyOrchestrator,
)
from infrastructure.nutritional_profile.calculator_factory import (
    create_energy_orchestrator,
)


@pytest.fixture
def orchestrator() -> EnergyOrchestrator:
    """Energy orchestrator wired with the real calculation services."""
    return create_energy_orchestrator()
