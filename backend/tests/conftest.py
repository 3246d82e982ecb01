"""Integration/E2E test fixtures.

This conftest loads the full app and is used for integration/e2e tests.
Unit tests in tests/unit/ do not need the app and never request `client`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, AsyncIterator, Generator, cast

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load .env.test for tests (overrides .env values)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

from app import app  # noqa: E402
from infrastructure.nutritional_profile.calculator_factory import (  # noqa: E402
    reset_calculators,
)


@pytest.fixture(autouse=True)
def _reset_calculators() -> Generator[None, None, None]:
    """Reset calculator singletons before and after each test for isolation."""
    reset_calculators()
    yield
    reset_calculators()


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client for GraphQL/REST tests.

    Uses httpx.AsyncClient with an explicit ASGITransport and a dummy
    base_url for relative requests.
    """
    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as ac:
        yield ac
