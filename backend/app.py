from __future__ import annotations

# Standard library
import datetime
import logging as _logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Final

# Third-party
import strawberry
from dotenv import load_dotenv
from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

load_dotenv()

# Local application imports
from api.calculators import router as calculators_router  # noqa: E402
from graphql_api.context import create_context  # noqa: E402
from graphql_api.resolvers.calculators import CalculatorQueries  # noqa: E402
from graphql_api.resolvers.food_recommendation import (  # noqa: E402
    FoodRecommendationQueries,
)
from infrastructure.config import (  # noqa: E402
    get_app_version,
    get_log_level,
    is_graphiql_enabled,
)
from infrastructure.nutritional_profile.calculator_factory import (  # noqa: E402
    get_energy_orchestrator,
    get_recommendation_service,
)

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = get_log_level()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

logger = _logging.getLogger("startup")

APP_VERSION = get_app_version()


@strawberry.type
class Query:
    @strawberry.field
    def server_time(self) -> str:
        return datetime.datetime.now(datetime.timezone.utc).isoformat()

    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field(description="TDEE and BMI calculator queries")  # type: ignore[misc]
    def calculators(self) -> CalculatorQueries:
        """Energy calculator queries.

        Example:
            query {
              calculators {
                energyPlan(input: {weight: 70, height: 175, age: 25,
                                   gender: MALE}) { bmr { value } }
                bmi(input: {weight: 90, height: 180}) { value label }
              }
            }
        """
        return CalculatorQueries()

    @strawberry.field(description="Food recommendation queries")  # type: ignore[misc]
    def food_recommendation(self) -> FoodRecommendationQueries:
        """Food recommendation queries.

        Example:
            query {
              foodRecommendation {
                recommend(input: {weightKg: 80, heightCm: 180, gender: MALE,
                                  goal: CUTTING}) { dailyCalories }
              }
            }
        """
        return FoodRecommendationQueries()


schema = strawberry.Schema(query=Query)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Application lifecycle: wires the calculators before serving."""
    get_energy_orchestrator()
    get_recommendation_service()
    logger.info(
        "lifespan.ready",
        extra={"version": APP_VERSION, "log_level": _LOG_LEVEL},
    )
    yield
    logger.info("lifespan.shutdown")


app = FastAPI(
    title="GymBro Energy Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


def get_graphql_context() -> Any:
    """Create GraphQL context with all dependencies."""
    return create_context(
        energy_orchestrator=get_energy_orchestrator(),
        recommendation_service=get_recommendation_service(),
    )


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema,
    context_getter=get_graphql_context,
    graphql_ide="graphiql" if is_graphiql_enabled() else None,
)
app.include_router(graphql_app, prefix="/graphql")

# REST API: calculators
app.include_router(calculators_router)
