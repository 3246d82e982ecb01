"""REST API endpoints for the TDEE and BMI calculators.

Request bodies are validated by pydantic before the calculators run;
domain validation errors are reported as HTTP 422.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from application.nutritional_profile.orchestrators.energy_orchestrator import (
    EnergyOrchestrator,
)
from domain.nutritional_profile.core.exceptions import EnergyEstimationError
from domain.nutritional_profile.core.value_objects import (
    ActivityLevel,
    BodyMeasurements,
    CalculationResult,
    Gender,
    Goal,
    MacroRange,
    UnitSystem,
)
from infrastructure.nutritional_profile.calculator_factory import (
    get_energy_orchestrator,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/calculators", tags=["calculators"])


class TdeeRequest(BaseModel):
    """Request model for the TDEE calculator."""

    weight: float = Field(..., gt=0, description="Body weight (kg or lb)")
    height: float = Field(..., gt=0, description="Height (cm or in)")
    age: int = Field(..., gt=0, description="Age in years")
    gender: Gender
    goal: Goal = Goal.MAINTENANCE
    activity_level: Optional[ActivityLevel] = None
    unit_system: UnitSystem = UnitSystem.METRIC
    target_weight: Optional[float] = Field(None, gt=0)
    weeks_to_target: Optional[int] = None


class MacroRangeResponse(BaseModel):
    """Gram range for one macronutrient."""

    min: int
    max: int


class TdeeResponse(BaseModel):
    """Response model for the TDEE calculator."""

    bmr: int
    tdee: Optional[int] = None
    goal_calories: Optional[int] = None
    protein: Optional[MacroRangeResponse] = None
    fat: Optional[MacroRangeResponse] = None
    carbs: Optional[MacroRangeResponse] = None


class BmiRequest(BaseModel):
    """Request model for the BMI calculator."""

    weight: float = Field(..., gt=0, description="Body weight (kg or lb)")
    height: float = Field(..., gt=0, description="Height (cm or in)")
    unit_system: UnitSystem = UnitSystem.METRIC


class BmiResponse(BaseModel):
    """Response model for the BMI calculator."""

    bmi: float
    category: str
    label: str
    advice: str


def _range(macro_range: MacroRange) -> MacroRangeResponse:
    return MacroRangeResponse(min=macro_range.min_g, max=macro_range.max_g)


def to_tdee_response(result: CalculationResult) -> TdeeResponse:
    """Flatten a CalculationResult into the REST response shape."""
    response = TdeeResponse(
        bmr=result.bmr.value,
        tdee=result.tdee.value if result.tdee else None,
        goal_calories=result.goal_calories,
    )
    if result.macros is not None:
        response.protein = _range(result.macros.protein)
        response.fat = _range(result.macros.fat)
        response.carbs = _range(result.macros.carbs)
    return response


@router.post("/tdee", response_model=TdeeResponse)
async def calculate_tdee(
    request: TdeeRequest,
    orchestrator: EnergyOrchestrator = Depends(get_energy_orchestrator),
) -> TdeeResponse:
    """Calculate BMR, TDEE, goal calories and macro ranges.

    Example:
        ```bash
        curl -X POST http://localhost:8080/api/calculators/tdee \\
          -H "Content-Type: application/json" \\
          -d '{"weight": 70, "height": 175, "age": 25, "gender": "male",
               "activity_level": "moderate", "goal": "weight_loss"}'
        ```

        Response:
        ```json
        {
          "bmr": 1674, "tdee": 2595, "goal_calories": 2095,
          "protein": {"min": 112, "max": 154},
          "fat": {"min": 47, "max": 70},
          "carbs": {"min": 212, "max": 306}
        }
        ```
    """
    try:
        measurements = BodyMeasurements(
            weight=request.weight,
            height=request.height,
            unit_system=request.unit_system,
            target_weight=request.target_weight,
        )
        result = orchestrator.calculate_energy_plan(
            measurements=measurements,
            age_years=request.age,
            gender=request.gender,
            goal=request.goal,
            activity_level=request.activity_level,
            weeks_to_target=request.weeks_to_target,
        )
    except EnergyEstimationError as e:
        logger.warning("Invalid TDEE input", extra={"error": str(e)})
        raise HTTPException(status_code=422, detail=str(e)) from e

    return to_tdee_response(result)


@router.post("/bmi", response_model=BmiResponse)
async def calculate_bmi(
    request: BmiRequest,
    orchestrator: EnergyOrchestrator = Depends(get_energy_orchestrator),
) -> BmiResponse:
    """Calculate and classify Body Mass Index."""
    try:
        reading = orchestrator.assess_bmi(
            BodyMeasurements(
                weight=request.weight,
                height=request.height,
                unit_system=request.unit_system,
            )
        )
    except EnergyEstimationError as e:
        logger.warning("Invalid BMI input", extra={"error": str(e)})
        raise HTTPException(status_code=422, detail=str(e)) from e

    return BmiResponse(
        bmi=reading.value,
        category=reading.category.value,
        label=reading.category.label(),
        advice=reading.category.advice(),
    )
