"""EnergyOrchestrator - coordinates calculation services."""

import logging
from typing import Optional

from domain.nutritional_profile.core.ports.calculators import (
    IBMICalculator,
    IBMRCalculator,
    IGoalCalorieCalculator,
    IMacroCalculator,
    ITDEECalculator,
)
from domain.nutritional_profile.core.value_objects.activity_level import (
    ActivityLevel,
)
from domain.nutritional_profile.core.value_objects.anthropometric_input import (
    AnthropometricInput,
)
from domain.nutritional_profile.core.value_objects.bmi import BMIReading
from domain.nutritional_profile.core.value_objects.calculation_result import (
    CalculationResult,
)
from domain.nutritional_profile.core.value_objects.gender import Gender
from domain.nutritional_profile.core.value_objects.goal import Goal
from domain.nutritional_profile.core.value_objects.goal_target import GoalTarget
from domain.nutritional_profile.core.value_objects.measurements import (
    BodyMeasurements,
)

logger = logging.getLogger(__name__)


class EnergyOrchestrator:
    """
    Orchestrates calculation services for the energy calculators.

    Flow:
    1. Convert user measurements to metric (once)
    2. Calculate BMR from anthropometric data
    3. Calculate TDEE from BMR and activity level (optional)
    4. Apply goal adjustment to get target calories
    5. Calculate macro ranges for the calorie target
    """

    def __init__(
        self,
        bmr_service: IBMRCalculator,
        tdee_service: ITDEECalculator,
        goal_calorie_service: IGoalCalorieCalculator,
        macro_service: IMacroCalculator,
        bmi_service: IBMICalculator,
    ):
        self._bmr_service = bmr_service
        self._tdee_service = tdee_service
        self._goal_calorie_service = goal_calorie_service
        self._macro_service = macro_service
        self._bmi_service = bmi_service

    def calculate_energy_plan(
        self,
        measurements: BodyMeasurements,
        age_years: int,
        gender: Gender,
        goal: Goal = Goal.MAINTENANCE,
        activity_level: Optional[ActivityLevel] = None,
        weeks_to_target: Optional[int] = None,
    ) -> CalculationResult:
        """
        Calculate BMR, TDEE, goal calories and macro ranges.

        Args:
            measurements: Weight, height and optional target weight as entered
            age_years: Age in years
            gender: Biological sex
            goal: Weight goal
            activity_level: Activity level, None for BMR-only mode
            weeks_to_target: Timeframe for the target weight, if any

        Returns:
            CalculationResult with all computed metrics

        Raises:
            InvalidAnthropometricDataError: If weight, height or age is invalid
            InvalidGoalTargetError: If the target weight is invalid
        """
        metric = measurements.to_metric()

        data = AnthropometricInput(
            weight_kg=metric.weight_kg,
            height_cm=metric.height_cm,
            age_years=age_years,
            gender=gender,
        )

        goal_target = None
        if metric.target_weight_kg is not None and weeks_to_target is not None:
            goal_target = GoalTarget(
                target_weight_kg=metric.target_weight_kg,
                weeks_to_target=weeks_to_target,
            )

        # Step 1: Calculate BMR (basal metabolic rate)
        bmr = self._bmr_service.calculate(data)

        # Step 2: Calculate TDEE (total daily energy expenditure)
        tdee = self._tdee_service.calculate(bmr, activity_level)

        # Step 3: Apply goal adjustment to get target calories
        goal_calories = self._goal_calorie_service.calculate(
            tdee, goal, data.weight_kg, goal_target
        )

        # Step 4: Calculate macro ranges
        macros = None
        if goal_calories is not None:
            macros = self._macro_service.calculate(goal_calories, data.weight_kg)

        logger.debug(
            "energy_plan.calculated",
            extra={
                "unit_system": measurements.unit_system.value,
                "goal": goal.value,
                "activity_level": activity_level.value if activity_level else None,
                "has_goal_target": goal_target is not None,
                "bmr": bmr.value,
                "tdee": tdee.value if tdee else None,
                "goal_calories": goal_calories,
            },
        )

        return CalculationResult(
            bmr=bmr,
            tdee=tdee,
            goal_calories=goal_calories,
            macros=macros,
        )

    def assess_bmi(self, measurements: BodyMeasurements) -> BMIReading:
        """
        Calculate and classify BMI from measurements in any unit system.

        Args:
            measurements: Weight and height as entered

        Returns:
            BMIReading with value and category
        """
        metric = measurements.to_metric()
        reading = self._bmi_service.calculate(metric.weight_kg, metric.height_cm)

        logger.debug(
            "bmi.calculated",
            extra={
                "unit_system": measurements.unit_system.value,
                "bmi": reading.value,
                "category": reading.category.value,
            },
        )
        return reading
