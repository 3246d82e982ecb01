"""Query resolvers for the energy calculators.

These resolvers run the pure calculators on request input:
- energyPlan: BMR, TDEE, goal calories and macro ranges
- bmi: Body Mass Index and category
- convertMeasurements: metric/imperial display toggle
- activityLevels / bmiCategories: lookup tables for form rendering
"""

import math
from typing import List, Optional

import strawberry

from application.nutritional_profile.orchestrators.energy_orchestrator import (
    EnergyOrchestrator,
)
from domain.nutritional_profile.core.value_objects import (
    ActivityLevel,
    BMICategory,
    BMIReading,
    BodyMeasurements,
    CalculationResult,
    Gender,
    Goal,
    MacroRange,
    UnitSystem,
)
from graphql_api.types_calculators import (
    ActivityLevelEnum,
    ActivityLevelInfoType,
    BmiCategoryEnum,
    BmiCategoryInfoType,
    BmiInput,
    BmiReadingType,
    BMRType,
    ConvertMeasurementsInput,
    EnergyPlanInput,
    EnergyPlanType,
    MacroRangesType,
    MacroRangeType,
    MeasurementsType,
    TDEEType,
    UnitSystemEnum,
)


# ============================================
# HELPER FUNCTIONS
# ============================================


def _get_orchestrator(info: strawberry.types.Info) -> EnergyOrchestrator:
    orchestrator = info.context.get("energy_orchestrator")
    if not orchestrator:
        raise Exception("Missing energy_orchestrator in GraphQL context")
    return orchestrator


def _map_macro_range(macro_range: MacroRange) -> MacroRangeType:
    return MacroRangeType(min_g=macro_range.min_g, max_g=macro_range.max_g)


def map_domain_result_to_graphql(result: CalculationResult) -> EnergyPlanType:
    """Map domain CalculationResult to GraphQL EnergyPlanType."""
    tdee = None
    if result.tdee is not None:
        tdee = TDEEType(
            value=result.tdee.value,
            activity_level=ActivityLevelEnum(result.tdee.activity_level.value),
        )

    macros = None
    if result.macros is not None:
        macros = MacroRangesType(
            protein=_map_macro_range(result.macros.protein),
            fat=_map_macro_range(result.macros.fat),
            carbs=_map_macro_range(result.macros.carbs),
        )

    return EnergyPlanType(
        bmr=BMRType(value=result.bmr.value),
        tdee=tdee,
        goal_calories=result.goal_calories,
        macros=macros,
    )


def map_domain_bmi_to_graphql(reading: BMIReading) -> BmiReadingType:
    """Map domain BMIReading to GraphQL BmiReadingType."""
    return BmiReadingType(
        value=reading.value,
        category=BmiCategoryEnum(reading.category.value),
        label=reading.category.label(),
        advice=reading.category.advice(),
    )


def map_domain_measurements_to_graphql(
    measurements: BodyMeasurements,
) -> MeasurementsType:
    """Map domain BodyMeasurements to GraphQL MeasurementsType."""
    return MeasurementsType(
        weight=measurements.weight,
        height=measurements.height,
        unit_system=UnitSystemEnum(measurements.unit_system.value),
        target_weight=measurements.target_weight,
    )


# ============================================
# QUERY RESOLVERS
# ============================================


@strawberry.type
class CalculatorQueries:
    """GraphQL queries for the energy calculators."""

    @strawberry.field
    def energy_plan(
        self,
        info: strawberry.types.Info,
        input: EnergyPlanInput,
    ) -> EnergyPlanType:
        """Calculate BMR, TDEE, goal calories and macro ranges.

        Example:
            query {
              calculators {
                energyPlan(input: {
                  weight: 70, height: 175, age: 25, gender: MALE,
                  activityLevel: MODERATE, goal: WEIGHT_LOSS
                }) {
                  bmr { value }
                  tdee { value }
                  goalCalories
                  macros { protein { minG maxG } }
                }
              }
            }
        """
        orchestrator = _get_orchestrator(info)

        measurements = BodyMeasurements(
            weight=input.weight,
            height=input.height,
            unit_system=UnitSystem(input.unit_system.value),
            target_weight=input.target_weight,
        )
        activity_level: Optional[ActivityLevel] = None
        if input.activity_level is not None:
            activity_level = ActivityLevel(input.activity_level.value)

        result = orchestrator.calculate_energy_plan(
            measurements=measurements,
            age_years=input.age,
            gender=Gender(input.gender.value),
            goal=Goal(input.goal.value),
            activity_level=activity_level,
            weeks_to_target=input.weeks_to_target,
        )
        return map_domain_result_to_graphql(result)

    @strawberry.field
    def bmi(
        self,
        info: strawberry.types.Info,
        input: BmiInput,
    ) -> BmiReadingType:
        """Calculate and classify Body Mass Index.

        Example:
            query {
              calculators {
                bmi(input: { weight: 90, height: 180 }) { value label }
              }
            }
        """
        orchestrator = _get_orchestrator(info)

        measurements = BodyMeasurements(
            weight=input.weight,
            height=input.height,
            unit_system=UnitSystem(input.unit_system.value),
        )
        return map_domain_bmi_to_graphql(orchestrator.assess_bmi(measurements))

    @strawberry.field
    def convert_measurements(self, input: ConvertMeasurementsInput) -> MeasurementsType:
        """Re-express measurements in another unit system, one decimal.

        Example:
            query {
              calculators {
                convertMeasurements(input: {
                  weight: 70, height: 175, toUnitSystem: IMPERIAL
                }) { weight height unitSystem }
              }
            }
        """
        measurements = BodyMeasurements(
            weight=input.weight,
            height=input.height,
            unit_system=UnitSystem(input.unit_system.value),
            target_weight=input.target_weight,
        )
        converted = measurements.convert_to(UnitSystem(input.to_unit_system.value))
        return map_domain_measurements_to_graphql(converted)

    @strawberry.field
    def activity_levels(self) -> List[ActivityLevelInfoType]:
        """List activity levels with their PAL multipliers."""
        return [
            ActivityLevelInfoType(
                level=ActivityLevelEnum(level.value),
                multiplier=level.pal_multiplier(),
                description=level.description(),
            )
            for level in ActivityLevel
        ]

    @strawberry.field
    def bmi_categories(self) -> List[BmiCategoryInfoType]:
        """List BMI categories in ascending order."""
        categories = []
        for category in BMICategory:
            lower, upper = category.bounds()
            categories.append(
                BmiCategoryInfoType(
                    category=BmiCategoryEnum(category.value),
                    label=category.label(),
                    min_bmi=lower,
                    max_bmi=None if math.isinf(upper) else upper,
                    advice=category.advice(),
                )
            )
        return categories
