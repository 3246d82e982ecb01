"""GraphQL types for the energy calculators.

These types support the TDEE calculator (BMR, TDEE, goal calories and
macro ranges) and the BMI calculator.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

import strawberry

__all__ = [
    # Enums
    "GenderEnum",
    "ActivityLevelEnum",
    "GoalEnum",
    "UnitSystemEnum",
    "BmiCategoryEnum",
    # Output types
    "BMRType",
    "TDEEType",
    "MacroRangeType",
    "MacroRangesType",
    "EnergyPlanType",
    "BmiReadingType",
    "ActivityLevelInfoType",
    "BmiCategoryInfoType",
    "MeasurementsType",
    # Input types
    "EnergyPlanInput",
    "BmiInput",
    "ConvertMeasurementsInput",
]


# ============================================
# ENUMS
# ============================================


@strawberry.enum
class GenderEnum(str, Enum):
    """Biological sex for BMR calculation."""

    MALE = "male"
    FEMALE = "female"


@strawberry.enum
class ActivityLevelEnum(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation."""

    SEDENTARY = "sedentary"  # Little or no exercise
    LIGHT = "light"  # Light exercise 1-3 days/week
    MODERATE = "moderate"  # Moderate exercise 3-5 days/week
    ACTIVE = "active"  # Hard exercise 6-7 days/week
    VERY_ACTIVE = "very_active"  # Very hard exercise + physical job


@strawberry.enum
class GoalEnum(str, Enum):
    """Weight goal."""

    MAINTENANCE = "maintenance"
    MILD_LOSS = "mild_loss"  # -250 kcal/day
    WEIGHT_LOSS = "weight_loss"  # -500 kcal/day
    EXTREME_LOSS = "extreme_loss"  # -750 kcal/day
    MILD_GAIN = "mild_gain"  # +250 kcal/day
    WEIGHT_GAIN = "weight_gain"  # +500 kcal/day


@strawberry.enum
class UnitSystemEnum(str, Enum):
    """Unit system of the entered measurements."""

    METRIC = "metric"  # kg, cm
    IMPERIAL = "imperial"  # lb, in


@strawberry.enum
class BmiCategoryEnum(str, Enum):
    """BMI classification."""

    UNDERWEIGHT = "underweight"
    HEALTHY_WEIGHT = "healthy_weight"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class BMRType:
    """Basal Metabolic Rate (BMR) - calories burned at rest."""

    value: int  # kcal/day


@strawberry.type
class TDEEType:
    """Total Daily Energy Expenditure (TDEE) - calories burned with activity."""  # noqa: E501

    value: int  # kcal/day
    activity_level: ActivityLevelEnum


@strawberry.type
class MacroRangeType:
    """Daily gram range for one macronutrient."""

    min_g: int
    max_g: int


@strawberry.type
class MacroRangesType:
    """Protein, fat and carbohydrate ranges in grams."""

    protein: MacroRangeType
    fat: MacroRangeType
    carbs: MacroRangeType


@strawberry.type
class EnergyPlanType:
    """Result of the TDEE calculator."""

    bmr: BMRType
    tdee: Optional[TDEEType] = None  # None without activity level
    goal_calories: Optional[int] = None  # kcal/day
    macros: Optional[MacroRangesType] = None


@strawberry.type
class BmiReadingType:
    """Body Mass Index with its category."""

    value: float  # kg/m², one decimal
    category: BmiCategoryEnum
    label: str
    advice: str


@strawberry.type
class ActivityLevelInfoType:
    """Activity level with multiplier and description."""

    level: ActivityLevelEnum
    multiplier: float
    description: str


@strawberry.type
class BmiCategoryInfoType:
    """BMI category with its range. ``max_bmi`` is None for the open range."""

    category: BmiCategoryEnum
    label: str
    min_bmi: float  # inclusive
    max_bmi: Optional[float]  # exclusive
    advice: str


@strawberry.type
class MeasurementsType:
    """Body measurements expressed in one unit system."""

    weight: float  # kg or lb, one decimal after conversion
    height: float  # cm or in, one decimal after conversion
    unit_system: UnitSystemEnum
    target_weight: Optional[float] = None


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class EnergyPlanInput:
    """Input for the TDEE calculator."""

    weight: float  # kg or lb
    height: float  # cm or in
    age: int  # years
    gender: GenderEnum
    goal: GoalEnum = GoalEnum.MAINTENANCE
    activity_level: Optional[ActivityLevelEnum] = None
    unit_system: UnitSystemEnum = UnitSystemEnum.METRIC
    target_weight: Optional[float] = None  # kg or lb
    weeks_to_target: Optional[int] = None


@strawberry.input
class BmiInput:
    """Input for the BMI calculator."""

    weight: float  # kg or lb
    height: float  # cm or in
    unit_system: UnitSystemEnum = UnitSystemEnum.METRIC


@strawberry.input
class ConvertMeasurementsInput:
    """Input for the metric/imperial display toggle."""

    weight: float
    height: float
    to_unit_system: UnitSystemEnum
    unit_system: UnitSystemEnum = UnitSystemEnum.METRIC
    target_weight: Optional[float] = None
