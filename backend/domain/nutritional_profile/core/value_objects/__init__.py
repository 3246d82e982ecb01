"""Value objects for energy estimation domain."""

from .activity_level import ActivityLevel
from .anthropometric_input import AnthropometricInput
from .bmi import BMICategory, BMIReading
from .bmr import BMR
from .calculation_result import CalculationResult
from .gender import Gender
from .goal import Goal
from .goal_target import GoalTarget
from .macro_ranges import MacroRange, MacroRanges
from .measurements import BodyMeasurements, MetricMeasurements, UnitSystem
from .tdee import TDEE

__all__ = [
    "ActivityLevel",
    "AnthropometricInput",
    "BMICategory",
    "BMIReading",
    "BMR",
    "BodyMeasurements",
    "CalculationResult",
    "Gender",
    "Goal",
    "GoalTarget",
    "MacroRange",
    "MacroRanges",
    "MetricMeasurements",
    "TDEE",
    "UnitSystem",
]
