"""Ports for energy estimation domain."""

from .calculators import (
    IBMICalculator,
    IBMRCalculator,
    IGoalCalorieCalculator,
    IMacroCalculator,
    ITDEECalculator,
)

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "IGoalCalorieCalculator",
    "IMacroCalculator",
    "IBMICalculator",
]
