"""Domain exceptions for energy estimation."""

from .domain_errors import (
    EnergyEstimationError,
    InvalidAnthropometricDataError,
    InvalidGoalTargetError,
    InvalidMeasurementError,
)

__all__ = [
    "EnergyEstimationError",
    "InvalidAnthropometricDataError",
    "InvalidGoalTargetError",
    "InvalidMeasurementError",
]
