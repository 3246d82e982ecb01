"""Domain exceptions for energy estimation."""


class EnergyEstimationError(Exception):
    """Base exception for energy estimation domain errors."""

    pass


class InvalidAnthropometricDataError(EnergyEstimationError):
    """Raised when weight, height or age validation fails."""

    pass


class InvalidGoalTargetError(EnergyEstimationError):
    """Raised when a target weight cannot be used for goal planning."""

    pass


class InvalidMeasurementError(EnergyEstimationError):
    """Raised when raw body measurements cannot be converted to metric."""

    def __init__(
        self, field: str, value: object, reason: str = "must be a positive number"
    ):
        super().__init__(f"{field} {reason}, got {value}")
        self.field = field
        self.value = value
