"""AnthropometricInput value object - body data for energy estimation."""

from dataclasses import dataclass

from .gender import Gender

MAX_AGE_YEARS = 120


@dataclass(frozen=True)
class AnthropometricInput:
    """Body data needed for BMR calculation, already in metric units.

    Immutable value object. Construction is the validation boundary:
    the calculation services assume an instance is well formed.

    Attributes:
        weight_kg: Body weight in kilograms (> 0)
        height_cm: Height in centimeters (> 0)
        age_years: Age in years (1 to 120)
        gender: Biological sex
    """

    weight_kg: float
    height_cm: float
    age_years: int
    gender: Gender

    def __post_init__(self) -> None:
        """Validate anthropometric constraints.

        Raises:
            InvalidAnthropometricDataError: If any value is not positive or the
                age is above MAX_AGE_YEARS
        """
        # Import here to avoid circular dependency
        from ..exceptions.domain_errors import InvalidAnthropometricDataError

        if self.weight_kg <= 0:
            raise InvalidAnthropometricDataError(
                f"Weight must be positive, got {self.weight_kg}"
            )

        if self.height_cm <= 0:
            raise InvalidAnthropometricDataError(
                f"Height must be positive, got {self.height_cm}"
            )

        if self.age_years <= 0:
            raise InvalidAnthropometricDataError(
                f"Age must be positive, got {self.age_years}"
            )

        if self.age_years > MAX_AGE_YEARS:
            raise InvalidAnthropometricDataError(
                f"Age must be at most {MAX_AGE_YEARS}, got {self.age_years}"
            )

        if not isinstance(self.gender, Gender):
            raise InvalidAnthropometricDataError(
                f"Gender must be 'male' or 'female', got {self.gender}"
            )
