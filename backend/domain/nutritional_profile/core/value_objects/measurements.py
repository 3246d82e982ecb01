"""Body measurements value objects - unit systems and metric conversion."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from domain.shared.rounding import round_to_tenth

KG_PER_POUND = 0.453592
CM_PER_INCH = 2.54


class UnitSystem(str, Enum):
    """Unit system of user-entered measurements.

    - METRIC: kilograms and centimeters
    - IMPERIAL: pounds and inches
    """

    METRIC = "metric"
    IMPERIAL = "imperial"


# Accepted input ranges, inclusive, in the unit system's own units
WEIGHT_BOUNDS: Mapping[UnitSystem, Tuple[float, float]] = MappingProxyType(
    {
        UnitSystem.METRIC: (30.0, 200.0),
        UnitSystem.IMPERIAL: (66.0, 440.0),
    }
)

HEIGHT_BOUNDS: Mapping[UnitSystem, Tuple[float, float]] = MappingProxyType(
    {
        UnitSystem.METRIC: (100.0, 250.0),
        UnitSystem.IMPERIAL: (40.0, 98.0),
    }
)


@dataclass(frozen=True)
class MetricMeasurements:
    """Measurements normalized to kilograms and centimeters."""

    weight_kg: float
    height_cm: float
    target_weight_kg: Optional[float] = None


@dataclass(frozen=True)
class BodyMeasurements:
    """Weight, height and optional target weight as entered by the user.

    ``to_metric`` is the single place where imperial values are converted;
    calculators only ever see its output.

    Attributes:
        weight: Body weight (kg or lb)
        height: Height (cm or in)
        unit_system: Unit system of the three values
        target_weight: Optional target weight (kg or lb)
    """

    weight: float
    height: float
    unit_system: UnitSystem = UnitSystem.METRIC
    target_weight: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate measurements.

        Raises:
            InvalidMeasurementError: If a value is not positive or falls
                outside the accepted range of its unit system
        """
        from ..exceptions.domain_errors import InvalidMeasurementError

        if not isinstance(self.unit_system, UnitSystem):
            raise InvalidMeasurementError(
                "unit_system", self.unit_system, reason="must be metric or imperial"
            )

        checks = [
            ("weight", self.weight, WEIGHT_BOUNDS[self.unit_system]),
            ("height", self.height, HEIGHT_BOUNDS[self.unit_system]),
        ]
        if self.target_weight is not None:
            checks.append(
                ("target_weight", self.target_weight, WEIGHT_BOUNDS[self.unit_system])
            )

        for field, value, (low, high) in checks:
            if value <= 0:
                raise InvalidMeasurementError(field, value)
            # Written as a negated range so NaN is rejected too
            if not low <= value <= high:
                raise InvalidMeasurementError(
                    field, value, reason=f"must be between {low:g} and {high:g}"
                )

    def to_metric(self) -> MetricMeasurements:
        """Convert to kilograms and centimeters (lb × 0.453592, in × 2.54)."""
        if self.unit_system is UnitSystem.METRIC:
            return MetricMeasurements(
                weight_kg=self.weight,
                height_cm=self.height,
                target_weight_kg=self.target_weight,
            )

        target_kg = None
        if self.target_weight is not None:
            target_kg = self.target_weight * KG_PER_POUND
        return MetricMeasurements(
            weight_kg=self.weight * KG_PER_POUND,
            height_cm=self.height * CM_PER_INCH,
            target_weight_kg=target_kg,
        )

    def convert_to(self, unit_system: UnitSystem) -> "BodyMeasurements":
        """Re-express the measurements in another unit system for display.

        Converted values are rounded to one decimal. Converting to the
        current unit system returns ``self`` unchanged.

        Raises:
            InvalidMeasurementError: If a converted value falls outside the
                accepted range of ``unit_system``
        """
        if unit_system is self.unit_system:
            return self

        if unit_system is UnitSystem.IMPERIAL:
            weight_factor = 1 / KG_PER_POUND
            height_factor = 1 / CM_PER_INCH
        else:
            weight_factor = KG_PER_POUND
            height_factor = CM_PER_INCH

        target = None
        if self.target_weight is not None:
            target = round_to_tenth(self.target_weight * weight_factor)
        return BodyMeasurements(
            weight=round_to_tenth(self.weight * weight_factor),
            height=round_to_tenth(self.height * height_factor),
            unit_system=unit_system,
            target_weight=target,
        )
