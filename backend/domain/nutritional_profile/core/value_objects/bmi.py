"""BMI value objects - Body Mass Index reading and category."""

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple


class BMICategory(str, Enum):
    """Adult BMI classification.

    Ranges are half-open ``[lower, upper)`` and partition ``[0, +inf)``:
    - UNDERWEIGHT: [0, 18.5)
    - HEALTHY_WEIGHT: [18.5, 25)
    - OVERWEIGHT: [25, 30)
    - OBESE: [30, +inf)
    """

    UNDERWEIGHT = "underweight"
    HEALTHY_WEIGHT = "healthy_weight"
    OVERWEIGHT = "overweight"
    OBESE = "obese"

    @staticmethod
    def from_value(bmi: float) -> "BMICategory":
        """Classify a BMI value.

        Ranges are evaluated in ascending order, first match wins.
        Negative values fall into the first range.

        Example:
            >>> BMICategory.from_value(27.8)
            <BMICategory.OVERWEIGHT: 'overweight'>
        """
        for category, _lower, upper in BMI_RANGES:
            if bmi < upper:
                return category
        return BMI_RANGES[-1][0]

    def label(self) -> str:
        """Display label, e.g. ``"Healthy Weight"``."""
        return _LABELS[self]

    def bounds(self) -> Tuple[float, float]:
        """Lower (inclusive) and upper (exclusive) BMI bound."""
        for category, lower, upper in BMI_RANGES:
            if category is self:
                return lower, upper
        raise KeyError(self)  # pragma: no cover

    def advice(self) -> str:
        """Short guidance shown next to the category."""
        return _ADVICE[self]


BMI_RANGES: Tuple[Tuple[BMICategory, float, float], ...] = (
    (BMICategory.UNDERWEIGHT, 0.0, 18.5),
    (BMICategory.HEALTHY_WEIGHT, 18.5, 25.0),
    (BMICategory.OVERWEIGHT, 25.0, 30.0),
    (BMICategory.OBESE, 30.0, math.inf),
)

_LABELS: Mapping[BMICategory, str] = MappingProxyType(
    {
        BMICategory.UNDERWEIGHT: "Underweight",
        BMICategory.HEALTHY_WEIGHT: "Healthy Weight",
        BMICategory.OVERWEIGHT: "Overweight",
        BMICategory.OBESE: "Obese",
    }
)

_ADVICE: Mapping[BMICategory, str] = MappingProxyType(
    {
        BMICategory.UNDERWEIGHT: (
            "Your BMI suggests you are underweight. Consider consulting a "
            "nutritionist to ensure you're getting adequate nutrients."
        ),
        BMICategory.HEALTHY_WEIGHT: (
            "Congratulations! Your BMI is within the healthy weight range. "
            "Maintain your healthy habits."
        ),
        BMICategory.OVERWEIGHT: (
            "Your BMI indicates you are in the overweight range. Consider "
            "more physical activity and mindful dietary adjustments."
        ),
        BMICategory.OBESE: (
            "Your BMI suggests you are in the obese range. It's highly "
            "recommended to consult with a healthcare professional."
        ),
    }
)


@dataclass(frozen=True)
class BMIReading:
    """Body Mass Index rounded to one decimal, with its category.

    Attributes:
        value: BMI in kg/m²
        category: Classification of ``value``
    """

    value: float
    category: BMICategory

    def __str__(self) -> str:
        return f"{self.value:.1f} ({self.category.label()})"
