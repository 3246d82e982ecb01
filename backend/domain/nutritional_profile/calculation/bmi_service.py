"""BMIService - Body Mass Index calculation and classification."""

from domain.shared.rounding import round_to_tenth

from ..core.ports.calculators import IBMICalculator
from ..core.value_objects.bmi import BMICategory, BMIReading


class BMIService(IBMICalculator):
    """Calculate BMI = weight(kg) / height(m)², rounded to one decimal,
    and classify the rounded value."""

    def calculate(self, weight_kg: float, height_cm: float) -> BMIReading:
        """Calculate and classify BMI.

        Example:
            >>> BMIService().calculate(90.0, 180.0)
            BMIReading(value=27.8, category=<BMICategory.OVERWEIGHT: 'overweight'>)
        """
        height_m = height_cm / 100.0
        bmi_value = round_to_tenth(weight_kg / (height_m ** 2))

        return BMIReading(value=bmi_value, category=BMICategory.from_value(bmi_value))
