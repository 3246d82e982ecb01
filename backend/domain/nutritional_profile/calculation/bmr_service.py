"""BMRService - Basal Metabolic Rate calculation."""

from domain.shared.rounding import round_half_up

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.anthropometric_input import AnthropometricInput
from ..core.value_objects.bmr import BMR
from ..core.value_objects.gender import Gender

MALE_CONSTANT = 5
FEMALE_CONSTANT = -161


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    The Mifflin-St Jeor equation is considered the most accurate formula
    for BMR calculation in normal-weight and overweight individuals.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(self, data: AnthropometricInput) -> BMR:
        """Calculate BMR from anthropometric data.

        Args:
            data: Weight (kg), height (cm), age and gender

        Returns:
            BMR: Basal metabolic rate in kcal/day, rounded half-up

        Example:
            >>> service = BMRService()
            >>> data = AnthropometricInput(
            ...     weight_kg=70.0,
            ...     height_cm=175.0,
            ...     age_years=25,
            ...     gender=Gender.MALE,
            ... )
            >>> service.calculate(data).value
            1674
        """
        # Base calculation (common for both sexes)
        base = 10 * data.weight_kg + 6.25 * data.height_cm - 5 * data.age_years

        # Sex-specific adjustment
        if data.gender is Gender.MALE:
            bmr_value = base + MALE_CONSTANT
        else:
            bmr_value = base + FEMALE_CONSTANT

        return BMR(value=round_half_up(bmr_value))
