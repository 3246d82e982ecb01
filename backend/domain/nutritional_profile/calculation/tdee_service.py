"""TDEEService - Total Daily Energy Expenditure calculation."""

from typing import Optional

from domain.shared.rounding import round_half_up

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    TDEE represents total calories burned per day, calculated by
    multiplying BMR by Physical Activity Level (PAL) multiplier.

    Formula:
        TDEE = round(BMR × PAL)

    PAL Multipliers:
        - Sedentary: 1.2 (little/no exercise)
        - Light: 1.375 (light exercise 1-3 days/week)
        - Moderate: 1.55 (moderate exercise 3-5 days/week)
        - Active: 1.725 (hard exercise 6-7 days/week)
        - Very Active: 1.9 (very hard exercise + physical job)

    Without an activity level only the BMR is known and TDEE is None.
    """

    def calculate(
        self, bmr: BMR, activity_level: Optional[ActivityLevel]
    ) -> Optional[TDEE]:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level, or None

        Returns:
            TDEE in kcal/day, or None in BMR-only mode

        Example:
            >>> service = TDEEService()
            >>> service.calculate(BMR(value=1674), ActivityLevel.MODERATE).value
            2595
        """
        if activity_level is None:
            return None

        tdee_value = bmr.value * activity_level.pal_multiplier()

        return TDEE(value=round_half_up(tdee_value), activity_level=activity_level)
