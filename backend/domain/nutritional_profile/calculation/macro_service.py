"""MacroService - macronutrient range calculation."""

from domain.shared.rounding import round_half_up

from ..core.ports.calculators import IMacroCalculator
from ..core.value_objects.macro_ranges import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    MacroRange,
    MacroRanges,
)

PROTEIN_MIN_G_PER_KG = 1.6
PROTEIN_MAX_G_PER_KG = 2.2
FAT_MIN_CALORIE_SHARE = 0.20
FAT_MAX_CALORIE_SHARE = 0.30


class MacroService(IMacroCalculator):
    """Split a calorie target into protein, fat and carbohydrate ranges.

    Protein: 1.6-2.2 g per kg body weight
    Fat:     20-30% of calories
    Carbs:   remaining calories, where the carb upper bound uses the
             protein and fat lower bounds and the carb lower bound uses
             the protein and fat upper bounds. Both clamp at 0.

    Calorie conversion:
        - Protein: 4 kcal/g
        - Carbohydrates: 4 kcal/g
        - Fat: 9 kcal/g
    """

    def calculate(self, goal_calories: int, weight_kg: float) -> MacroRanges:
        """Calculate macro ranges.

        Args:
            goal_calories: Daily calorie target
            weight_kg: Body weight in kg

        Returns:
            MacroRanges: Gram ranges for protein, fat and carbs

        Example:
            >>> ranges = MacroService().calculate(2095, 70.0)
            >>> str(ranges)
            'P 112-154g / C 212-306g / F 47-70g'
        """
        protein = MacroRange(
            min_g=round_half_up(weight_kg * PROTEIN_MIN_G_PER_KG),
            max_g=round_half_up(weight_kg * PROTEIN_MAX_G_PER_KG),
        )
        fat = MacroRange(
            min_g=round_half_up(goal_calories * FAT_MIN_CALORIE_SHARE / FAT_KCAL_PER_G),
            max_g=round_half_up(goal_calories * FAT_MAX_CALORIE_SHARE / FAT_KCAL_PER_G),
        )

        carbs_max = self._remaining_carbs(goal_calories, protein.min_g, fat.min_g)
        carbs_min = self._remaining_carbs(goal_calories, protein.max_g, fat.max_g)

        return MacroRanges(
            protein=protein,
            fat=fat,
            carbs=MacroRange(min_g=max(0, carbs_min), max_g=max(0, carbs_max)),
        )

    @staticmethod
    def _remaining_carbs(goal_calories: int, protein_g: int, fat_g: int) -> int:
        remaining = (
            goal_calories
            - protein_g * PROTEIN_KCAL_PER_G
            - fat_g * FAT_KCAL_PER_G
        )
        return round_half_up(remaining / CARBS_KCAL_PER_G)
