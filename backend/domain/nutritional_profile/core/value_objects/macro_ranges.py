"""MacroRanges value object - macronutrient gram ranges."""

from dataclasses import dataclass

# kcal per gram
PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


@dataclass(frozen=True)
class MacroRange:
    """Daily intake range for one macronutrient, in grams.

    Attributes:
        min_g: Lower bound in grams
        max_g: Upper bound in grams
    """

    min_g: int
    max_g: int

    def __str__(self) -> str:
        return f"{self.min_g}-{self.max_g}g"


@dataclass(frozen=True)
class MacroRanges:
    """Protein, fat and carbohydrate ranges for a calorie target.

    Uses standard calorie conversion: protein 4 kcal/g, carbs 4 kcal/g,
    fat 9 kcal/g.

    Attributes:
        protein: Protein range
        fat: Fat range
        carbs: Carbohydrate range
    """

    protein: MacroRange
    fat: MacroRange
    carbs: MacroRange

    def __str__(self) -> str:
        return f"P {self.protein} / C {self.carbs} / F {self.fat}"
