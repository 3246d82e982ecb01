"""CalculationResult value object - output of an energy plan calculation."""

from dataclasses import dataclass
from typing import Optional

from .bmr import BMR
from .macro_ranges import MacroRanges
from .tdee import TDEE


@dataclass(frozen=True)
class CalculationResult:
    """Energy plan derived from one set of inputs.

    Recomputed on every request. ``tdee`` is None in BMR-only mode (no
    activity level); ``goal_calories`` and ``macros`` are None whenever
    ``tdee`` is.

    Attributes:
        bmr: Basal metabolic rate
        tdee: Total daily energy expenditure
        goal_calories: Daily calorie target for the chosen goal (kcal/day)
        macros: Protein/fat/carb gram ranges for ``goal_calories``
    """

    bmr: BMR
    tdee: Optional[TDEE] = None
    goal_calories: Optional[int] = None
    macros: Optional[MacroRanges] = None

    def is_bmr_only(self) -> bool:
        return self.tdee is None
