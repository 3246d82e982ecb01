"""Calculation services for energy estimation."""

from .bmi_service import BMIService
from .bmr_service import BMRService
from .goal_calorie_service import GoalCalorieService
from .macro_service import MacroService
from .tdee_service import TDEEService

__all__ = [
    "BMRService",
    "TDEEService",
    "GoalCalorieService",
    "MacroService",
    "BMIService",
]
