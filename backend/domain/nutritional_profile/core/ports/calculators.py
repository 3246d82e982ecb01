"""Calculator ports - interfaces for BMR/TDEE/goal/macro/BMI calculations."""

from abc import ABC, abstractmethod
from typing import Optional

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.anthropometric_input import AnthropometricInput
from ..value_objects.bmi import BMIReading
from ..value_objects.bmr import BMR
from ..value_objects.goal import Goal
from ..value_objects.goal_target import GoalTarget
from ..value_objects.macro_ranges import MacroRanges
from ..value_objects.tdee import TDEE


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Calculates Basal Metabolic Rate using Mifflin-St Jeor formula.
    """

    @abstractmethod
    def calculate(self, data: AnthropometricInput) -> BMR:
        """Calculate BMR from anthropometric data.

        Args:
            data: Weight, height, age and gender in metric units

        Returns:
            BMR: Calculated basal metabolic rate
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation.

    Calculates Total Daily Energy Expenditure from BMR and activity.
    """

    @abstractmethod
    def calculate(
        self, bmr: BMR, activity_level: Optional[ActivityLevel]
    ) -> Optional[TDEE]:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level, None for BMR-only mode

        Returns:
            TDEE, or None when no activity level is given
        """
        pass


class IGoalCalorieCalculator(ABC):
    """Port for goal calorie calculation.

    Adjusts TDEE toward a weight goal.
    """

    @abstractmethod
    def calculate(
        self,
        tdee: Optional[TDEE],
        goal: Goal,
        weight_kg: float,
        goal_target: Optional[GoalTarget] = None,
    ) -> Optional[int]:
        """Calculate daily calorie target.

        Args:
            tdee: Total daily energy expenditure
            goal: Weight goal
            weight_kg: Current body weight in kg
            goal_target: Optional target weight and timeframe

        Returns:
            Daily calorie target, or None without TDEE
        """
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient range calculation.

    Calculates protein/fat/carbs gram ranges for a calorie target.
    """

    @abstractmethod
    def calculate(self, goal_calories: int, weight_kg: float) -> MacroRanges:
        """Calculate macro ranges.

        Args:
            goal_calories: Daily calorie target
            weight_kg: Body weight in kg

        Returns:
            MacroRanges: Protein/fat/carbs in grams
        """
        pass


class IBMICalculator(ABC):
    """Port for Body Mass Index calculation and classification."""

    @abstractmethod
    def calculate(self, weight_kg: float, height_cm: float) -> BMIReading:
        """Calculate and classify BMI.

        Args:
            weight_kg: Body weight in kg
            height_cm: Height in cm

        Returns:
            BMIReading: BMI value and category
        """
        pass
