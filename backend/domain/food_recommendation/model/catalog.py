"""Curated food catalogue, grouped by fitness goal."""

from types import MappingProxyType
from typing import Mapping, Tuple

from . import Difficulty, FitnessGoal, FoodRecommendation

FOOD_CATALOG: Mapping[FitnessGoal, Tuple[FoodRecommendation, ...]] = MappingProxyType(
    {
        FitnessGoal.BULKING: (
            FoodRecommendation(
                id="1",
                name="Protein Oatmeal Bowl",
                category="Breakfast",
                calories=450,
                protein_g=25,
                carbs_g=55,
                fat_g=12,
                benefits=("High Protein", "Complex Carbs", "Sustained Energy"),
                best_time="Morning",
                serving_size="1 bowl",
                difficulty=Difficulty.EASY,
                prep_time_min=10,
                rating=4.8,
            ),
            FoodRecommendation(
                id="2",
                name="Grilled Chicken & Sweet Potato",
                category="Lunch/Dinner",
                calories=520,
                protein_g=45,
                carbs_g=35,
                fat_g=18,
                benefits=("Lean Protein", "Complex Carbs", "Muscle Building"),
                best_time="Post-Workout",
                serving_size="200g chicken + 150g potato",
                difficulty=Difficulty.MEDIUM,
                prep_time_min=25,
                rating=4.9,
            ),
            FoodRecommendation(
                id="3",
                name="Peanut Butter Banana Smoothie",
                category="Snack",
                calories=380,
                protein_g=18,
                carbs_g=42,
                fat_g=16,
                benefits=("Quick Energy", "Healthy Fats", "Post-Workout Recovery"),
                best_time="Pre/Post Workout",
                serving_size="1 large glass",
                difficulty=Difficulty.EASY,
                prep_time_min=5,
                rating=4.7,
            ),
        ),
        FitnessGoal.CUTTING: (
            FoodRecommendation(
                id="4",
                name="Greek Yogurt Berry Bowl",
                category="Breakfast",
                calories=180,
                protein_g=20,
                carbs_g=18,
                fat_g=3,
                benefits=("High Protein", "Low Calorie", "Antioxidants"),
                best_time="Morning",
                serving_size="150g yogurt + berries",
                difficulty=Difficulty.EASY,
                prep_time_min=5,
                rating=4.6,
            ),
            FoodRecommendation(
                id="5",
                name="Grilled Fish & Vegetables",
                category="Lunch/Dinner",
                calories=280,
                protein_g=35,
                carbs_g=12,
                fat_g=8,
                benefits=("Lean Protein", "Low Carb", "Omega-3"),
                best_time="Dinner",
                serving_size="150g fish + vegetables",
                difficulty=Difficulty.MEDIUM,
                prep_time_min=20,
                rating=4.8,
            ),
            FoodRecommendation(
                id="6",
                name="Cucumber Tuna Salad",
                category="Snack",
                calories=120,
                protein_g=15,
                carbs_g=8,
                fat_g=2,
                benefits=("Low Calorie", "High Protein", "Hydrating"),
                best_time="Afternoon",
                serving_size="1 serving",
                difficulty=Difficulty.EASY,
                prep_time_min=8,
                rating=4.4,
            ),
        ),
        FitnessGoal.MAINTENANCE: (
            FoodRecommendation(
                id="7",
                name="Balanced Quinoa Bowl",
                category="Lunch",
                calories=350,
                protein_g=18,
                carbs_g=45,
                fat_g=12,
                benefits=("Complete Protein", "Balanced Macros", "Fiber Rich"),
                best_time="Lunch",
                serving_size="1 bowl",
                difficulty=Difficulty.MEDIUM,
                prep_time_min=15,
                rating=4.7,
            ),
            FoodRecommendation(
                id="8",
                name="Chicken Caesar Salad",
                category="Dinner",
                calories=320,
                protein_g=28,
                carbs_g=15,
                fat_g=18,
                benefits=("Lean Protein", "Healthy Fats", "Nutrient Dense"),
                best_time="Dinner",
                serving_size="1 large salad",
                difficulty=Difficulty.EASY,
                prep_time_min=12,
                rating=4.5,
            ),
        ),
        FitnessGoal.STRENGTH: (
            FoodRecommendation(
                id="9",
                name="Power Breakfast Burrito",
                category="Breakfast",
                calories=480,
                protein_g=32,
                carbs_g=38,
                fat_g=22,
                benefits=("High Protein", "Sustained Energy", "Muscle Recovery"),
                best_time="Morning",
                serving_size="1 large burrito",
                difficulty=Difficulty.MEDIUM,
                prep_time_min=18,
                rating=4.9,
            ),
            FoodRecommendation(
                id="10",
                name="Steak & Rice Bowl",
                category="Dinner",
                calories=580,
                protein_g=42,
                carbs_g=48,
                fat_g=20,
                benefits=("High Protein", "Iron Rich", "Muscle Building"),
                best_time="Post-Workout",
                serving_size="150g steak + rice",
                difficulty=Difficulty.MEDIUM,
                prep_time_min=22,
                rating=4.8,
            ),
        ),
    }
)
