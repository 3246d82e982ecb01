"""Unit tests for FoodRecommendationService."""

import pytest

from domain.food_recommendation.application.recommendation_service import (
    DEFAULT_AGE_YEARS,
    FoodRecommendationService,
)
from domain.food_recommendation.model import (
    _ADJUSTMENTS,
    _LABELS,
    Difficulty,
    FitnessGoal,
    FoodRecommendation,
)
from domain.food_recommendation.model.catalog import FOOD_CATALOG
from domain.nutritional_profile.core.exceptions import (
    InvalidAnthropometricDataError,
    InvalidMeasurementError,
)
from domain.nutritional_profile.core.value_objects import (
    ActivityLevel,
    AnthropometricInput,
    Gender,
)


class TestFoodRecommendationService:
    """Test calorie estimate and food selection."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = FoodRecommendationService()
        self.male = AnthropometricInput(
            weight_kg=80.0, height_cm=180.0, age_years=25, gender=Gender.MALE
        )

    @pytest.mark.parametrize(
        "goal,expected",
        [
            (FitnessGoal.MAINTENANCE, 2917),
            (FitnessGoal.CUTTING, 2417),
            (FitnessGoal.BULKING, 3417),
            (FitnessGoal.STRENGTH, 3117),
        ],
    )
    def test_estimate_daily_calories_male(self, goal, expected):
        """Test Harris-Benedict estimate with moderate default activity."""
        # 88.362 + 13.397*80 + 4.799*180 - 5.677*25 = 1882.017; * 1.55
        assert self.service.estimate_daily_calories(self.male, goal) == expected

    def test_estimate_daily_calories_female(self):
        """Test female equation."""
        female = AnthropometricInput(
            weight_kg=60.0, height_cm=165.0, age_years=25, gender=Gender.FEMALE
        )

        # 447.593 + 9.247*60 + 3.098*165 - 4.330*25 = 1405.333; * 1.55
        assert (
            self.service.estimate_daily_calories(female, FitnessGoal.MAINTENANCE)
            == 2178
        )

    def test_explicit_activity_level(self):
        """Test activity level overrides the moderate default."""
        result = self.service.estimate_daily_calories(
            self.male, FitnessGoal.CUTTING, ActivityLevel.SEDENTARY
        )

        # 1882.017 * 1.2 - 500 = 1758.42
        assert result == 1758

    def test_recommend_returns_goal_foods(self):
        """Test plan contains the catalogue entries for the goal."""
        plan = self.service.recommend(
            weight_kg=80.0,
            height_cm=180.0,
            gender=Gender.MALE,
            goal=FitnessGoal.CUTTING,
        )

        assert plan.goal is FitnessGoal.CUTTING
        assert plan.daily_calories == 2417
        assert plan.count == 3
        assert plan.foods == FOOD_CATALOG[FitnessGoal.CUTTING]

    def test_recommend_uses_default_age(self):
        """Test age defaults to 25."""
        assert DEFAULT_AGE_YEARS == 25
        default_age = self.service.recommend(80.0, 180.0, Gender.MALE, FitnessGoal.BULKING)
        explicit_age = self.service.recommend(
            80.0, 180.0, Gender.MALE, FitnessGoal.BULKING, age_years=25
        )

        assert default_age.daily_calories == explicit_age.daily_calories

    def test_recommend_rejects_invalid_weight(self):
        """Test invalid body data raises a domain error."""
        with pytest.raises(InvalidAnthropometricDataError):
            self.service.recommend(0.0, 180.0, Gender.MALE, FitnessGoal.BULKING)

    @pytest.mark.parametrize(
        "weight_kg,height_cm,field",
        [
            (1e308, 180.0, "weight"),
            (80.0, 1e-300, "height"),
            (80.0, 300.0, "height"),
        ],
    )
    def test_recommend_rejects_out_of_range_body_data(self, weight_kg, height_cm, field):
        """Test implausible weight or height raises before any estimate."""
        with pytest.raises(InvalidMeasurementError) as exc_info:
            self.service.recommend(weight_kg, height_cm, Gender.MALE, FitnessGoal.BULKING)

        assert exc_info.value.field == field

    def test_goal_without_foods(self):
        """Test a catalogue without entries for the goal yields no foods."""
        service = FoodRecommendationService(catalog={})

        plan = service.recommend(80.0, 180.0, Gender.MALE, FitnessGoal.STRENGTH)

        assert plan.foods == ()
        assert plan.count == 0


class TestFoodCatalog:
    """Test the curated catalogue."""

    def test_every_goal_has_foods(self):
        """Test each fitness goal has at least two foods."""
        counts = {goal: len(FOOD_CATALOG[goal]) for goal in FitnessGoal}

        assert counts == {
            FitnessGoal.BULKING: 3,
            FitnessGoal.CUTTING: 3,
            FitnessGoal.MAINTENANCE: 2,
            FitnessGoal.STRENGTH: 2,
        }

    def test_ids_are_unique(self):
        """Test food ids are unique across goals."""
        ids = [food.id for foods in FOOD_CATALOG.values() for food in foods]

        assert len(ids) == len(set(ids))

    def test_entries_are_well_formed(self):
        """Test catalogue entries carry positive nutrition values."""
        for foods in FOOD_CATALOG.values():
            for food in foods:
                assert isinstance(food, FoodRecommendation)
                assert food.calories > 0
                assert isinstance(food.difficulty, Difficulty)
                assert 0 < food.rating <= 5

    def test_catalog_is_read_only(self):
        """Test the catalogue mapping cannot be modified."""
        with pytest.raises(TypeError):
            FOOD_CATALOG[FitnessGoal.BULKING] = ()  # type: ignore[index]


class TestFitnessGoal:
    """Test FitnessGoal adjustments."""

    def test_calorie_adjustment(self):
        """Test calorie adjustment per goal."""
        assert FitnessGoal.BULKING.calorie_adjustment() == 500
        assert FitnessGoal.CUTTING.calorie_adjustment() == -500
        assert FitnessGoal.MAINTENANCE.calorie_adjustment() == 0
        assert FitnessGoal.STRENGTH.calorie_adjustment() == 200

    def test_label(self):
        """Test display labels."""
        assert FitnessGoal.CUTTING.label() == "Fat Loss (Cutting)"
        assert FitnessGoal.BULKING.label() == "Muscle Building (Bulking)"

    def test_every_goal_has_adjustment_and_label(self):
        """Test the lookup tables are keyed by every goal member."""
        assert set(_ADJUSTMENTS) == set(FitnessGoal)
        assert set(_LABELS) == set(FitnessGoal)

    def test_lookup_tables_are_read_only(self):
        """Test adjustments and labels cannot be modified at runtime."""
        with pytest.raises(TypeError):
            _ADJUSTMENTS[FitnessGoal.BULKING] = 1000  # type: ignore[index]
        with pytest.raises(TypeError):
            _LABELS[FitnessGoal.BULKING] = "Bulk"  # type: ignore[index]
