"""Unit tests for BMRService."""

from domain.nutritional_profile.calculation.bmr_service import BMRService
from domain.nutritional_profile.core.value_objects import (
    AnthropometricInput,
    Gender,
)


class TestBMRService:
    """Test BMR calculation using Mifflin-St Jeor formula."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = BMRService()

    def test_calculate_bmr_male(self):
        """Test BMR calculation for male."""
        data = AnthropometricInput(
            weight_kg=70.0, height_cm=175.0, age_years=25, gender=Gender.MALE
        )

        bmr = self.service.calculate(data)

        # Expected: 10*70 + 6.25*175 - 5*25 + 5 = 1673.75 -> 1674
        assert bmr.value == 1674

    def test_calculate_bmr_female(self):
        """Test BMR calculation for female."""
        data = AnthropometricInput(
            weight_kg=60.0, height_cm=165.0, age_years=25, gender=Gender.FEMALE
        )

        bmr = self.service.calculate(data)

        # Expected: 10*60 + 6.25*165 - 5*25 - 161 = 1345.25 -> 1345
        assert bmr.value == 1345

    def test_male_female_difference(self):
        """Test identical inputs differ by exactly 166 kcal between sexes."""
        male = AnthropometricInput(
            weight_kg=70.0, height_cm=175.0, age_years=25, gender=Gender.MALE
        )
        female = AnthropometricInput(
            weight_kg=70.0, height_cm=175.0, age_years=25, gender=Gender.FEMALE
        )

        assert self.service.calculate(male).value == 1674
        assert self.service.calculate(female).value == 1508
        assert (
            self.service.calculate(male).value - self.service.calculate(female).value
            == 166
        )

    def test_calculate_bmr_different_ages(self):
        """Test that age affects BMR calculation."""
        young = AnthropometricInput(
            weight_kg=80.0, height_cm=180.0, age_years=25, gender=Gender.MALE
        )
        old = AnthropometricInput(
            weight_kg=80.0, height_cm=180.0, age_years=50, gender=Gender.MALE
        )

        # Older age should have lower BMR (5 kcal/year difference)
        assert self.service.calculate(young).value - self.service.calculate(old).value == 125

    def test_calculate_bmr_different_weights(self):
        """Test that weight affects BMR calculation."""
        lighter = AnthropometricInput(
            weight_kg=60.0, height_cm=170.0, age_years=30, gender=Gender.MALE
        )
        heavier = AnthropometricInput(
            weight_kg=80.0, height_cm=170.0, age_years=30, gender=Gender.MALE
        )

        # Heavier should have higher BMR (10 kcal/kg difference)
        assert (
            self.service.calculate(heavier).value - self.service.calculate(lighter).value
            == 200
        )

    def test_bmr_is_integer(self):
        """Test BMR value is rounded to an integer."""
        data = AnthropometricInput(
            weight_kg=72.3, height_cm=178.4, age_years=41, gender=Gender.FEMALE
        )

        bmr = self.service.calculate(data)

        # 723 + 1115 - 205 - 161 = 1472
        assert isinstance(bmr.value, int)
        assert bmr.value == 1472
