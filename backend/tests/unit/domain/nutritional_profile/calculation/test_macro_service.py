"""Unit tests for MacroService."""

from domain.nutritional_profile.calculation.macro_service import MacroService


class TestMacroService:
    """Test macro range allocation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = MacroService()

    def test_reference_ranges(self):
        """Test ranges for 2095 kcal at 70 kg."""
        macros = self.service.calculate(2095, 70.0)

        assert (macros.protein.min_g, macros.protein.max_g) == (112, 154)
        assert (macros.fat.min_g, macros.fat.max_g) == (47, 70)
        assert (macros.carbs.min_g, macros.carbs.max_g) == (212, 306)

    def test_protein_depends_on_weight_only(self):
        """Test protein range ignores calories."""
        low = self.service.calculate(1500, 80.0)
        high = self.service.calculate(3500, 80.0)

        assert low.protein == high.protein
        assert (low.protein.min_g, low.protein.max_g) == (128, 176)

    def test_fat_depends_on_calories_only(self):
        """Test fat range ignores weight."""
        light = self.service.calculate(2400, 55.0)
        heavy = self.service.calculate(2400, 95.0)

        assert light.fat == heavy.fat
        # 2400 * 0.2 / 9 = 53.3; 2400 * 0.3 / 9 = 80
        assert (light.fat.min_g, light.fat.max_g) == (53, 80)

    def test_carbs_cross_pairing(self):
        """Test carb bounds use the opposite protein/fat bounds."""
        macros = self.service.calculate(2095, 70.0)

        expected_max = (2095 - macros.protein.min_g * 4 - macros.fat.min_g * 9) / 4
        expected_min = (2095 - macros.protein.max_g * 4 - macros.fat.max_g * 9) / 4
        assert macros.carbs.max_g == round(expected_max)
        assert abs(macros.carbs.min_g - expected_min) <= 0.5

    def test_carbs_min_clamped_at_zero(self):
        """Test low calorie targets clamp the carb lower bound."""
        macros = self.service.calculate(1000, 100.0)

        assert macros.carbs.min_g == 0
        # (1000 - 160*4 - 22*9) / 4 = 40.5 -> 41
        assert macros.carbs.max_g == 41

    def test_carbs_fully_clamped(self):
        """Test both carb bounds clamp when protein and fat exceed calories."""
        macros = self.service.calculate(800, 150.0)

        assert macros.carbs.min_g == 0
        assert macros.carbs.max_g == 0

    def test_ranges_are_ordered(self):
        """Test min does not exceed max for any macro."""
        macros = self.service.calculate(2750, 82.5)

        for macro_range in (macros.protein, macros.fat, macros.carbs):
            assert macro_range.min_g <= macro_range.max_g
