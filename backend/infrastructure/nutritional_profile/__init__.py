"""Nutritional profile infrastructure wiring."""
