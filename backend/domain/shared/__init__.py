"""Shared domain helpers."""

from .rounding import round_half_up, round_to_tenth

__all__ = ["round_half_up", "round_to_tenth"]
