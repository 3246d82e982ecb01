"""Food recommendation domain.

Curated food suggestions per fitness goal, with a daily calorie estimate
from the revised Harris-Benedict equation.
"""
