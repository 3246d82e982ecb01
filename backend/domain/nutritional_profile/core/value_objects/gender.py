"""Gender value object - selects the BMR equation constant."""

from enum import Enum


class Gender(str, Enum):
    """Biological sex used by the Mifflin-St Jeor equation."""

    MALE = "male"
    FEMALE = "female"
