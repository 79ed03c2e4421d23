"""Domain models for the BMR calculator."""

from dataclasses import dataclass
from enum import Enum


class Sex(str, Enum):
    """Biological sex used by the Mifflin-St Jeor formula."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Activity level with its TDEE multiplier."""

    SEDENTARY = "sedentary"
    LIGHTLY = "lightly"
    MODERATELY = "moderately"
    VERY = "very"
    SUPER = "super"

    @property
    def factor(self) -> float:
        return _ACTIVITY_FACTORS[self]


_ACTIVITY_FACTORS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY: 1.375,
    ActivityLevel.MODERATELY: 1.55,
    ActivityLevel.VERY: 1.725,
    ActivityLevel.SUPER: 1.9,
}


@dataclass(frozen=True)
class BmrResults:
    """Daily calorie targets derived from BMR."""

    bmr: int
    maintenance: int
    weight_loss: int
    bulking: int
