"""BMR and daily calorie target calculator."""

from nutritrack.domain.bmr import ActivityLevel, BmrResults, Sex
from nutritrack.rounding import round_half_up

CALORIE_ADJUSTMENT = 500


def calculate_bmr(
    age: float,
    sex: Sex,
    weight_kg: float,
    height_cm: float,
    activity_level: ActivityLevel,
) -> BmrResults:
    """Compute BMR with the Mifflin-St Jeor formula and derived targets.

    Maintenance is BMR times the activity factor; the weight-loss and bulking
    targets shift maintenance by 500 kcal either way.
    """
    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age
    bmr += 5 if sex is Sex.MALE else -161
    maintenance = bmr * activity_level.factor
    return BmrResults(
        bmr=round_half_up(bmr),
        maintenance=round_half_up(maintenance),
        weight_loss=round_half_up(maintenance - CALORIE_ADJUSTMENT),
        bulking=round_half_up(maintenance + CALORIE_ADJUSTMENT),
    )
