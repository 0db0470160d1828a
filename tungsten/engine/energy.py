"""Energy model — BMR, TDEE, target calories, macros, dietary mode.

Missing inputs degrade to 0 (BMR=0 → TDEE=0) instead of raising; the
final calorie target is always clamped into [CALORIE_FLOOR, CALORIE_CEILING].
"""

from __future__ import annotations

from tungsten.engine.models import ActivityLevel, DietaryMode, Gender, Macros
from tungsten.engine.units import clamp, round_int

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    ActivityLevel.sedentary.value: 1.2,
    ActivityLevel.light.value: 1.375,
    ActivityLevel.moderate.value: 1.55,
    ActivityLevel.active.value: 1.725,
    ActivityLevel.athlete.value: 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.55

MAINTENANCE_DEADBAND_KG = 2.0
CUT_FACTOR = 0.82
GAIN_FACTOR = 1.10

CALORIE_FLOOR = 1200
CALORIE_CEILING = 5000

PROTEIN_G_PER_KG = 1.8
FAT_SHARE = 0.28


def bmr_mifflin_st_jeor(
    weight_kg: float,
    height_cm: float,
    age_years: int,
    gender: Gender | str | None,
) -> float:
    """Mifflin-St Jeor BMR in kcal/day. 0 when any input is absent or zero."""
    if not gender or not age_years or not height_cm or not weight_kg:
        return 0.0
    base = 10.0 * weight_kg + 6.25 * height_cm - 5.0 * age_years
    if gender == Gender.female:
        return base - 161.0
    return base + 5.0


def activity_multiplier(level: ActivityLevel | str | None) -> float:
    key = level.value if isinstance(level, ActivityLevel) else level
    return ACTIVITY_MULTIPLIERS.get(key or "", DEFAULT_ACTIVITY_MULTIPLIER)


def tdee(bmr: float, level: ActivityLevel | str | None) -> int:
    return round_int(bmr * activity_multiplier(level))


def target_calories(tdee_kcal: int, weight_kg: float, goal_weight_kg: float) -> int:
    """Goal-driven calorie target before cycle delta and clamping.

    Within ±2 kg of goal the TDEE is returned unchanged, so recommendations
    do not oscillate around the goal weight.
    """
    if not tdee_kcal or not weight_kg or not goal_weight_kg:
        return tdee_kcal
    delta = goal_weight_kg - weight_kg
    if abs(delta) < MAINTENANCE_DEADBAND_KG:
        return tdee_kcal
    if delta < 0:
        return round_int(tdee_kcal * CUT_FACTOR)
    return round_int(tdee_kcal * GAIN_FACTOR)


def adjusted_calories(base_kcal: int, kcal_delta: int = 0) -> int:
    """Apply the cycle delta and clamp to the hard floor/ceiling."""
    return int(clamp(base_kcal + kcal_delta, CALORIE_FLOOR, CALORIE_CEILING))


def macros_from_calories(
    calories: float,
    weight_kg: float,
    protein_g_per_kg: float = PROTEIN_G_PER_KG,
    fat_share: float = FAT_SHARE,
) -> Macros:
    """Protein by body mass, fat by calorie share, carbs fill the rest (never < 0)."""
    if not calories or not weight_kg:
        return Macros()
    protein = round_int(weight_kg * protein_g_per_kg)
    fat = round_int(calories * fat_share / 9)
    carbs = max(0, round_int((calories - protein * 4 - fat * 9) / 4))
    return Macros(protein=protein, fat=fat, carbs=carbs)


def dietary_mode(calories: float, tdee_kcal: float) -> DietaryMode:
    if calories < tdee_kcal * 0.95:
        return DietaryMode.cutting
    if calories > tdee_kcal * 1.05:
        return DietaryMode.bulking
    return DietaryMode.maintenance
