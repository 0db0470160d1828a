"""Nutrition guidance — meal split, workout carbs, fiber, sample meals."""

from __future__ import annotations

from tungsten.engine.models import CyclePhase, DietaryMode, Gender, Macros, NutritionGuidance
from tungsten.engine.units import round_int

MEALS_PER_DAY = 3
MIN_PROTEIN_PER_MEAL = 20
WORKOUT_CARB_SHARE = 0.25
FOLLICULAR_CARB_BOOST = 1.1
FIBER_G_PER_1000_KCAL = 14

FOOD_IDEAS: dict[str, list[str]] = {
    "proteins": ["Chicken breast", "Salmon", "Greek yogurt", "Eggs", "Cottage cheese", "Lentils", "Tofu"],
    "carbs": ["Quinoa", "Oats", "Sweet potatoes", "Brown rice", "Berries", "Beans", "Whole-grain bread"],
    "fats": ["Avocado", "Olive oil", "Almonds", "Walnuts", "Chia", "Flax", "Peanut butter"],
}

SAMPLE_MEALS: dict[DietaryMode, list[str]] = {
    DietaryMode.cutting: ["Yogurt+berries+oats", "Chicken+quinoa+greens", "Tofu stir-fry + cauli rice"],
    DietaryMode.maintenance: ["Salmon+brown rice+asparagus", "Turkey chili", "Sushi bowl (fish, rice, avocado)"],
    DietaryMode.bulking: ["Eggs+oats+banana+nut butter", "Steak+sweet potato+salad", "Lentil curry+rice+EVOO"],
}


def protein_per_meal(protein_g: int) -> int:
    return max(MIN_PROTEIN_PER_MEAL, round_int(protein_g / MEALS_PER_DAY))


def workout_carbs(carbs_g: int, gender: Gender | str | None, phase: CyclePhase | str | None) -> int:
    """Carbs for each of the pre- and post-workout feeds."""
    boost = FOLLICULAR_CARB_BOOST if gender == Gender.female and phase == CyclePhase.follicular else 1.0
    return round_int(carbs_g * WORKOUT_CARB_SHARE * boost)


def fiber_target(calories: float) -> int:
    return round_int(calories / 1000 * FIBER_G_PER_1000_KCAL)


def nutrition_guidance(
    calories: int,
    macros: Macros,
    mode: DietaryMode,
    gender: Gender | str | None = None,
    phase: CyclePhase | str | None = None,
) -> NutritionGuidance:
    per_meal = protein_per_meal(macros.protein)
    carbs = workout_carbs(macros.carbs, gender, phase)
    return NutritionGuidance(
        protein_per_meal=per_meal,
        meals_per_day=MEALS_PER_DAY,
        carbs_pre_workout=carbs,
        carbs_post_workout=carbs,
        fiber_target=fiber_target(calories),
        timing=[
            f"Pre: ~{carbs} g carbs + 20–30 g protein (60–90 min before)",
            f"Post: ~{carbs} g carbs + 20–40 g protein within 2 h",
            "Evening: slow protein (cottage cheese/Greek yogurt) if hungry",
            "Distribute protein evenly; anchor meals to training days",
        ],
        sample_meals=list(SAMPLE_MEALS[mode]),
        food_ideas={group: list(items) for group, items in FOOD_IDEAS.items()},
    )
