"""Metric builders — the engine.

Takes a Profile + answers snapshot, converts units, runs every model and
returns DerivedMetrics. Recomputed in full on every call; graceful
degradation means missing data never raises.
"""

from __future__ import annotations

from typing import Mapping

from tungsten.engine import assessment, cardio, energy, hydration
from tungsten.engine.coach import BREATHING_PROTOCOLS, cold_exposure, micro_goals
from tungsten.engine.content import select_content
from tungsten.engine.cycle import cycle_adjustment
from tungsten.engine.models import (
    ContentSelection,
    DerivedMetrics,
    Guidance,
    Profile,
    UnitSystem,
    VO2Estimates,
)
from tungsten.engine.nutrition import nutrition_guidance
from tungsten.engine.units import cm_from_feet_inches, coerce_number, kg_from_lbs, round_int


def metric_measures(profile: Profile) -> tuple[float, float, float]:
    """(height_cm, weight_kg, goal_weight_kg) regardless of the profile's unit system."""
    if profile.unit_system == UnitSystem.imperial:
        return (
            cm_from_feet_inches(profile.height_ft, profile.height_in),
            kg_from_lbs(profile.weight),
            kg_from_lbs(profile.goal_weight),
        )
    return (
        coerce_number(profile.height_cm),
        coerce_number(profile.weight),
        coerce_number(profile.goal_weight),
    )


def compute_derived_metrics(profile: Profile, answers: Mapping[str, int]) -> DerivedMetrics:
    height_cm, weight_kg, goal_kg = metric_measures(profile)
    score = assessment.total_score(answers)
    cycle = cycle_adjustment(profile.gender, profile.cycle_phase)

    # Energy
    bmr = round_int(
        energy.bmr_mifflin_st_jeor(weight_kg, height_cm, profile.age, profile.gender)
    )
    tdee = energy.tdee(bmr, profile.activity_level)
    base_kcal = energy.target_calories(tdee, weight_kg, goal_kg)
    kcal = energy.adjusted_calories(base_kcal, cycle.kcal_delta)

    # Cardio
    hr_max = cardio.hr_max(profile.age, profile.hrmax_override)
    vo2 = VO2Estimates(
        from_hr_ratio=cardio.vo2_from_hr_ratio(hr_max, profile.resting_hr),
        from_cooper_test=cardio.vo2_from_cooper(profile.cooper_meters),
    )
    plan = cardio.cardio_prescription(profile.age, score)

    return DerivedMetrics(
        height_cm=height_cm,
        weight_kg=weight_kg,
        goal_weight_kg=goal_kg,
        total_score=score,
        bmr=bmr,
        tdee=tdee,
        target_calories=kcal,
        macros=energy.macros_from_calories(kcal, weight_kg),
        dietary_mode=energy.dietary_mode(kcal, tdee),
        cycle=cycle,
        hydration=hydration.hydration_targets(weight_kg, plan.zone2_minutes, cycle),
        sleep_hours=hydration.sleep_hours(answers, cycle.sleep_bonus_hours),
        hr_max=hr_max,
        vo2=vo2,
        zones=cardio.karvonen_zones(profile.resting_hr, hr_max),
        cardio=plan,
    )


def build_content(profile: Profile, answers: Mapping[str, int], day: str) -> ContentSelection:
    return select_content(answers, day, profile.name)


def build_guidance(
    profile: Profile,
    answers: Mapping[str, int],
    metrics: DerivedMetrics | None = None,
) -> Guidance:
    """Nutrition timing, micro-goals and recovery protocols for the snapshot."""
    metrics = metrics or compute_derived_metrics(profile, answers)
    nutrition = nutrition_guidance(
        metrics.target_calories,
        metrics.macros,
        metrics.dietary_mode,
        profile.gender,
        profile.cycle_phase,
    )
    return Guidance(
        micro_goals=micro_goals(answers, metrics, nutrition),
        nutrition=nutrition,
        cold_exposure=cold_exposure(metrics.cardio.tier),
        breathing=list(BREATHING_PROTOCOLS),
    )
