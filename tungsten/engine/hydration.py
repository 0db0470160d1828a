"""Hydration and sleep targets from body mass, training load and cycle deltas."""

from __future__ import annotations

from typing import Mapping

from tungsten.engine.models import CycleAdjustment, Hydration
from tungsten.engine.units import clamp, round_half_up, round_int

WATER_ML_PER_KG = 35
WATER_ML_PER_EXTRA_Z2_MIN = 8
SODIUM_BASE_MG = 1800
SODIUM_MG_PER_EXTRA_Z2_MIN = 3

SLEEP_BASE_HOURS = 7.5
SLEEP_MIN_HOURS = 7.0
SLEEP_MAX_HOURS = 9.5
LOW_SCORE = 2  # sleep/breath answers at or below this earn extra sleep


def water_ml(weight_kg: float, zone2_minutes: int, water_delta_ml: int = 0) -> int:
    base = weight_kg * WATER_ML_PER_KG + max(0, zone2_minutes - 30) * WATER_ML_PER_EXTRA_Z2_MIN
    return round_int(base) + water_delta_ml


def sodium_mg(zone2_minutes: int) -> int:
    return int(clamp(SODIUM_BASE_MG + max(0, zone2_minutes - 60) * SODIUM_MG_PER_EXTRA_Z2_MIN, 1500, 4000))


def hydration_targets(weight_kg: float, zone2_minutes: int, cycle: CycleAdjustment) -> Hydration:
    water = water_ml(weight_kg, zone2_minutes, cycle.water_ml_delta)
    return Hydration(
        water_ml=water,
        water_liters=round_half_up(water / 1000, 1),
        sodium_mg=sodium_mg(zone2_minutes),
    )


def sleep_hours(answers: Mapping[str, int], sleep_bonus_hours: float = 0.0) -> float:
    hours = SLEEP_BASE_HOURS + sleep_bonus_hours
    if answers.get("sleep", 3) <= LOW_SCORE:
        hours += 0.5
    if answers.get("breath", 3) <= LOW_SCORE:
        hours += 0.5
    return clamp(round_half_up(hours, 1), SLEEP_MIN_HOURS, SLEEP_MAX_HOURS)
