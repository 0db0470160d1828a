"""Menstrual-cycle adjustments — static phase table, configuration only."""

from __future__ import annotations

from dataclasses import dataclass, field

from tungsten.engine.models import CycleAdjustment, CyclePhase, Gender


@dataclass(frozen=True, slots=True)
class PhaseAdjustment:
    kcal_delta: int
    water_ml_delta: int
    sleep_bonus_hours: float
    training_bias: str
    micronutrients: tuple[str, ...] = field(default_factory=tuple)


NEUTRAL = PhaseAdjustment(0, 0, 0.0, "Balanced")

PHASES: dict[str, PhaseAdjustment] = {
    CyclePhase.menstruation.value: PhaseAdjustment(
        kcal_delta=100,
        water_ml_delta=300,
        sleep_bonus_hours=0.5,
        training_bias="Deload/skill/Zone 2",
        micronutrients=("Iron + Vitamin C", "Omega-3", "Magnesium"),
    ),
    CyclePhase.follicular.value: PhaseAdjustment(
        kcal_delta=0,
        water_ml_delta=0,
        sleep_bonus_hours=0.0,
        training_bias="Push strength/HIIT",
        micronutrients=("Creatine 3–5g", "Carbs around training"),
    ),
    CyclePhase.ovulation.value: PhaseAdjustment(
        kcal_delta=0,
        water_ml_delta=150,
        sleep_bonus_hours=0.0,
        training_bias="Peak power; protect joints",
        micronutrients=("Collagen + Vit C", "Electrolytes"),
    ),
    CyclePhase.luteal.value: PhaseAdjustment(
        kcal_delta=150,
        water_ml_delta=400,
        sleep_bonus_hours=0.5,
        training_bias="Zone 2/tempo; manage heat",
        micronutrients=("Magnesium", "B6", "Electrolytes"),
    ),
}


def cycle_adjustment(
    gender: Gender | str | None,
    phase: CyclePhase | str | None,
) -> CycleAdjustment:
    """Phase deltas for female profiles; the neutral default otherwise."""
    entry = NEUTRAL
    if gender == Gender.female:
        key = phase.value if isinstance(phase, CyclePhase) else phase
        entry = PHASES.get(key or "", NEUTRAL)
    return CycleAdjustment(
        kcal_delta=entry.kcal_delta,
        water_ml_delta=entry.water_ml_delta,
        sleep_bonus_hours=entry.sleep_bonus_hours,
        training_bias=entry.training_bias,
        micronutrients=list(entry.micronutrients),
    )
