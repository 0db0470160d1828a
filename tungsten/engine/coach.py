"""Coach guidance — micro-goals from weak domains, recovery protocols by tier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from tungsten.engine.models import CardioPrescription, CardioTier, ColdExposure, DerivedMetrics, NutritionGuidance

LOW_SCORE = 2
ALL_IN_THRESHOLD = 3


@dataclass(frozen=True, slots=True)
class ColdProtocol:
    temperature_f: str
    duration: str
    frequency: str


COLD_PROTOCOLS: dict[CardioTier, ColdProtocol] = {
    CardioTier.rebuild: ColdProtocol("50–59°F", "1–2 min", "2–3×/wk"),
    CardioTier.build: ColdProtocol("48–57°F", "2–4 min", "3×/wk"),
    CardioTier.perform: ColdProtocol("45–55°F", "3–5 min", "3–4×/wk"),
}
COLD_CAUTION = "Avoid immediately after heavy lifting; okay after Zone 2."

BREATHING_PROTOCOLS: list[str] = [
    "Physiological sigh ×3 for rapid downshift",
    "Box breathing 4-4-4-4 for 2–5 min",
    "Pre-sleep: 4-7-8 × 4 cycles",
]


def cardio_line(plan: CardioPrescription) -> str:
    return f"Cardio: Zone 2 {plan.zone2_minutes} min OR {plan.interval_count}×(1′ hard / 1′ easy) after warm up."


def micro_goals(
    answers: Mapping[str, int],
    metrics: DerivedMetrics,
    nutrition: NutritionGuidance,
) -> list[str]:
    """One concrete action per weak domain, always ending with the cardio dose."""
    goals: list[str] = []
    if answers.get("sleep", 3) <= LOW_SCORE:
        goals.append(f"Protect an {metrics.sleep_hours:g}h window. Use the 3-2-1 rule (alcohol/food/water).")
    if answers.get("breath", 3) <= LOW_SCORE:
        goals.append("Do 2–4 min of Box Breathing or 3× Physiological Sighs before hard tasks.")
    if answers.get("hydration", 3) <= LOW_SCORE:
        goals.append(
            f"Hit {metrics.hydration.water_liters:g} L water + ~{metrics.hydration.sodium_mg} mg sodium today."
        )
    if answers.get("nutrition", 3) <= LOW_SCORE:
        goals.append(
            f"Floor: ≥ {nutrition.protein_per_meal} g protein each meal + {nutrition.fiber_target} g fiber total."
        )
    if answers.get("focus", 3) <= LOW_SCORE:
        goals.append("Single-task 25 min (timer on). Put phone in another room.")
    if answers.get("turnToward", 3) <= LOW_SCORE:
        goals.append("Turn toward one small bid: eye contact + a curious question.")
    if answers.get("allIn", 3) <= ALL_IN_THRESHOLD:
        goals.append("Write a 2-line intention for why you’re all-in this week.")
    goals.append(cardio_line(metrics.cardio))
    return goals


def cold_exposure(tier: CardioTier) -> ColdExposure:
    protocol = COLD_PROTOCOLS[tier]
    return ColdExposure(
        tier=tier,
        temperature_f=protocol.temperature_f,
        duration=protocol.duration,
        frequency=protocol.frequency,
        caution=COLD_CAUTION,
    )
