"""Assessment scoring — normalise answers, total score, weakest-domain ranking."""

from __future__ import annotations

import math
from typing import Any, Mapping

from tungsten.engine.domains import DEFAULT_SCORE, DOMAIN_KEYS, MAX_SCORE, MIN_SCORE
from tungsten.engine.units import clamp, round_int


def default_answers() -> dict[str, int]:
    return {key: DEFAULT_SCORE for key in DOMAIN_KEYS}


def normalize_score(value: Any) -> int:
    """Clamp a raw answer into [1, 5]. Non-numeric input falls back to the default."""
    if value is None or isinstance(value, bool):
        return DEFAULT_SCORE
    try:
        number = float(value)
    except (TypeError, ValueError):
        return DEFAULT_SCORE
    if not math.isfinite(number):
        return DEFAULT_SCORE
    return int(clamp(round_int(number), MIN_SCORE, MAX_SCORE))


def normalize_answers(raw: Mapping[str, Any] | None) -> dict[str, int]:
    """Canonical answers map: all 21 keys, questionnaire order, unknown keys dropped."""
    raw = raw or {}
    return {
        key: normalize_score(raw[key]) if key in raw else DEFAULT_SCORE
        for key in DOMAIN_KEYS
    }


def total_score(answers: Mapping[str, int]) -> int:
    """Sum of all 21 answers, range [21, 105] for a normalised map."""
    return sum(int(answers.get(key, 0)) for key in DOMAIN_KEYS)


def rank_domains(answers: Mapping[str, int]) -> list[str]:
    """Domain keys sorted by ascending score; ties keep questionnaire order."""
    present = [key for key in DOMAIN_KEYS if key in answers]
    return sorted(present, key=lambda key: answers[key])


def weakest_domains(answers: Mapping[str, int], count: int = 2) -> list[str]:
    return rank_domains(answers)[:count]
