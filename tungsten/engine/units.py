"""Pure stateless unit and rounding helpers — math only, never raises."""

from __future__ import annotations

import math
from typing import Any

CM_PER_INCH = 2.54
KG_PER_LB = 0.45359237


def coerce_number(value: Any) -> float:
    """Best-effort float conversion. None, bools, blanks and junk become 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def cm_from_feet_inches(feet: Any, inches: Any) -> float:
    return coerce_number((coerce_number(feet) * 12 + coerce_number(inches)) * CM_PER_INCH)


def kg_from_lbs(lbs: Any) -> float:
    return coerce_number(coerce_number(lbs) * KG_PER_LB)


def round_half_up(value: float, places: int = 0) -> float:
    """Round half away from -inf, i.e. floor(x + 0.5) at the given precision.

    Python's round() is banker's rounding; 1829.5 must become 1830 and
    264.5 must become 265. Overflowed (non-finite) intermediates round to 0.
    """
    scale = 10**places
    shifted = value * scale + 0.5
    if not math.isfinite(shifted):
        return 0.0
    return math.floor(shifted) / scale


def round_int(value: float) -> int:
    shifted = value + 0.5
    if not math.isfinite(shifted):
        return 0
    return int(math.floor(shifted))


def clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))
