"""Cardio engine — HRmax, VO2max estimators, Karvonen zones, tiered prescription."""

from __future__ import annotations

from dataclasses import dataclass

from tungsten.engine.models import CardioPrescription, CardioTier, HeartRateZone
from tungsten.engine.units import round_half_up, round_int

DEFAULT_RESTING_HR = 60


@dataclass(frozen=True, slots=True)
class ZoneBand:
    name: str
    low_pct: float
    high_pct: float


# Heart-rate-reserve bands, contiguous: each high_pct is the next low_pct.
ZONE_BANDS: tuple[ZoneBand, ...] = (
    ZoneBand("Z1 Recovery", 0.5, 0.6),
    ZoneBand("Z2 Aerobic", 0.6, 0.7),
    ZoneBand("Z3 Tempo", 0.7, 0.8),
    ZoneBand("Z4 Threshold", 0.8, 0.9),
    ZoneBand("Z5 VO2/Speed", 0.9, 1.0),
)

# tier → (zone 2 minutes, base interval count)
TIER_DOSES: dict[CardioTier, tuple[int, int]] = {
    CardioTier.rebuild: (30, 4),
    CardioTier.build: (40, 6),
    CardioTier.perform: (50, 8),
}

REBUILD_MAX_SCORE = 45
BUILD_MAX_SCORE = 80
MASTERS_AGE = 50
MIN_INTERVALS = 3


def hr_max_tanaka(age_years: float) -> int:
    return round_int(208 - 0.7 * age_years)


def hr_max(age_years: float, override: float = 0) -> int:
    """Override wins when positive; otherwise the Tanaka estimate."""
    if override and override > 0:
        return round_int(override)
    return hr_max_tanaka(age_years)


def vo2_from_hr_ratio(hr_max_bpm: float, hr_rest_bpm: float) -> float:
    """Uth et al.: 15.3 × HRmax / HRrest. 0 if either rate is missing."""
    if not hr_max_bpm or not hr_rest_bpm or hr_rest_bpm <= 0:
        return 0.0
    return round_half_up(15.3 * (hr_max_bpm / hr_rest_bpm), 1)


def vo2_from_cooper(meters: float) -> float:
    """Cooper 12-minute run: (meters − 504.9) / 44.73. 0 without a distance."""
    if not meters:
        return 0.0
    return round_half_up((meters - 504.9) / 44.73, 1)


def karvonen_zones(rest_bpm: float, max_bpm: float) -> list[HeartRateZone]:
    """Five reserve bands as bpm ranges: rest + pct × (max − rest), rounded per edge."""
    rest = rest_bpm or DEFAULT_RESTING_HR
    reserve = max_bpm - rest
    return [
        HeartRateZone(
            name=band.name,
            low_pct=band.low_pct,
            high_pct=band.high_pct,
            low_bpm=round_int(rest + band.low_pct * reserve),
            high_bpm=round_int(rest + band.high_pct * reserve),
        )
        for band in ZONE_BANDS
    ]


def cardio_tier(total_score: int) -> CardioTier:
    if total_score <= REBUILD_MAX_SCORE:
        return CardioTier.rebuild
    if total_score <= BUILD_MAX_SCORE:
        return CardioTier.build
    return CardioTier.perform


def cardio_prescription(age_years: float, total_score: int) -> CardioPrescription:
    """Zone 2 minutes and 1′-on/1′-off interval count for the tier.

    Masters athletes (50+) drop one interval, never below three.
    """
    tier = cardio_tier(total_score)
    zone2, intervals = TIER_DOSES[tier]
    if age_years >= MASTERS_AGE:
        intervals = max(MIN_INTERVALS, intervals - 1)
    return CardioPrescription(tier=tier, zone2_minutes=zone2, interval_count=intervals)
