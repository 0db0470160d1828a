"""Tests for HRmax, VO2 estimators, Karvonen zones and cardio prescription."""

import pytest

from tungsten.engine.cardio import (
    cardio_prescription,
    cardio_tier,
    hr_max,
    hr_max_tanaka,
    karvonen_zones,
    vo2_from_cooper,
    vo2_from_hr_ratio,
)
from tungsten.engine.models import CardioTier


class TestHrMax:
    def test_tanaka(self):
        assert hr_max_tanaka(40) == 180

    def test_auto_when_override_zero(self):
        assert hr_max(40, 0) == 180

    def test_override_wins(self):
        assert hr_max(40, 192) == 192

    def test_negative_override_ignored(self):
        assert hr_max(40, -5) == 180

    def test_age_zero(self):
        assert hr_max(0) == 208


class TestVo2:
    def test_hr_ratio(self):
        assert vo2_from_hr_ratio(180, 60) == 45.9

    def test_hr_ratio_missing_rest(self):
        assert vo2_from_hr_ratio(180, 0) == 0.0

    def test_hr_ratio_missing_max(self):
        assert vo2_from_hr_ratio(0, 60) == 0.0

    def test_cooper(self):
        assert vo2_from_cooper(2400) == 42.4

    def test_cooper_absent(self):
        assert vo2_from_cooper(0) == 0.0


class TestZones:
    def test_reference_bands(self):
        zones = karvonen_zones(60, 180)
        assert [(z.low_bpm, z.high_bpm) for z in zones] == [
            (120, 132),
            (132, 144),
            (144, 156),
            (156, 168),
            (168, 180),
        ]

    def test_five_named_zones(self):
        zones = karvonen_zones(55, 190)
        assert len(zones) == 5
        assert zones[0].name.startswith("Z1")
        assert zones[-1].name.startswith("Z5")

    @pytest.mark.parametrize("rest", [40, 52, 60, 71, 85])
    @pytest.mark.parametrize("max_hr", [150, 163, 180, 201])
    def test_contiguous_and_increasing(self, rest, max_hr):
        zones = karvonen_zones(rest, max_hr)
        for lower, upper in zip(zones, zones[1:]):
            assert lower.high_bpm == upper.low_bpm
            assert upper.low_bpm > lower.low_bpm
        for z in zones:
            assert z.high_bpm > z.low_bpm
        assert zones[-1].high_bpm == max_hr

    def test_missing_rest_uses_sixty(self):
        assert karvonen_zones(0, 180)[0].low_bpm == 120


class TestTier:
    @pytest.mark.parametrize(
        "score,tier",
        [
            (21, CardioTier.rebuild),
            (45, CardioTier.rebuild),
            (46, CardioTier.build),
            (80, CardioTier.build),
            (81, CardioTier.perform),
            (105, CardioTier.perform),
        ],
    )
    def test_boundaries(self, score, tier):
        assert cardio_tier(score) == tier


class TestPrescription:
    def test_rebuild(self):
        plan = cardio_prescription(30, 40)
        assert (plan.tier, plan.zone2_minutes, plan.interval_count) == (CardioTier.rebuild, 30, 4)

    def test_perform(self):
        plan = cardio_prescription(30, 95)
        assert (plan.zone2_minutes, plan.interval_count) == (50, 8)

    def test_masters_build(self):
        plan = cardio_prescription(55, 50)
        assert plan.tier == CardioTier.build
        assert plan.interval_count == 5

    def test_masters_floor(self):
        plan = cardio_prescription(70, 30)
        assert plan.interval_count == 3

    def test_age_49_unchanged(self):
        assert cardio_prescription(49, 50).interval_count == 6
