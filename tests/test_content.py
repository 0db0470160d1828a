"""Tests for the deterministic daily verse/prayer selection."""

import pytest

from tungsten.engine.content import (
    PRAYER_BANK,
    VERSE_BANK,
    pick_prayer,
    pick_verse,
    prayer_bucket,
    rolling_hash,
    rotation_index,
    select_content,
    verse_theme,
)

from tests.conftest import make_answers


class TestRollingHash:
    def test_empty(self):
        assert rolling_hash("") == 0

    def test_short(self):
        assert rolling_hash("a") == 97
        assert rolling_hash("ab") == 97 * 31 + 98

    def test_matches_known_32bit_value(self):
        assert rolling_hash("hello") == 99162322

    def test_overflow_to_min_int_is_absolute(self):
        assert rolling_hash("polygenelubricants") == 2147483648

    def test_day_bucket_seeds(self):
        assert rolling_hash("2026-10-17peace") == 1653471227
        assert rolling_hash("2026-10-17restore") == 1944200805

    def test_rotation_index(self):
        assert rotation_index("2026-10-17", "peace", 3) == 2
        assert rotation_index("2026-10-18", "peace", 3) == 1

    def test_empty_bank(self):
        assert rotation_index("2026-10-17", "peace", 0) == 0


class TestThemes:
    @pytest.mark.parametrize(
        "weakest,theme",
        [
            (["sleep", "trust"], "peace"),
            (["trust", "chatter"], "peace"),
            (["overthink", "trust"], "wisdom"),
            (["focus", "breath"], "peace"),
            (["intimacy", "conflict"], "grace"),
            (["conflict", "trust"], "strength"),
        ],
    )
    def test_first_match_wins(self, weakest, theme):
        assert verse_theme(weakest) == theme

    @pytest.mark.parametrize(
        "lowest,bucket",
        [
            ("internalHealth", "restore"),
            ("grit", "focus"),
            ("allIn", "focus"),
            ("trust", "gratitude"),
            (None, "restore"),
        ],
    )
    def test_prayer_bucket(self, lowest, bucket):
        assert prayer_bucket(lowest) == bucket

    def test_bank_shapes(self):
        assert set(VERSE_BANK) == {"strength", "peace", "wisdom", "grace"}
        assert set(PRAYER_BANK) == {"restore", "focus", "gratitude"}


class TestSelection:
    def test_default_answers_reference_day(self):
        sel = select_content(make_answers(), "2026-10-17")
        assert sel.verse.theme == "peace"
        assert sel.verse.reference == "1 Peter 5:7"
        assert sel.prayer_bucket == "restore"
        assert sel.prayer.startswith("Father, in fatigue meet me")

    def test_next_day_rotates(self):
        sel = select_content(make_answers(), "2026-10-18")
        assert sel.verse.reference == "Psalm 46:10"
        assert sel.prayer.startswith("Lord, restore me today")

    def test_deterministic(self):
        answers = make_answers(grit=1, trust=2)
        assert select_content(answers, "2026-10-17") == select_content(answers, "2026-10-17")

    def test_unrelated_domain_change_is_ignored(self):
        base = make_answers(conflict=1, trust=1)
        changed = make_answers(conflict=1, trust=1, allIn=5, sleep=4, focus=2)
        assert select_content(base, "2026-10-19") == select_content(changed, "2026-10-19")

    def test_name_interpolated(self):
        _, text = pick_prayer(make_answers(), "2026-10-18", "Dana")
        assert "restore Dana today" in text

    def test_blank_name_uses_fallback(self):
        _, text = pick_prayer(make_answers(), "2026-10-18", "  ")
        assert "restore me today" in text

    def test_focus_bucket_possessive_fallback(self):
        answers = make_answers(grit=1)
        bucket, text = pick_prayer(answers, "2026-10-18")
        assert bucket == "focus"
        assert text.startswith("Lord, order my day")

    def test_verse_follows_weakest_two(self):
        verse = pick_verse(make_answers(connection=1, trust=1), "2026-10-20")
        assert verse.theme == "grace"
        assert verse.reference == "Romans 5:8"
