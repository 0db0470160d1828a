"""Daily reflective content — verse and prayer chosen by weakest domains + day.

Selection is a pure function of (answers, day string, name). The rotation
uses a fixed 32-bit rolling hash, never the built-in ``hash()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from tungsten.engine.assessment import rank_domains, weakest_domains
from tungsten.engine.models import ContentSelection, Verse


@dataclass(frozen=True, slots=True)
class VerseEntry:
    reference: str
    text: str


VERSE_BANK: dict[str, tuple[VerseEntry, ...]] = {
    "strength": (
        VerseEntry("Isaiah 40:31", "Those who wait on the Lord shall renew their strength..."),
        VerseEntry("Philippians 4:13", "I can do all things through Christ who strengthens me."),
        VerseEntry("Joshua 1:9", "Be strong and of good courage..."),
    ),
    "peace": (
        VerseEntry("John 14:27", "Peace I leave with you..."),
        VerseEntry("Psalm 46:10", "Be still, and know that I am God."),
        VerseEntry("1 Peter 5:7", "Casting all your care upon Him..."),
    ),
    "wisdom": (
        VerseEntry("James 1:5", "If any of you lacks wisdom, let him ask of God..."),
        VerseEntry("Proverbs 3:5-6", "Trust in the Lord with all your heart..."),
        VerseEntry("Proverbs 4:7", "Wisdom is the principal thing; therefore get wisdom."),
    ),
    "grace": (
        VerseEntry("Ephesians 2:8-9", "By grace you have been saved through faith..."),
        VerseEntry("Romans 5:8", "God demonstrates His own love..."),
        VerseEntry("1 John 4:19", "We love Him because He first loved us."),
    ),
}

# Templates take the subject phrase: the user's name, or the fallback shown.
PRAYER_BANK: dict[str, tuple[tuple[str, str], ...]] = {
    "restore": (
        ("Lord, restore {who} today—calm my mind, steady my steps, and teach me to breathe in Your peace. Amen.", "me"),
        ("Father, in fatigue meet {who} with new mercy. Guide one faithful habit at a time. Amen.", "me"),
    ),
    "focus": (
        ("Lord, order {who} day. Give clarity for hard work and gentleness for people. Amen.", "my"),
        ("God, help {who} focus on what matters, and let discipline be an act of worship. Amen.", "me"),
    ),
    "gratitude": (
        ("Thank You for breath, body, and purpose. Use {who} to serve someone well today. Amen.", "me"),
        ("Father, thank You for progress. Keep {who} humble and hopeful. Amen.", "me"),
    ),
}

# Checked in order; first theme whose keyword set meets the weakest two wins.
THEME_RULES: tuple[tuple[str, frozenset[str]], ...] = (
    ("peace", frozenset({"sleep", "breath", "resilience", "chatter"})),
    ("wisdom", frozenset({"focus", "overthink"})),
    ("grace", frozenset({"connection", "turnToward", "intimacy"})),
)
DEFAULT_THEME = "strength"

BUCKET_RULES: tuple[tuple[str, frozenset[str]], ...] = (
    ("restore", frozenset({"sleep", "breath", "resilience", "internalHealth"})),
    ("focus", frozenset({"focus", "allIn", "grit"})),
)
DEFAULT_BUCKET = "gratitude"


def rolling_hash(text: str) -> int:
    """|h| of the 32-bit signed rolling hash h = h × 31 + codepoint."""
    h = 0
    for ch in text:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
        if h >= 0x80000000:
            h -= 0x100000000
    return abs(h)


def rotation_index(day: str, bucket: str, bank_length: int) -> int:
    if bank_length <= 0:
        return 0
    return rolling_hash(day + bucket) % bank_length


def verse_theme(weakest: list[str]) -> str:
    for theme, keys in THEME_RULES:
        if any(key in keys for key in weakest):
            return theme
    return DEFAULT_THEME


def prayer_bucket(lowest: str | None) -> str:
    if lowest is None:
        return "restore"
    for bucket, keys in BUCKET_RULES:
        if lowest in keys:
            return bucket
    return DEFAULT_BUCKET


def pick_verse(answers: Mapping[str, int], day: str) -> Verse:
    theme = verse_theme(weakest_domains(answers, 2))
    bank = VERSE_BANK[theme]
    entry = bank[rotation_index(day, theme, len(bank))]
    return Verse(reference=entry.reference, text=entry.text, theme=theme)


def pick_prayer(answers: Mapping[str, int], day: str, name: str | None = None) -> tuple[str, str]:
    """Return (bucket, interpolated prayer text)."""
    ranked = rank_domains(answers)
    bucket = prayer_bucket(ranked[0] if ranked else None)
    bank = PRAYER_BANK[bucket]
    template, fallback = bank[rotation_index(day, bucket, len(bank))]
    who = (name or "").strip() or fallback
    return bucket, template.format(who=who)


def select_content(answers: Mapping[str, int], day: str, name: str | None = None) -> ContentSelection:
    bucket, prayer = pick_prayer(answers, day, name)
    return ContentSelection(
        day=day,
        verse=pick_verse(answers, day),
        prayer=prayer,
        prayer_bucket=bucket,
    )
