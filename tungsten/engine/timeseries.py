"""VO2 time series — append-only, at most one entry per calendar day."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from loguru import logger

from tungsten.engine.models import VO2Entry


def has_entry(series: Sequence[VO2Entry], day: str) -> bool:
    return any(entry.date == day for entry in series)


def append_daily(series: Sequence[VO2Entry], day: str, value: float) -> tuple[list[VO2Entry], bool]:
    """Return (series, appended). Appends only when value > 0 and day is new.

    Existing entries are never touched; callers persist the returned list
    only when ``appended`` is True.
    """
    if not value or value <= 0 or has_entry(series, day):
        return list(series), False
    return [*series, VO2Entry(date=day, value=value)], True


def parse_series(raw: Iterable[Any] | None) -> list[VO2Entry]:
    """Decode a persisted list, skipping malformed rows and duplicate dates.

    Accepts both ``{"date", "value"}`` and the short ``{"d", "v"}`` form.
    """
    entries: list[VO2Entry] = []
    seen: set[str] = set()
    for row in raw or []:
        if not isinstance(row, dict):
            continue
        day = row.get("date", row.get("d"))
        value = row.get("value", row.get("v"))
        if not isinstance(day, str) or day in seen:
            continue
        try:
            entries.append(VO2Entry(date=day, value=float(value)))
        except (TypeError, ValueError):
            logger.debug(f"Skipping malformed VO2 row for {day}")
            continue
        seen.add(day)
    return entries


def dump_series(series: Sequence[VO2Entry]) -> list[dict[str, Any]]:
    return [entry.model_dump() for entry in series]
