"""Profile session — the single owner of mutable state.

Edits arrive one field at a time, are saved immediately (best effort) and
every read recomputes from the current snapshot. The VO2 check-then-append
runs under a lock because the HTTP adapter serves sync handlers from a
thread pool.
"""

from __future__ import annotations

import threading
from datetime import date, datetime, timezone
from typing import Any, Callable
from zoneinfo import ZoneInfo

from loguru import logger

from tungsten.engine import timeseries
from tungsten.engine.assessment import normalize_score
from tungsten.engine.builders import build_content, build_guidance, compute_derived_metrics
from tungsten.engine.domains import get_domain
from tungsten.engine.models import ContentSelection, DerivedMetrics, Guidance, Profile, VO2Entry
from tungsten.engine.repository import ProfileRepository


class UnknownFieldError(KeyError):
    """Edit targeted a profile field or domain that does not exist."""


def today_in(tz_name: str) -> date:
    return datetime.now(timezone.utc).astimezone(ZoneInfo(tz_name)).date()


class ProfileSession:
    def __init__(
        self,
        repository: ProfileRepository,
        tz_name: str = "UTC",
        today: Callable[[], date] | None = None,
    ):
        self.repository = repository
        self._today = today or (lambda: today_in(tz_name))
        self._lock = threading.Lock()
        self.profile: Profile = repository.load_profile()
        self.answers: dict[str, int] = repository.load_answers()
        self._series: list[VO2Entry] = repository.load_vo2_series()
        logger.info(f"Session loaded: {len(self._series)} VO2 entries on record")

    def day(self) -> str:
        return self._today().isoformat()

    # -- writes -------------------------------------------------------------

    def update_profile_field(self, field: str, value: Any) -> DerivedMetrics:
        """Set one profile field, persist it, recompute.

        Raises UnknownFieldError for unknown fields and pydantic's
        ValidationError for rejected enum values (the old value stays).
        """
        if field not in Profile.model_fields:
            raise UnknownFieldError(field)
        setattr(self.profile, field, value)
        if not self.repository.save_profile_field(self.profile, field):
            logger.warning(f"profile.{field} kept in memory only")
        logger.debug(f"profile.{field} updated")
        return self.metrics()

    def update_answer(self, domain: str, value: Any) -> DerivedMetrics:
        if get_domain(domain) is None:
            raise UnknownFieldError(domain)
        self.answers = {**self.answers, domain: normalize_score(value)}
        if not self.repository.save_answers(self.answers):
            logger.warning(f"answer {domain} kept in memory only")
        logger.debug(f"answers.{domain} = {self.answers[domain]}")
        return self.metrics()

    # -- reads --------------------------------------------------------------

    def metrics(self) -> DerivedMetrics:
        """Full recomputation; records today's VO2 estimate if not yet logged."""
        metrics = compute_derived_metrics(self.profile, self.answers)
        self.record_vo2(metrics)
        return metrics

    def content(self, day: str | None = None) -> ContentSelection:
        return build_content(self.profile, self.answers, day or self.day())

    def guidance(self) -> Guidance:
        metrics = self.metrics()
        return build_guidance(self.profile, self.answers, metrics)

    def vo2_series(self) -> list[VO2Entry]:
        with self._lock:
            return list(self._series)

    def record_vo2(self, metrics: DerivedMetrics) -> bool:
        """Append today's preferred VO2 estimate once per calendar day."""
        value = metrics.vo2.preferred()
        if not value:
            return False
        day = self.day()
        with self._lock:
            series, appended = timeseries.append_daily(self._series, day, value)
            if not appended:
                return False
            self._series = series
            self.repository.save_vo2_series(series)
        logger.info(f"VO2 {value} recorded for {day}")
        return True
