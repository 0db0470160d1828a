"""Profile repository — flat key/value records against a pluggable backend.

Layout:
  profile.<field>   one record per Profile field (scalar)
  answers           the full 21-domain answers map
  vo2_series        ordered list of {"date", "value"} entries

Values are JSON-encoded. Backend failures never escape the repository:
reads fall back to the documented default, writes are logged and dropped.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from loguru import logger
from pydantic import ValidationError
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from tungsten.engine.assessment import default_answers, normalize_answers
from tungsten.engine.models import Profile, VO2Entry
from tungsten.engine.timeseries import dump_series, parse_series

PROFILE_PREFIX = "profile."
ANSWERS_KEY = "answers"
VO2_SERIES_KEY = "vo2_series"

_MISSING = object()


class StoreError(Exception):
    """A backend could not read or write a record."""


@runtime_checkable
class RecordStore(Protocol):
    """Contract for persistence backends: JSON text in, JSON text out."""

    def read(self, key: str) -> str | None:
        """Return the encoded value for ``key`` or None when absent."""
        ...

    def write(self, key: str, value: str) -> None:
        """Insert or replace the encoded value for ``key``."""
        ...


# ---------------------------------------------------------------------------
# Backends
# ---------------------------------------------------------------------------

class MemoryStore:
    """In-process dict. Used by tests and ``store_backend=memory``."""

    def __init__(self, records: dict[str, str] | None = None):
        self.records: dict[str, str] = dict(records or {})

    def read(self, key: str) -> str | None:
        return self.records.get(key)

    def write(self, key: str, value: str) -> None:
        self.records[key] = value


class JsonFileStore:
    """All records in one JSON document, replaced atomically on each write."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StoreError(f"Cannot read {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StoreError(f"{self.path} does not hold a JSON object")
        return data

    def read(self, key: str) -> str | None:
        return self._load().get(key)

    def write(self, key: str, value: str) -> None:
        try:
            records = self._load()
        except StoreError:
            logger.warning(f"Overwriting unreadable store file {self.path}")
            records = {}
        records[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        except OSError as exc:
            raise StoreError(f"Cannot write {self.path}: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(records, fh, indent=2, sort_keys=True)
            os.replace(tmp, self.path)
        except OSError as exc:
            Path(tmp).unlink(missing_ok=True)
            raise StoreError(f"Cannot write {self.path}: {exc}") from exc


class SqlStore:
    """One ``tungsten_records(key, value)`` table via SQLAlchemy (SQLite by default)."""

    TABLE = "tungsten_records"

    def __init__(self, engine: Engine):
        self.engine = engine
        try:
            with self.engine.begin() as conn:
                conn.execute(
                    text(f"CREATE TABLE IF NOT EXISTS {self.TABLE} (key VARCHAR(128) PRIMARY KEY, value TEXT NOT NULL)")
                )
        except SQLAlchemyError as exc:
            logger.warning(f"Could not initialise {self.TABLE}: {exc}")

    def read(self, key: str) -> str | None:
        try:
            with self.engine.connect() as conn:
                row = conn.execute(
                    text(f"SELECT value FROM {self.TABLE} WHERE key = :key"), {"key": key}
                ).fetchone()
        except SQLAlchemyError as exc:
            raise StoreError(f"Cannot read {key!r}: {exc}") from exc
        return None if row is None else row[0]

    def write(self, key: str, value: str) -> None:
        query = (
            f"INSERT INTO {self.TABLE} (key, value) VALUES (:key, :value) "
            "ON CONFLICT (key) DO UPDATE SET value = excluded.value"
        )
        try:
            with self.engine.begin() as conn:
                conn.execute(text(query), {"key": key, "value": value})
        except SQLAlchemyError as exc:
            raise StoreError(f"Cannot write {key!r}: {exc}") from exc


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------

class ProfileRepository:
    """Load/save Profile, answers and the VO2 log. Never raises on I/O."""

    def __init__(self, store: RecordStore):
        self.store = store

    def _get(self, key: str) -> Any:
        try:
            raw = self.store.read(key)
        except StoreError as exc:
            logger.warning(f"Read failed for {key}: {exc}")
            return _MISSING
        if raw is None:
            return _MISSING
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning(f"Discarding undecodable record {key}")
            return _MISSING

    def _put(self, key: str, value: Any) -> bool:
        try:
            self.store.write(key, json.dumps(value))
        except (StoreError, TypeError, ValueError) as exc:
            logger.warning(f"Write failed for {key}: {exc}")
            return False
        return True

    # -- profile ------------------------------------------------------------

    def load_profile(self) -> Profile:
        """Assemble the profile field by field; bad or missing fields keep defaults."""
        profile = Profile()
        for name in Profile.model_fields:
            value = self._get(PROFILE_PREFIX + name)
            if value is _MISSING:
                continue
            try:
                setattr(profile, name, value)
            except ValidationError:
                logger.warning(f"Ignoring invalid stored value for profile.{name}: {value!r}")
        return profile

    def save_profile_field(self, profile: Profile, name: str) -> bool:
        value = profile.model_dump(mode="json")[name]
        return self._put(PROFILE_PREFIX + name, value)

    def save_profile(self, profile: Profile) -> bool:
        ok = True
        for name, value in profile.model_dump(mode="json").items():
            ok = self._put(PROFILE_PREFIX + name, value) and ok
        return ok

    # -- answers ------------------------------------------------------------

    def load_answers(self) -> dict[str, int]:
        value = self._get(ANSWERS_KEY)
        if not isinstance(value, dict):
            return default_answers()
        return normalize_answers(value)

    def save_answers(self, answers: dict[str, int]) -> bool:
        return self._put(ANSWERS_KEY, answers)

    # -- VO2 log ------------------------------------------------------------

    def load_vo2_series(self) -> list[VO2Entry]:
        value = self._get(VO2_SERIES_KEY)
        if not isinstance(value, list):
            return []
        return parse_series(value)

    def save_vo2_series(self, series: list[VO2Entry]) -> bool:
        return self._put(VO2_SERIES_KEY, dump_series(series))
