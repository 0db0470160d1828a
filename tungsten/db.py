from functools import lru_cache

from sqlalchemy import create_engine

from tungsten.config import settings
from tungsten.engine.repository import JsonFileStore, MemoryStore, ProfileRepository, RecordStore, SqlStore
from tungsten.engine.session import ProfileSession

_raw_url = settings.database_url

if _raw_url.startswith("postgres://"):
    _raw_url = _raw_url.replace("postgres://", "postgresql://", 1)


def build_store(backend: str | None = None) -> RecordStore:
    backend = (backend or settings.store_backend).lower()
    if backend == "memory":
        return MemoryStore()
    if backend == "file":
        return JsonFileStore(settings.store_path)
    return SqlStore(create_engine(_raw_url, pool_pre_ping=True))


@lru_cache(maxsize=1)
def get_session() -> ProfileSession:
    """Process-wide session, loaded once at startup."""
    return ProfileSession(ProfileRepository(build_store()), tz_name=settings.default_tz)
