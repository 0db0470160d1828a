from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Persistence backend: "sql" | "file" | "memory"
    store_backend: str = "sql"
    database_url: str = "sqlite:///tungsten.db"
    store_path: str = "tungsten.json"  # Used when store_backend = "file"

    # Calendar day for content rotation and VO2 log entries
    default_tz: str = "UTC"

    host: str = "127.0.0.1"
    port: int = 8000

    log_level: str = "INFO"
    log_file: str | None = None

    model_config = {"env_file": ".env", "extra": "ignore"}

    @field_validator("default_tz")
    @classmethod
    def _known_zone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown time zone {v!r}, using UTC")
            return "UTC"
        return v


settings = Settings()
