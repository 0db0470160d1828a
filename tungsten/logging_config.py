"""loguru sinks for the engine; modules just ``from loguru import logger``."""

import sys

from loguru import logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> {name}: {message}")
    if log_file:
        logger.add(log_file, level=level, rotation="10 MB", retention="7 days")
