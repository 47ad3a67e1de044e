"""Per-category logging levels for the portal.

Loggers are grouped by concern (SQL, HTTP, server, store) and each group
takes its level from a Settings field, so noisy libraries can be quietened
while the optimistic store stays verbose, or the other way round.

Usage:
    from campus_portal.infrastructure.logging.log_config import setup_logging
    setup_logging()   # once, from the FastAPI lifespan
"""

import logging
import sys
from dataclasses import dataclass

from campus_portal.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"


@dataclass(frozen=True)
class LoggerGroup:
    label: str
    settings_field: str
    logger_names: tuple[str, ...]


LOGGER_GROUPS: tuple[LoggerGroup, ...] = (
    LoggerGroup("sql", "log_level_sql", ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg")),
    LoggerGroup("http", "log_level_http", ("httpx", "httpcore")),
    LoggerGroup("uvicorn", "log_level_uvicorn", ("uvicorn", "uvicorn.access", "uvicorn.error")),
    LoggerGroup(
        "store",
        "log_level_store",
        (
            "OptimisticListStore",
            "campus_portal.application.services.optimistic_list_store",
            "campus_portal.infrastructure.remote",
            "campus_portal.infrastructure.notifications",
        ),
    ),
)


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply root and per-group levels; returns the level chosen per group."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    # uvicorn installs its own handlers; scripts and tests may have none
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {"root": root.level}
    for group in LOGGER_GROUPS:
        level = _parse_level(getattr(settings, group.settings_field, "INFO"))
        for name in group.logger_names:
            logging.getLogger(name).setLevel(level)
        applied[group.label] = level

    logging.getLogger(__name__).debug(
        "Logging configured — %s",
        ", ".join(f"{label}={logging.getLevelName(level)}" for label, level in applied.items()),
    )
    return applied


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    numeric = logging.getLevelName(str(raw).upper())
    return numeric if isinstance(numeric, int) else logging.INFO
