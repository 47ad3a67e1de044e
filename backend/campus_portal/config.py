import json
import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_SETTINGS_FILE = Path("data/settings.json")
_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)
_RUNTIME_KEYS = frozenset({
    "store_single_flight",
    "chatbot_default_language",
})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Campus Portal API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./campus_portal.db"
    cors_origins: list[str] = ["http://localhost:8080"]

    # Remote collection API consumed by HttpRemoteDataService
    api_base_url: str = "http://localhost:8030/api/v1"
    remote_timeout_seconds: float = 30.0

    # Optimistic list store
    store_temp_id_prefix: str = "temp-"
    store_single_flight: bool = True

    # Chat widget
    chatbot_default_language: str = "english"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_store: str = "INFO"            # OptimisticListStore operations

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Merge runtime overrides from data/settings.json into settings."""
        if _SETTINGS_FILE.exists():
            try:
                overrides = json.loads(_SETTINGS_FILE.read_text("utf-8"))
                for key in _RUNTIME_KEYS:
                    if key in overrides and isinstance(
                        overrides[key], type(getattr(self, key))
                    ):
                        object.__setattr__(self, key, overrides[key])
            except Exception as exc:
                _config_logger.warning("Could not load settings overrides: %s", exc)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
