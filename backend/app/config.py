import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "UMKM Registry API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Storage — a DATABASE_URL selects the remote backend, otherwise the
    # local JSON snapshot is used for the whole process lifetime.
    database_url: str | None = None
    local_store_path: str = "data/umkm_store.json"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_store: str = "INFO"            # UmkmStore + local snapshot

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("database_url")
    @classmethod
    def _blank_url_is_unset(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    @property
    def remote_enabled(self) -> bool:
        """True when a remote database is configured."""
        return self.database_url is not None


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    settings = Settings()
    _config_logger.debug(
        "Settings loaded (env=%s, remote=%s)", settings.app_env, settings.remote_enabled
    )
    return settings
