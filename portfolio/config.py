from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Portfolio Content API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///data/content.db"
    cors_origins: list[str] = ["*"]

    # Uploaded images
    upload_dir: str = "uploads"
    uploads_url_path: str = "/uploads"
    max_upload_size_mb: int = 5
    max_upload_files: int = 10
    max_section_images: int = 5

    # Optional write guard; empty disables it
    admin_token: str = ""

    # Site client (content API gateway + editor)
    api_base_url: str = "http://localhost:3001/api"
    request_timeout_seconds: float = 10.0
    purge_reload_delay_seconds: float = 1.2

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_site: str = "INFO"             # content gateway, loader, editor

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
