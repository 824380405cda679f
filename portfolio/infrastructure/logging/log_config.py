"""Logging setup for the content API and the site client.

Each ``log_level_*`` setting drives a group of logger names, so SQL echo
or outbound HTTP chatter can be turned down without muting the services.
"""

import logging
import sys

from portfolio.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

# Settings field → loggers it governs.
LOGGER_GROUPS: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_site": (
        "portfolio.infrastructure.content_api",
        "portfolio.application.services.section_loader",
        "portfolio.presentation.site",
    ),
}


def level_from_name(name: str, fallback: int = logging.INFO) -> int:
    """``"debug"`` → ``logging.DEBUG``; unknown names give ``fallback``."""
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    return fallback if level is None else level


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply the configured levels and return the level set per logger name.

    A stderr handler is attached only when the root logger has none,
    which is the case outside uvicorn.
    """
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(level_from_name(settings.log_level))
    if not root.handlers:
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(stream)

    applied: dict[str, int] = {}
    for field, names in LOGGER_GROUPS.items():
        level = level_from_name(getattr(settings, field))
        for name in names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    logging.getLogger(__name__).debug(
        "Log levels: root=%s %s",
        settings.log_level,
        " ".join(f"{field.removeprefix('log_level_')}={getattr(settings, field)}" for field in LOGGER_GROUPS),
    )
    return applied
