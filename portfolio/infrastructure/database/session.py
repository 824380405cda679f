"""SQLAlchemy database session and engine configuration."""

from collections.abc import AsyncGenerator
from pathlib import Path

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from portfolio.config import get_settings


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    return url


def _ensure_sqlite_directory(url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite" or not parsed.database or parsed.database == ":memory:":
        return
    Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)


def _enable_sqlite_wal(dbapi_connection, connection_record) -> None:
    """Write-ahead journaling: readers never block the single writer."""
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA journal_mode=WAL")
    finally:
        cursor.close()


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine; SQLite files get their directory and WAL mode."""
    async_url = _get_async_url(database_url)
    _ensure_sqlite_directory(async_url)
    new_engine = create_async_engine(async_url, echo=echo, future=True)
    if new_engine.dialect.name == "sqlite":
        event.listen(new_engine.sync_engine, "connect", _enable_sqlite_wal)
    return new_engine


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
    )


settings = get_settings()

engine = build_engine(settings.database_url, echo=False)

async_session_factory = build_session_factory(engine)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — yields an async DB session per request."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
