"""Store initialization — tables, additive column evolution, default seed.

Safe to run on every startup: ``create_all`` skips existing tables, missing
optional columns are added with their default, and the singleton seed only
inserts when no row exists.
"""

import logging

from sqlalchemy import inspect, text
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from portfolio.domain.defaults import default_about, default_hero
from portfolio.domain.delimited_text import format_metrics, join_lines
from portfolio.infrastructure.database.base import Base
from portfolio.infrastructure.database.models import SINGLETON_ID, AboutModel, HeroContentModel

logger = logging.getLogger(__name__)

# Columns added after the first release. Each must be optional with a default.
ADDITIVE_COLUMNS: dict[str, list[tuple[str, str]]] = {
    "projects": [("images", "TEXT DEFAULT '[]'")],
    "blogs": [("images", "TEXT DEFAULT '[]'")],
}


def _table_columns(connection: Connection, table_name: str) -> set[str]:
    inspector = inspect(connection)
    if not inspector.has_table(table_name):
        return set()
    return {column["name"] for column in inspector.get_columns(table_name)}


def ensure_columns(connection: Connection) -> list[str]:
    """Add any missing additive columns; existing rows keep their data.

    Returns ``table.column`` names that were added.
    """
    added: list[str] = []
    for table_name, columns in ADDITIVE_COLUMNS.items():
        existing = _table_columns(connection, table_name)
        if not existing:
            continue
        for column_name, definition in columns:
            if column_name in existing:
                continue
            connection.execute(text(f"ALTER TABLE {table_name} ADD COLUMN {column_name} {definition}"))
            added.append(f"{table_name}.{column_name}")
            logger.info("Added column %s.%s", table_name, column_name)
    return added


async def seed_defaults(session: AsyncSession) -> list[str]:
    """Insert the hero/about singleton rows if they are missing.

    An existing row is never touched, even when its fields were cleared.
    Returns the names of the tables that were seeded.
    """
    seeded: list[str] = []

    if await session.get(AboutModel, SINGLETON_ID) is None:
        about = default_about()
        session.add(
            AboutModel(
                id=SINGLETON_ID,
                heading=about.heading,
                summary=about.summary,
                bullets=join_lines(about.bullets),
                photo=about.photo,
            )
        )
        seeded.append(AboutModel.__tablename__)

    if await session.get(HeroContentModel, SINGLETON_ID) is None:
        hero = default_hero()
        session.add(
            HeroContentModel(
                id=SINGLETON_ID,
                tagline=hero.tagline,
                headline=hero.headline,
                subheading=hero.subheading,
                badges=join_lines(hero.badges),
                metrics=format_metrics(hero.metrics),
                primary_label=hero.primary_label,
                primary_url=hero.primary_url,
                secondary_label=hero.secondary_label,
                secondary_url=hero.secondary_url,
            )
        )
        seeded.append(HeroContentModel.__tablename__)

    await session.flush()
    for table_name in seeded:
        logger.info("Seeded default '%s' row", table_name)
    return seeded


async def init_database(engine: AsyncEngine) -> None:
    """Create tables, evolve columns and seed singletons."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.run_sync(ensure_columns)

    async with AsyncSession(engine, expire_on_commit=False) as session:
        await seed_defaults(session)
        await session.commit()
