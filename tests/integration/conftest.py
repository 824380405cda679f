"""Integration fixtures — the real app on a throwaway SQLite file."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from portfolio.application.services import UploadService
from portfolio.infrastructure.database import build_engine, build_session_factory, get_db_session
from portfolio.infrastructure.database.bootstrap import init_database
from portfolio.infrastructure.dependencies import get_upload_service
from portfolio.infrastructure.storage.local_file_storage import LocalFileStorage
from portfolio.main import app

TEST_MAX_FILE_SIZE = 1024


@pytest_asyncio.fixture
async def db_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    engine = build_engine(f"sqlite:///{tmp_path / 'content.db'}")
    yield engine
    await engine.dispose()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest_asyncio.fixture
async def client(db_engine, upload_dir) -> AsyncGenerator[AsyncClient, None]:
    await init_database(db_engine)
    session_factory = build_session_factory(db_engine)

    async def override_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    def override_upload_service() -> UploadService:
        return UploadService(
            LocalFileStorage(upload_dir=str(upload_dir)),
            max_files=10,
            max_file_size=TEST_MAX_FILE_SIZE,
            public_path="/uploads",
        )

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_upload_service] = override_upload_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client

    app.dependency_overrides.clear()
