"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from portfolio.config import get_settings
from portfolio.infrastructure.database import engine
from portfolio.infrastructure.database.bootstrap import init_database
from portfolio.infrastructure.logging.log_config import setup_logging
from portfolio.presentation.api.error_handlers import register_exception_handlers
from portfolio.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create/evolve tables, seed singletons, prepare uploads."""
    settings = get_settings()
    setup_logging()

    # 1. Tables, additive columns, default hero/about rows
    await init_database(engine)
    logger.info("Content store ready at %s", settings.database_url)

    # 2. Ensure upload directory exists
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    # Uploaded images, served read-only
    app.mount(
        settings.uploads_url_path,
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "portfolio.main:app",
        host="0.0.0.0",
        port=3001,
        reload=True,
    )
