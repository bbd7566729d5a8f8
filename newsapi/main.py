"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from newsapi.config import get_settings
from newsapi.infrastructure.logging.log_config import setup_logging
from newsapi.presentation.api.router import router as api_router
from newsapi.presentation.middleware import request_logging_middleware

logger = logging.getLogger(__name__)


async def _create_tables() -> None:
    """Create the news table when the database backend is selected."""
    from newsapi.infrastructure.database import Base, engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, prepare storage."""
    settings = get_settings()
    setup_logging()

    if settings.storage_backend == "database":
        await _create_tables()

    logger.info(
        "Server starting on port %d (storage=%s)",
        settings.port,
        settings.storage_backend,
    )

    yield

    if settings.storage_backend == "database":
        from newsapi.infrastructure.database import engine

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
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_logging_middleware)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "newsapi.main:app",
        host=settings.host,
        port=settings.port,
    )
