"""Campus portal API — FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campus_portal.config import get_settings
from campus_portal.infrastructure.database import Base, engine
from campus_portal.infrastructure.dependencies import get_sse_manager
from campus_portal.infrastructure.logging.log_config import setup_logging
from campus_portal.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _create_tables() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup: logging and tables. Shutdown: end SSE streams, release the pool."""
    setup_logging()
    await _create_tables()

    yield

    sse = get_sse_manager()
    logger.info("Closing %d notification stream(s)", sse.client_count)
    await sse.shutdown()
    await engine.dispose()


def create_app() -> FastAPI:
    """Build the FastAPI application with CORS and the versioned API."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("campus_portal.main:app", host="0.0.0.0", port=8030, reload=True)
