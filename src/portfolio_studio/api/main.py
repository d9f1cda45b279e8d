"""FastAPI application entry point for the Portfolio Studio API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio_studio.api.errors import register_exception_handlers
from portfolio_studio.api.routes import (
    ai,
    analysis,
    auth,
    health,
    portfolios,
    projects,
    templates,
    uploads,
    versions,
)
from portfolio_studio.config import configure_logging, get_settings

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Validate configuration and initialize the database on startup."""
    from portfolio_studio.data.db import dispose_engine, init_db

    settings = get_settings()
    configure_logging(settings.log_level)
    init_db()
    logger.info("Portfolio Studio API started")
    yield
    dispose_engine()


app = FastAPI(
    title="Portfolio Studio API",
    description="API for building, versioning and publishing personal portfolios",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(health.router)
app.include_router(uploads.files_router)
app.include_router(auth.router, prefix="/api")
app.include_router(portfolios.router, prefix="/api")
app.include_router(projects.router, prefix="/api")
app.include_router(versions.router, prefix="/api")
app.include_router(templates.router, prefix="/api")
app.include_router(ai.router, prefix="/api")
app.include_router(analysis.router, prefix="/api")
app.include_router(uploads.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    # Fail before binding the port when required settings are missing.
    get_settings()
    uvicorn.run(
        "portfolio_studio.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
