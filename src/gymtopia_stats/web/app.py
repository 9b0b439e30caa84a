"""FastAPI application for the gymtopia-stats JSON API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from .routers import statistics, validation

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    logger.info("gymtopia-stats API %s starting", __version__)
    yield
    logger.info("gymtopia-stats API shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="gymtopia-stats",
        description="Workout statistics and exercise validation",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(statistics.router)
    app.include_router(validation.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
