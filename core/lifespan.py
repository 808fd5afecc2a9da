import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from services.keepalive_service import KeepAliveService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages the application's lifespan events (startup and shutdown).
    The keep-alive ping runs as a background task for the life of the app.
    """
    # --- Startup Logic ---
    logger.info("--- Running startup events via lifespan manager ---")
    settings = app.state.settings

    keepalive_service = KeepAliveService(
        base_url=settings.base_url,
        interval_seconds=settings.keep_alive_interval_seconds,
    )
    app.state.keepalive_service = keepalive_service

    if settings.keep_alive_enabled:
        keepalive_service.start()
    else:
        logger.info("Keep-alive ping disabled.")

    logger.info("--- Startup complete ---")

    yield # The application runs here

    # --- Shutdown Logic ---
    logger.info("--- Running shutdown events via lifespan manager ---")
    await keepalive_service.stop()
    logger.info("--- Shutdown complete ---")
