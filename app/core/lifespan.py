"""Application lifespan: startup and shutdown.

Only wiring of infrastructure here (logging, DB engine dispose); no
business logic.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.persistence.database import dispose_engine
from app.shared.telemetry.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup; dispose the SQL engine on shutdown.

    The engine itself is created lazily on first use, so a service without
    DATABASE_URL still starts (health stays up, compliance routes return 503).
    """
    settings = get_settings()
    setup_logging()
    if not settings.database_url:
        logger.warning("DATABASE_URL is not set; compliance data is unavailable")
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    await dispose_engine()
