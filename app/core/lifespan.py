import logging
from contextlib import asynccontextmanager
from app.db.session import async_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    try:
        logger.info("Starting up: database pool ready for %s", async_engine.url.render_as_string(hide_password=True))
        yield  # Yield for app lifecycle
    finally:
        # Shutdown: close pooled connections
        logger.info("Shutting down: closing DB connections")
        await async_engine.dispose()
        logger.info("Shutting down: closing DB connections completed")
