"""
FastAPI application for the User Registration API.

The app exposes a single versioned router under /api/1.0. On startup it
opens the PostgreSQL pool, brings the ``users`` schema up to date and
publishes the pool on ``app.state`` for the dependency layer.
"""

import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import apply_migrations
from src.api.v1 import router as users_router
from src.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_PREFIX = "/api/1.0"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Hold the connection pool open for the lifetime of the process."""
    settings = get_settings()
    configure_logging(settings)

    with ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    ) as pool:
        applied = await asyncio.to_thread(apply_migrations, pool)
        logger.info("Account store ready (%d schema file(s))", len(applied))
        app.state.pool = pool
        yield
        logger.info("Closing account store pool")


app = FastAPI(
    title="signup",
    description="User Registration API - Validates and stores new user accounts",
    version="0.1.0",
    openapi_tags=[{"name": "users", "description": "Create user accounts"}],
    lifespan=lifespan,
)
app.include_router(users_router, prefix=API_PREFIX)
