"""
Shared fixtures for integration tests.

Tests using the ``pool`` fixture need the PostgreSQL database configured by
DATABASE_URL (via docker-compose) and are skipped when it is unreachable.
"""

from collections.abc import Generator

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from src.adapters.repository.postgres import apply_migrations
from src.config.settings import get_settings


@pytest.fixture(scope="module")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool and apply migrations for integration tests."""
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    try:
        pool.wait(timeout=5)
    except PoolTimeout:
        pool.close()
        pytest.skip(f"PostgreSQL not reachable at {settings.database_url}")
    apply_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture(autouse=True)
def clean_database(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Clean users table before each database test."""
    if "pool" in request.fixturenames:
        pool = request.getfixturevalue("pool")
        with pool.connection() as conn:
            conn.execute("DELETE FROM users")
            conn.commit()
    yield
