"""
PostgreSQL repository adapter - Implements AccountStore protocol.

This module provides the PostgreSQL implementation of the domain's
account store port using psycopg3 with raw SQL.

Any psycopg error is re-raised as the domain's StorageError so callers
never depend on driver exception types. No retries are attempted.
"""

import logging
from pathlib import Path

import psycopg
from psycopg_pool import ConnectionPool

from src.domain.exceptions import StorageError
from src.domain.ports import Account

logger = logging.getLogger(__name__)

# Structure: src/adapters/repository/postgres.py -> migrations/
MIGRATIONS_DIR = Path(__file__).resolve().parents[3] / "migrations"


class PostgresAccountStore:
    """
    Implements AccountStore protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize store with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def create(self, account: Account) -> Account:
        """
        Insert a new account row.

        Args:
            account: Account with hashed password (id is ignored)

        Returns:
            The stored account carrying its generated id

        Raises:
            StorageError: If the insert could not be committed
        """
        sql = """
            INSERT INTO users (username, email, password_hash)
            VALUES (%s, %s, %s)
            RETURNING id
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (account.username, account.email, account.password_hash))
                row = cursor.fetchone()
                conn.commit()
        except psycopg.Error as e:
            logger.exception("Failed to create account for username=%s", account.username)
            raise StorageError("Could not create account") from e

        return Account(
            username=account.username,
            email=account.email,
            password_hash=account.password_hash,
            id=row[0],
        )

    def find_by_email(self, email: str) -> Account | None:
        """
        Fetch the oldest account registered with ``email``.

        Emails are not unique, so the lowest id wins when several match.

        Raises:
            StorageError: If the query failed
        """
        sql = """
            SELECT id, username, email, password_hash
            FROM users
            WHERE email = %s
            ORDER BY id
            LIMIT 1
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, (email,))
                row = cursor.fetchone()
        except psycopg.Error as e:
            logger.exception("Failed to look up account by email")
            raise StorageError("Could not query accounts") from e

        if row is None:
            return None
        return Account(id=row[0], username=row[1], email=row[2], password_hash=row[3])


def apply_migrations(pool: ConnectionPool, directory: Path = MIGRATIONS_DIR) -> list[str]:
    """
    Apply every ``*.sql`` file in ``directory`` in filename order.

    All files run in one transaction: either the whole schema is applied
    or none of it is. Files must be idempotent since they run on every
    startup.

    Returns:
        Names of the files applied

    Raises:
        StorageError: If any file fails to execute
    """
    scripts = sorted(directory.glob("*.sql"))
    if not scripts:
        logger.warning("No schema files found in %s", directory)
        return []

    applied: list[str] = []
    current = scripts[0]
    try:
        with pool.connection() as conn, conn.transaction():
            for current in scripts:
                logger.info("Applying schema file %s", current.name)
                conn.execute(current.read_text())
                applied.append(current.name)
    except psycopg.Error as e:
        logger.exception("Schema file %s failed, nothing applied", current.name)
        raise StorageError(f"Could not apply schema file {current.name}") from e

    return applied
