"""
Integration tests for PostgresAccountStore.

Tests store operations against a real PostgreSQL database.
Requires PostgreSQL to be running (via docker-compose).
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresAccountStore, apply_migrations
from src.domain.ports import Account

pytestmark = pytest.mark.integration


@pytest.fixture
def store(pool: ConnectionPool) -> PostgresAccountStore:
    """Create store instance for each test."""
    return PostgresAccountStore(pool)


def make_account(username: str = "user1", email: str = "user1@mail.com") -> Account:
    return Account(username=username, email=email, password_hash="$2b$10$hashedpasswordvalue")


class TestCreate:
    """Tests for create method."""

    def test_create_assigns_id(self, store: PostgresAccountStore) -> None:
        """Stored account carries a generated id."""
        stored = store.create(make_account())
        assert stored.id is not None

    def test_create_preserves_fields(self, store: PostgresAccountStore) -> None:
        """Stored account keeps username, email and hash."""
        stored = store.create(make_account())
        assert stored.username == "user1"
        assert stored.email == "user1@mail.com"
        assert stored.password_hash == "$2b$10$hashedpasswordvalue"

    def test_create_writes_one_row(self, store: PostgresAccountStore, pool: ConnectionPool) -> None:
        """create() inserts exactly one row."""
        store.create(make_account())

        with pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute("SELECT username, email, password_hash FROM users")
            rows = cursor.fetchall()

        assert rows == [("user1", "user1@mail.com", "$2b$10$hashedpasswordvalue")]

    def test_duplicate_email_is_not_rejected(self, store: PostgresAccountStore) -> None:
        """No uniqueness constraint: the same email can be stored twice."""
        first = store.create(make_account(username="first"))
        second = store.create(make_account(username="second"))
        assert first.id != second.id

    def test_concurrent_creates_all_succeed(self, pool: ConnectionPool) -> None:
        """Concurrent writes each produce their own row."""

        def create(i: int) -> Account:
            return PostgresAccountStore(pool).create(
                make_account(username=f"user{i}", email=f"user{i}@mail.com")
            )

        with ThreadPoolExecutor(max_workers=5) as executor:
            results = list(executor.map(create, range(5)))

        assert len({account.id for account in results}) == 5


class TestFindByEmail:
    """Tests for find_by_email method."""

    def test_returns_account(self, store: PostgresAccountStore) -> None:
        """Existing email returns the stored account."""
        stored = store.create(make_account())
        found = store.find_by_email("user1@mail.com")
        assert found == stored

    def test_returns_none_when_missing(self, store: PostgresAccountStore) -> None:
        """Unknown email returns None."""
        assert store.find_by_email("nobody@mail.com") is None

    def test_returns_oldest_match(self, store: PostgresAccountStore) -> None:
        """With duplicate emails, the first created account is returned."""
        first = store.create(make_account(username="first"))
        store.create(make_account(username="second"))
        assert store.find_by_email("user1@mail.com") == first


class TestMigrations:
    """Tests for apply_migrations."""

    def test_migrations_are_idempotent(self, pool: ConnectionPool) -> None:
        """Running migrations twice leaves the schema usable."""
        apply_migrations(pool)
        assert apply_migrations(pool) == ["001_create_users.sql"]
        PostgresAccountStore(pool).create(make_account())

