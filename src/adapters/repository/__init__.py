"""Repository adapters - Database implementations."""

from .postgres import PostgresAccountStore, apply_migrations

__all__ = ["PostgresAccountStore", "apply_migrations"]
