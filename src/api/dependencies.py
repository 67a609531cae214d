"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from functools import lru_cache

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.hashing import BcryptPasswordHasher
from src.adapters.repository.postgres import PostgresAccountStore
from src.config.settings import get_settings
from src.domain.registration import RegistrationService


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_account_store(request: Request) -> PostgresAccountStore:
    """Create account store with connection pool from app state."""
    pool = get_pool(request)
    return PostgresAccountStore(pool)


@lru_cache
def get_password_hasher() -> BcryptPasswordHasher:
    """Get bcrypt hasher configured with the deployment's cost factor (singleton)."""
    return BcryptPasswordHasher(cost=get_settings().bcrypt_cost)


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the account store and password hasher for the domain service.
    """
    account_store = get_account_store(request)
    password_hasher = get_password_hasher()
    return RegistrationService(account_store=account_store, password_hasher=password_hasher)
