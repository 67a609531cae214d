"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A mocked account store that echoes accounts back with an id
- A fast bcrypt hasher (minimum cost factor)
- The valid registration payload used across test modules
"""

from dataclasses import replace
from unittest.mock import Mock

import pytest

from src.adapters.hashing import BcryptPasswordHasher

VALID_USER = {
    "username": "user1",
    "email": "user1@mail.com",
    "password": "P4ssword",
}


@pytest.fixture
def valid_user() -> dict[str, str]:
    """Fresh copy of a payload that passes every field rule."""
    return dict(VALID_USER)


@pytest.fixture
def account_store() -> Mock:
    """Account store mock whose create() returns the account with id=1."""
    store = Mock()
    store.create.side_effect = lambda account: replace(account, id=1)
    store.find_by_email.return_value = None
    return store


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    """bcrypt hasher at the minimum cost factor to keep tests fast."""
    return BcryptPasswordHasher(cost=4)

