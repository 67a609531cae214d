"""
Registration domain service - validate, hash, persist.

This module contains the core business logic for user registration.

Flow
====

    validate -> (errors)  ValidationFailed, nothing hashed or stored
             -> (clean)   hash password -> AccountStore.create -> Account

Hashing (bcrypt) and the store write both block, so each runs in a worker
thread; the awaiting request yields the event loop to other requests in
the meantime. Failures from either step propagate to the caller unchanged.
"""

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .exceptions import ValidationFailed
from .ports import Account, AccountStore, PasswordHasher
from .validation import RegistrationValidationPipeline, registration_pipeline

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: input validation,
    password hashing and account persistence.
    """

    account_store: AccountStore
    password_hasher: PasswordHasher
    pipeline: RegistrationValidationPipeline = field(default=registration_pipeline)

    def validate(self, data: Mapping[str, Any]) -> dict[str, str]:
        """Return the field -> message mapping for ``data`` (empty when valid)."""
        return self.pipeline.validate(data)

    async def register(
        self, username: str | None, email: str | None, password: str | None
    ) -> Account:
        """
        Register a new account.

        Args:
            username: Requested username (may be None at the boundary)
            email: Email address (may be None at the boundary)
            password: Plaintext password (hashed before storage)

        Returns:
            The stored account

        Raises:
            ValidationFailed: If any field rule failed
            HashingError: If the password could not be hashed
            StorageError: If the account could not be persisted
        """
        errors = self.validate({"username": username, "email": email, "password": password})
        if errors:
            logger.info("Registration rejected: invalid fields %s", list(errors))
            raise ValidationFailed(errors)

        password_hash = await asyncio.to_thread(self.password_hasher.hash, password)
        account = Account(username=username, email=email, password_hash=password_hash)
        stored = await asyncio.to_thread(self.account_store.create, account)

        logger.info("Account created: id=%s username=%s", stored.id, stored.username)
        return stored
