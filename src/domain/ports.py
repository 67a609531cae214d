"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure, plus the Account entity they exchange.
Adapters implement these protocols.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Account:
    """
    Persisted user account.

    ``password_hash`` always holds the PasswordHasher output, never the
    submitted plaintext. ``id`` is assigned by the store on creation.
    """

    username: str
    email: str
    password_hash: str
    id: int | None = None


class AccountStore(Protocol):
    """Port interface for account persistence."""

    def create(self, account: Account) -> Account:
        """
        Persist a new account.

        Args:
            account: Account carrying an already hashed password

        Returns:
            The stored account, with its identity assigned

        Raises:
            StorageError: If the store could not complete the write
        """
        ...

    def find_by_email(self, email: str) -> Account | None:
        """
        Look up an account by email address.

        Args:
            email: Email address, matched exactly

        Returns:
            The first matching account, or None if there is none

        Raises:
            StorageError: If the store could not be queried
        """
        ...


class PasswordHasher(Protocol):
    """Port interface for one-way password hashing."""

    def hash(self, plaintext: str) -> str:
        """
        Hash a plaintext password with a fresh random salt.

        Two calls with the same input return different digests.

        Raises:
            HashingError: If the hashing primitive rejects the input
        """
        ...
