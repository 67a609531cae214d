"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class ValidationFailed(RegistrationError):
    """One or more field rules failed. Nothing was hashed or persisted."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__(f"Validation failed for: {', '.join(errors)}")
        self.errors = errors


class StorageError(RegistrationError):
    """The account store could not complete the operation."""

    pass


class HashingError(RegistrationError):
    """The password hashing primitive rejected its input."""

    pass
