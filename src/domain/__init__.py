"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for user registration:
input validation rules, the registration service and the port interfaces
it needs from infrastructure (account storage and password hashing).
"""

from .exceptions import HashingError, RegistrationError, StorageError, ValidationFailed
from .ports import Account, AccountStore, PasswordHasher
from .registration import RegistrationService
from .validation import (
    FieldRule,
    FieldValidator,
    RegistrationValidationPipeline,
    registration_pipeline,
)

__all__ = [
    "Account",
    "AccountStore",
    "FieldRule",
    "FieldValidator",
    "HashingError",
    "PasswordHasher",
    "RegistrationError",
    "RegistrationService",
    "RegistrationValidationPipeline",
    "StorageError",
    "ValidationFailed",
    "registration_pipeline",
]
