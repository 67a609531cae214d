"""
Registration input validation - ordered, short-circuiting field rules.

Each field owns an ordered chain of (predicate, message) rules. The first
failing rule for a field produces that field's message and the remaining
rules for the field are skipped. Every field is evaluated, so a request
can fail on several fields at once.

Rule chains
===========

username:
    1. present           -> "Username cannot be null"
    2. 4..32 characters  -> "Must have min 4 and max 20 characters"

email:
    1. present           -> "Email cannot be null"
    2. valid address     -> "Email is not valid"

password:
    1. present           -> "Password cannot be null"
    2. >= 6 characters   -> "Password must be at least 6 characters long"
    3. lower+upper+digit -> "Password must contain at least 1 upper case, 1 lower case and 1 number"

The username length message says "max 20" while 32 is enforced. Clients
match on the literal text, so it is kept as is.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from email_validator import EmailNotValidError, validate_email

USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 32
PASSWORD_MIN_LENGTH = 6

# Single combined pattern: one lowercase, one uppercase and one ASCII digit anywhere.
_PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9]).*$", re.DOTALL)


@dataclass(frozen=True)
class FieldRule:
    """A single predicate with the message reported when it fails."""

    predicate: Callable[[Any], bool]
    message: str


@dataclass(frozen=True)
class FieldValidator:
    """Ordered rule chain for one input field."""

    field: str
    rules: tuple[FieldRule, ...]

    def validate(self, value: Any) -> str | None:
        """
        Evaluate rules in order, stopping at the first failure.

        Returns:
            The failing rule's message, or None if every rule passed
        """
        for rule in self.rules:
            if not rule.predicate(value):
                return rule.message
        return None


@dataclass(frozen=True)
class RegistrationValidationPipeline:
    """Runs every field validator and collects one message per failing field."""

    validators: tuple[FieldValidator, ...]

    def validate(self, data: Mapping[str, Any]) -> dict[str, str]:
        """
        Validate raw request data.

        Missing keys are treated as None. The result preserves the
        validators' declaration order; an empty dict means the input is valid.
        """
        errors: dict[str, str] = {}
        for validator in self.validators:
            message = validator.validate(data.get(validator.field))
            if message is not None:
                errors[validator.field] = message
        return errors


def is_present(value: Any) -> bool:
    """Null, missing and empty string all count as absent."""
    return value is not None and value != ""


def length_between(minimum: int, maximum: int | None = None) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        length = len(value)
        return length >= minimum and (maximum is None or length <= maximum)

    return check


def is_email(value: Any) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def has_password_composition(value: Any) -> bool:
    return _PASSWORD_PATTERN.match(value) is not None


USERNAME_VALIDATOR = FieldValidator(
    field="username",
    rules=(
        FieldRule(is_present, "Username cannot be null"),
        FieldRule(
            length_between(USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH),
            "Must have min 4 and max 20 characters",
        ),
    ),
)

EMAIL_VALIDATOR = FieldValidator(
    field="email",
    rules=(
        FieldRule(is_present, "Email cannot be null"),
        FieldRule(is_email, "Email is not valid"),
    ),
)

PASSWORD_VALIDATOR = FieldValidator(
    field="password",
    rules=(
        FieldRule(is_present, "Password cannot be null"),
        FieldRule(
            length_between(PASSWORD_MIN_LENGTH),
            "Password must be at least 6 characters long",
        ),
        FieldRule(
            has_password_composition,
            "Password must contain at least 1 upper case, 1 lower case and 1 number",
        ),
    ),
)

registration_pipeline = RegistrationValidationPipeline(
    validators=(USERNAME_VALIDATOR, EMAIL_VALIDATOR, PASSWORD_VALIDATOR),
)
