"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Request fields are all optional: field rules are enforced by the domain
validation pipeline so that missing or null values produce the 400
``validationErrors`` body rather than a framework 422.
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Request model for user registration."""

    username: str | None = Field(default=None, description="Username (4-32 characters)")
    email: str | None = Field(default=None, description="Valid email address")
    password: str | None = Field(
        default=None,
        description="Password (min 6 characters, 1 upper case, 1 lower case and 1 number)",
    )


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    message: str


class ValidationErrorResponse(BaseModel):
    """Field-level validation errors, at most one message per field."""

    validationErrors: dict[str, str]


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
