"""
API v1 routes.

Defines REST endpoints for the User Registration API.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_registration_service
from src.api.models import (
    ErrorResponse,
    RegisterRequest,
    RegisterResponse,
    ValidationErrorResponse,
)
from src.domain.exceptions import HashingError, StorageError, ValidationFailed
from src.domain.registration import RegistrationService

router = APIRouter(tags=["users"])


@router.post(
    "/users",
    response_model=RegisterResponse,
    responses={
        400: {"model": ValidationErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Password could not be hashed"},
        503: {"model": ErrorResponse, "description": "Account store unavailable"},
    },
    summary="Register a new user",
    description="Submit username, email and password to create an account. "
    "Invalid fields are reported together, one message per field.",
)
async def register_user(
    request_data: RegisterRequest | None = None,
    service: RegistrationService = Depends(get_registration_service),
) -> RegisterResponse | JSONResponse:
    """
    Create a user account.

    - **username**: 4 to 32 characters
    - **email**: Valid email address
    - **password**: At least 6 characters with 1 upper case, 1 lower case and 1 number
    """
    # A missing or null body is validated like an object with no fields.
    if request_data is None:
        request_data = RegisterRequest()

    try:
        await service.register(
            request_data.username, request_data.email, request_data.password
        )
    except ValidationFailed as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"validationErrors": e.errors},
        )
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service unavailable",
        ) from None
    except HashingError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Registration failed",
        ) from None
    return RegisterResponse(message="User created")
