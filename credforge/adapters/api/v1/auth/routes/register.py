from __future__ import annotations

"""/auth/register route module.

Thin HTTP wrapper around `CredentialService.register`. Validation, duplicate
and persistence errors propagate to the global exception handlers.
"""

from fastapi import APIRouter, status

from credforge.adapters.api.v1.auth.schemas import AuthResponse, RegisterRequest
from credforge.infrastructure.dependency_injection.auth_dependencies import CredentialServiceDep

router = APIRouter()


@router.post(
    "",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="Create a new user account with username, email, and password.",
)
async def register_user(payload: RegisterRequest, credential_service: CredentialServiceDep):
    """Register a new user and return a token.

    Raises:
        ValidationError: 422, malformed email/password/username
        DuplicateUserError: 409, username or email already taken
    """
    result = await credential_service.register(
        username=payload.username,
        email=payload.email,
        password=payload.password,
    )
    return AuthResponse.from_result(result)
