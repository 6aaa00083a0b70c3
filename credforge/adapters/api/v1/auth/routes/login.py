from __future__ import annotations

"""/auth/login route module."""

from fastapi import APIRouter

from credforge.adapters.api.v1.auth.schemas import AuthResponse, LoginRequest
from credforge.infrastructure.dependency_injection.auth_dependencies import CredentialServiceDep

router = APIRouter()


@router.post(
    "",
    response_model=AuthResponse,
    summary="Login",
    description="Login with username and password, returns a JWT token.",
)
async def login_user(payload: LoginRequest, credential_service: CredentialServiceDep):
    """Authenticate a user.

    Raises:
        UserNotFoundError: 404, unknown username
        InvalidCredentialsError: 401, wrong password
    """
    result = await credential_service.login(
        username=payload.username,
        password=payload.password,
    )
    return AuthResponse.from_result(result)
