from __future__ import annotations

"""/auth/logout route module.

Tokens are stateless JWTs, so logout is handled client-side; the endpoint
only acknowledges the request.
"""

from fastapi import APIRouter

from credforge.adapters.api.v1.auth.schemas import MessageResponse
from credforge.infrastructure.dependency_injection.auth_dependencies import CredentialServiceDep

router = APIRouter()


@router.post(
    "",
    response_model=MessageResponse,
    summary="Logout",
    description="Logout (client should discard the token).",
)
async def logout_user(credential_service: CredentialServiceDep):
    return MessageResponse.from_result(credential_service.logout())
