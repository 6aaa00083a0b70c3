"""Dependency injection for the credential flows.

This module wires the domain `CredentialService` to its concrete
collaborators for the FastAPI layer. Each factory can be replaced through
`app.dependency_overrides`, which is how tests swap in doubles.

The default wiring uses the in-memory user store, the bcrypt hasher and the
JWT signer. The store and hasher are process-wide singletons so that accounts
registered through one request are visible to the next.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from credforge.domain.interfaces import IPasswordHasher, ITokenSigner, IUserRepository
from credforge.domain.services.authentication.credential_service import CredentialService
from credforge.infrastructure.repositories.in_memory_user_repository import (
    InMemoryUserRepository,
)
from credforge.infrastructure.services.authentication.password_hasher import (
    BcryptPasswordHasher,
)
from credforge.infrastructure.services.authentication.token_signer import JwtTokenSigner


@lru_cache
def get_user_repository() -> IUserRepository:
    """Process-wide user store."""
    return InMemoryUserRepository()


@lru_cache
def get_password_hasher() -> IPasswordHasher:
    """Process-wide bcrypt hasher."""
    return BcryptPasswordHasher()


@lru_cache
def get_token_signer() -> ITokenSigner:
    """Process-wide JWT signer."""
    return JwtTokenSigner()


def get_credential_service(
    user_repository: Annotated[IUserRepository, Depends(get_user_repository)],
    password_hasher: Annotated[IPasswordHasher, Depends(get_password_hasher)],
    token_signer: Annotated[ITokenSigner, Depends(get_token_signer)],
) -> CredentialService:
    """Factory for the credential orchestration service.

    Returns:
        CredentialService: Service bound to the injected collaborators
    """
    return CredentialService(
        user_repository=user_repository,
        password_hasher=password_hasher,
        token_signer=token_signer,
    )


CredentialServiceDep = Annotated[CredentialService, Depends(get_credential_service)]
