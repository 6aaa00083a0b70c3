import os

# Settings are read at import time, so the test environment must be in place
# before anything from credforge is imported.
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("JWT_SECRET_KEY", "test-signing-secret-0123456789-abcdefghijkl")
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")

import httpx
import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, MagicMock

from credforge.core.application import create_application
from credforge.domain.interfaces import IPasswordHasher, ITokenSigner, IUserRepository
from credforge.domain.services.authentication.credential_service import CredentialService
from credforge.infrastructure.dependency_injection.auth_dependencies import (
    get_password_hasher,
    get_token_signer,
    get_user_repository,
)
from credforge.infrastructure.repositories.in_memory_user_repository import InMemoryUserRepository
from credforge.infrastructure.services.authentication.password_hasher import BcryptPasswordHasher
from credforge.infrastructure.services.authentication.token_signer import JwtTokenSigner


@pytest.fixture(scope="session")
def password_hasher() -> BcryptPasswordHasher:
    """bcrypt at the minimum cost so hashing stays fast in tests."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def token_signer() -> JwtTokenSigner:
    return JwtTokenSigner()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def credential_service(user_repository, password_hasher, token_signer) -> CredentialService:
    return CredentialService(user_repository, password_hasher, token_signer)


@pytest.fixture
def mock_user_repository() -> AsyncMock:
    repo = AsyncMock(spec=IUserRepository)
    repo.exists_by_username.return_value = False
    repo.exists_by_email.return_value = False
    repo.get_by_username.return_value = None
    repo.save.side_effect = lambda account: account
    return repo


@pytest.fixture
def mock_password_hasher() -> MagicMock:
    hasher = MagicMock(spec=IPasswordHasher)
    hasher.hash_password.side_effect = lambda password: f"hashed::{password[::-1]}"
    hasher.verify_password.side_effect = lambda password, hashed: hashed == f"hashed::{password[::-1]}"
    return hasher


@pytest.fixture
def mock_token_signer() -> AsyncMock:
    signer = AsyncMock(spec=ITokenSigner)
    signer.issue_token.side_effect = lambda subject: f"token-for-{subject}"
    return signer


@pytest.fixture
def app(user_repository, password_hasher, token_signer):
    application = create_application()
    application.dependency_overrides[get_user_repository] = lambda: user_repository
    application.dependency_overrides[get_password_hasher] = lambda: password_hasher
    application.dependency_overrides[get_token_signer] = lambda: token_signer
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
