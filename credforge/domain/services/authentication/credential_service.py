"""Credential Orchestration Domain Service.

This service composes the pure validators with the external collaborators
(user store, password hasher, token signer) into the register and login
flows. It keeps no state of its own between calls.

Register flow:
1. Validate email, then password, then username; the first failure wins
2. Reject a taken username, then a taken email
3. Hash the password and persist the account
4. Issue a token keyed on the username

Login flow:
1. Look the account up by username
2. Verify the password against the stored hash
3. Issue a token keyed on the username

Security Note:
    Login reports "User not found" and "Invalid password" as distinct errors.
    This allows username enumeration. Transport layers that need a uniform
    answer can catch `UnauthorizedError` and `NotFoundError` together.
"""

import asyncio
from typing import Final

import structlog

from credforge.core.exceptions import (
    DuplicateUserError,
    InvalidCredentialsError,
    UserNotFoundError,
    ValidationError,
)
from credforge.domain.entities.account import Account, AuthResult, LogoutResult
from credforge.domain.interfaces import IPasswordHasher, ITokenSigner, IUserRepository
from credforge.domain.validation.validators import (
    is_valid_email,
    is_valid_password,
    is_valid_username,
    trim_input,
)
from credforge.utils.masking import mask_email, mask_username

logger = structlog.get_logger(__name__)

INVALID_EMAIL_MESSAGE: Final = "Invalid email format"
INVALID_PASSWORD_MESSAGE: Final = (
    "Password must be at least 8 characters with uppercase, lowercase, and digit"
)
INVALID_USERNAME_MESSAGE: Final = "Username must be 3-20 characters, alphanumeric only"
USERNAME_TAKEN_MESSAGE: Final = "Username already exists"
EMAIL_TAKEN_MESSAGE: Final = "Email already exists"
USER_NOT_FOUND_MESSAGE: Final = "User not found"
INVALID_CREDENTIALS_MESSAGE: Final = "Invalid password"
REGISTRATION_SUCCESS_MESSAGE: Final = "Registration successful"
LOGIN_SUCCESS_MESSAGE: Final = "Login successful"
LOGOUT_MESSAGE: Final = "Logged out successfully. Please discard your token."


class CredentialService:
    """Domain service for register/login/logout.

    Responsibilities:
    - Reject malformed credentials before touching any collaborator
    - Prevent duplicate usernames and emails
    - Delegate hashing, persistence and token issuance
    - Log each step with masked identifiers only

    The plaintext password is passed to the hasher and nowhere else: it is
    never persisted, returned or logged.

    Hashing and verification run in the loop's default executor.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
        token_signer: ITokenSigner,
    ):
        """Initialize the service with its collaborators.

        Args:
            user_repository: Store used for duplicate checks, lookup and persistence
            password_hasher: One-way hasher for passwords
            token_signer: Issuer of bearer tokens
        """
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._token_signer = token_signer

    @staticmethod
    def validate_registration(username: str, email: str, password: str) -> None:
        """Apply the registration shape rules in order.

        Raises:
            ValidationError: With the message of the first rule that fails
        """
        if not is_valid_email(email):
            raise ValidationError(INVALID_EMAIL_MESSAGE, code="invalid_email")
        if not is_valid_password(password):
            raise ValidationError(INVALID_PASSWORD_MESSAGE, code="invalid_password_format")
        if not is_valid_username(username):
            raise ValidationError(INVALID_USERNAME_MESSAGE, code="invalid_username")

    async def register(self, username: str, email: str, password: str) -> AuthResult:
        """Register a new account and issue its first token.

        Args:
            username: Requested username
            email: Contact email
            password: Plaintext password; hashed before persistence

        Returns:
            AuthResult: token, username and "Registration successful"

        Raises:
            ValidationError: If email, password or username is malformed
            DuplicateUserError: If the username or email is already taken
        """
        log = logger.bind(
            operation="register",
            username=mask_username(username),
            email=mask_email(email),
        )
        log.info("Registration attempt")

        try:
            self.validate_registration(username, email, password)
        except ValidationError as e:
            log.warning("Registration rejected - invalid input", error_code=e.code)
            raise

        # Stored and compared in the same trimmed form the email rule matched.
        email = trim_input(email)

        if await self._user_repository.exists_by_username(username):
            log.warning("Registration rejected - username already exists")
            raise DuplicateUserError(USERNAME_TAKEN_MESSAGE, code="username_taken")

        if await self._user_repository.exists_by_email(email):
            log.warning("Registration rejected - email already exists")
            raise DuplicateUserError(EMAIL_TAKEN_MESSAGE, code="email_taken")

        loop = asyncio.get_running_loop()
        password_hash = await loop.run_in_executor(
            None, self._password_hasher.hash_password, password
        )
        account = Account(username=username, email=email, password_hash=password_hash)
        saved = await self._user_repository.save(account)

        token = await self._token_signer.issue_token(saved.username)

        log.info("Registration successful")
        return AuthResult(
            token=token,
            username=saved.username,
            message=REGISTRATION_SUCCESS_MESSAGE,
        )

    async def login(self, username: str, password: str) -> AuthResult:
        """Authenticate an account and issue a token.

        Raises:
            UserNotFoundError: If no account has this username
            InvalidCredentialsError: If the password does not match
        """
        log = logger.bind(operation="login", username=mask_username(username))
        log.info("Login attempt")

        account = await self._user_repository.get_by_username(username)
        if account is None:
            log.warning("Login rejected - user not found")
            raise UserNotFoundError(USER_NOT_FOUND_MESSAGE)

        loop = asyncio.get_running_loop()
        verified = await loop.run_in_executor(
            None, self._password_hasher.verify_password, password, account.password_hash
        )
        if not verified:
            log.warning("Login rejected - invalid password")
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        token = await self._token_signer.issue_token(account.username)

        log.info("Login successful")
        return AuthResult(
            token=token,
            username=account.username,
            message=LOGIN_SUCCESS_MESSAGE,
        )

    def logout(self) -> LogoutResult:
        """Acknowledge a logout.

        Tokens are stateless, so nothing is invalidated server-side; the
        caller is expected to discard its token.
        """
        logger.info("Logout acknowledged", operation="logout")
        return LogoutResult(message=LOGOUT_MESSAGE)
