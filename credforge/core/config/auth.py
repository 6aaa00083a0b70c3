"""Authentication settings: token signing and password hashing.
"""

import logging

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class AuthSettings(BaseSettings):
    """Defines settings for the reference token signer and password hasher.

    Security Note:
        - JWT_SECRET_KEY must be provided in any shared environment. When it is
          missing an ephemeral secret is generated, which invalidates every
          issued token on restart.
        - BCRYPT_WORK_FACTOR trades login latency for brute-force resistance;
          passlib accepts 4..31.
    """

    JWT_SECRET_KEY: SecretStr = SecretStr("")
    JWT_ALGORITHM: str = "HS256"
    JWT_ISSUER: str = "credforge"
    JWT_AUDIENCE: str = "credforge:api:v1"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(ge=1, default=60)

    BCRYPT_WORK_FACTOR: int = Field(ge=4, le=31, default=12)

    @model_validator(mode="after")
    def _ensure_jwt_secret(self) -> "AuthSettings":
        """Falls back to an ephemeral signing secret when none is configured.

        Returns:
            Self instance with a non-empty JWT secret.

        """
        if not self.JWT_SECRET_KEY.get_secret_value():
            # Imported lazily: the key generator must not depend on settings.
            from credforge.domain.services.keys.key_generator import generate_session_token

            self.JWT_SECRET_KEY = SecretStr(generate_session_token())
            logger.warning(
                "JWT_SECRET_KEY not set, using an ephemeral secret; "
                "tokens will not survive a restart."
            )
        return self
