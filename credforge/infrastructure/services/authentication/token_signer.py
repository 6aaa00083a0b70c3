"""JWT token signer backed by PyJWT.

Issues short-lived access tokens keyed on the username. Each token carries a
256-bit `jti` drawn from the secure key generator.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jwt import PyJWTError
from jwt import decode as jwt_decode
from jwt import encode as jwt_encode
from structlog import get_logger

from credforge.core.config.settings import settings
from credforge.core.exceptions import UnauthorizedError
from credforge.domain.interfaces.security import ITokenSigner
from credforge.domain.services.keys.key_generator import generate_session_token

logger = get_logger(__name__)


class JwtTokenSigner(ITokenSigner):
    """Signs access tokens with a symmetric key.

    Attributes:
        algorithm (str): JWS algorithm, HS256 by default.
        expires_in (timedelta): Lifetime of issued tokens.
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        expire_minutes: Optional[int] = None,
        issuer: Optional[str] = None,
        audience: Optional[str] = None,
    ):
        self._secret_key = secret_key or settings.JWT_SECRET_KEY.get_secret_value()
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.expires_in = timedelta(minutes=expire_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        self.issuer = issuer or settings.JWT_ISSUER
        self.audience = audience or settings.JWT_AUDIENCE

    async def issue_token(self, subject: str) -> str:
        """Create a signed access token for ``subject``.

        Args:
            subject (str): The username the token is bound to.

        Returns:
            str: Encoded JWT.
        """
        now = datetime.now(timezone.utc)
        jti = generate_session_token()
        payload = {
            "sub": subject,
            "iss": self.issuer,
            "aud": self.audience,
            "iat": now,
            "exp": now + self.expires_in,
            "jti": jti,
        }
        token = jwt_encode(payload, self._secret_key, algorithm=self.algorithm)
        logger.debug("Access token issued", jti=jti[:4] + "*" * (len(jti) - 4))
        return token

    def decode_token(self, token: str) -> Dict[str, Any]:
        """Validate a token issued by this signer and return its claims.

        Raises:
            UnauthorizedError: If the signature, audience, issuer or expiry check fails
        """
        try:
            return jwt_decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
            )
        except PyJWTError as e:
            logger.warning("Token validation failed", error_type=type(e).__name__)
            raise UnauthorizedError("Invalid token", code="invalid_token") from e
