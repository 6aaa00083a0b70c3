"""Bcrypt password hasher backed by passlib.

This module provides the reference `IPasswordHasher` used when credforge runs
as a service. The work factor comes from `BCRYPT_WORK_FACTOR`.
"""

from typing import Optional

import structlog
from passlib.context import CryptContext

from credforge.core.config.settings import settings
from credforge.domain.interfaces.security import IPasswordHasher

logger = structlog.get_logger(__name__)


class BcryptPasswordHasher(IPasswordHasher):
    """Password hasher using bcrypt through a passlib `CryptContext`.

    Security:
        - Salted, adaptive hashing with a configurable work factor
        - Constant-time comparison on verification
        - Malformed stored hashes verify as False instead of raising
    """

    def __init__(self, rounds: Optional[int] = None):
        """Initialize the hasher.

        Args:
            rounds: bcrypt cost; defaults to settings.BCRYPT_WORK_FACTOR
        """
        self._rounds = rounds or settings.BCRYPT_WORK_FACTOR
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=self._rounds,
        )

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt.

        Args:
            password: Plain text password to hash

        Returns:
            str: Bcrypt-hashed password
        """
        return self.pwd_context.hash(password)

    def verify_password(self, password: str, hashed_password: str) -> bool:
        """Verify a password against its hash.

        Args:
            password: Plain text password to verify
            hashed_password: Bcrypt hash to verify against

        Returns:
            bool: True if password matches hash
        """
        try:
            return self.pwd_context.verify(password, hashed_password)
        except (ValueError, TypeError) as e:
            # passlib raises for unrecognised or malformed hashes
            logger.warning("Password verification failed on malformed hash", error_type=type(e).__name__)
            return False
