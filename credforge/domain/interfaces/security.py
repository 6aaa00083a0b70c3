"""Security collaborator interfaces: password hashing and token signing.

The core never hashes passwords or signs tokens itself. It calls these ports
and treats their outputs as opaque strings.
"""

from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """Interface for one-way password hashing.

    Implementations must use a slow, salted algorithm and a constant-time
    comparison in `verify_password`.
    """

    @abstractmethod
    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password.

        Returns:
            str: Encoded hash suitable for storage.
        """
        raise NotImplementedError

    @abstractmethod
    def verify_password(self, password: str, hashed_password: str) -> bool:
        """Check a plaintext password against a stored hash.

        Returns:
            bool: True if the password matches. Malformed hashes yield False.
        """
        raise NotImplementedError


class ITokenSigner(ABC):
    """Interface for issuing bearer tokens keyed on a subject identifier."""

    @abstractmethod
    async def issue_token(self, subject: str) -> str:
        """Issue a signed token for the subject.

        Args:
            subject: Identifier the token is bound to (the username).

        Returns:
            str: Encoded token.
        """
        raise NotImplementedError
