"""Repository interfaces for abstracting account persistence.

The domain layer depends on `IUserRepository` only; concrete stores live in
`credforge.infrastructure.repositories`. Implementations are expected to fail
fast: any timeout or retry policy belongs to the implementation, not to the
core.
"""

from abc import ABC, abstractmethod
from typing import Optional

from credforge.domain.entities.account import Account


class IUserRepository(ABC):
    """An interface defining the contract for account persistence operations."""

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        """Checks whether an account with this username exists.

        Args:
            username: The username to check.

        Returns:
            `True` if the username is taken, `False` otherwise.
        """
        raise NotImplementedError

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Checks whether an account with this email exists.

        Args:
            email: The email address to check.

        Returns:
            `True` if the email is taken, `False` otherwise.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[Account]:
        """Retrieves an account by username.

        Args:
            username: The username to search for.

        Returns:
            An optional `Account`. Returns `None` if no account is found.
        """
        raise NotImplementedError

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Persists a new account.

        Args:
            account: The `Account` to persist.

        Returns:
            The persisted `Account`.
        """
        raise NotImplementedError
