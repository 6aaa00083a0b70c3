"""In-memory implementation of `IUserRepository`.

Used for local runs and tests. Data lives only as long as the process.
Lookups are exact-match on username and email.
"""

import asyncio
from typing import Dict, Optional

from structlog import get_logger

from credforge.core.exceptions import DuplicateUserError
from credforge.domain.entities.account import Account
from credforge.domain.interfaces.repositories import IUserRepository
from credforge.utils.masking import mask_username

logger = get_logger(__name__)


class InMemoryUserRepository(IUserRepository):
    """Dictionary-backed account store.

    Writes are serialized with an `asyncio.Lock` so that two concurrent
    registrations cannot both persist the same username or email.
    """

    def __init__(self) -> None:
        self._accounts: Dict[str, Account] = {}
        self._emails: Dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def exists_by_username(self, username: str) -> bool:
        return username in self._accounts

    async def exists_by_email(self, email: str) -> bool:
        return email in self._emails

    async def get_by_username(self, username: str) -> Optional[Account]:
        return self._accounts.get(username)

    async def save(self, account: Account) -> Account:
        async with self._lock:
            if account.username in self._accounts:
                raise DuplicateUserError("Username already exists", code="username_taken")
            if account.email in self._emails:
                raise DuplicateUserError("Email already exists", code="email_taken")
            self._accounts[account.username] = account
            self._emails[account.email] = account.username

        logger.debug("Account stored", username=mask_username(account.username))
        return account

    def __len__(self) -> int:
        return len(self._accounts)
