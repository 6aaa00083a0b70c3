"""Factories for generating fake accounts and registration payloads."""

from typing import Dict, Optional

from faker import Faker

from credforge.domain.entities.account import Account

fake = Faker()


def _fake_username() -> str:
    # Faker usernames may contain dots; keep to the accepted alphabet.
    base = "".join(ch if ch.isascii() and ch.isalnum() else "_" for ch in fake.unique.user_name())[:14]
    return f"{base}{fake.random_int(min=10, max=99)}"


def create_fake_credentials(
    username: Optional[str] = None,
    email: Optional[str] = None,
    password: Optional[str] = None,
) -> Dict[str, str]:
    """Build a registration payload that passes every shape rule.

    Args:
        username (str, optional): Overrides the generated username.
        email (str, optional): Overrides the generated email.
        password (str, optional): Overrides the generated password.

    Returns:
        Dict[str, str]: ``username``, ``email`` and ``password`` keys.
    """
    return {
        "username": username if username is not None else _fake_username(),
        "email": email if email is not None else fake.unique.email(),
        "password": (
            password
            if password is not None
            else fake.password(length=12, special_chars=False, digits=True, upper_case=True, lower_case=True)
        ),
    }


def create_fake_account(
    username: Optional[str] = None,
    email: Optional[str] = None,
    password_hash: str = "not-a-real-hash",
) -> Account:
    """Create an `Account` with a placeholder hash."""
    return Account(
        username=username if username is not None else _fake_username(),
        email=email if email is not None else fake.unique.email(),
        password_hash=password_hash,
    )
