"""Re-export factory functions for generating fake test data."""

# flake8: noqa: F401 re-export

from .account import create_fake_account, create_fake_credentials

__all__ = [
    "create_fake_account",
    "create_fake_credentials",
]
