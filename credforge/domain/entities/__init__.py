"""Domain entities."""

from .account import Account, AuthResult, LogoutResult

__all__ = ["Account", "AuthResult", "LogoutResult"]
