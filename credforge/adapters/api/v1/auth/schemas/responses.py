from __future__ import annotations

"""Response Pydantic models for authentication endpoints."""

from pydantic import BaseModel

from credforge.domain.entities.account import AuthResult, LogoutResult


class AuthResponse(BaseModel):
    """Response returned by register & login endpoints."""

    token: str
    username: str
    message: str

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        return cls(token=result.token, username=result.username, message=result.message)


class MessageResponse(BaseModel):
    """Plain acknowledgement, used by logout."""

    message: str

    @classmethod
    def from_result(cls, result: LogoutResult) -> "MessageResponse":
        return cls(message=result.message)
