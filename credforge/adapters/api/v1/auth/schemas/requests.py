from __future__ import annotations

"""Request-payload Pydantic models for authentication endpoints.

Fields are plain strings; the credential rules and their messages come from
the domain validators.
"""

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Payload expected by ``POST /auth/register``."""

    username: str = Field(..., examples=["alice01"])
    email: str = Field(..., examples=["alice@example.com"])
    password: str = Field(..., examples=["Passw0rd"])


class LoginRequest(BaseModel):
    """Payload expected by ``POST /auth/login``."""

    username: str = Field(..., examples=["alice01"])
    password: str = Field(..., examples=["Passw0rd"])
