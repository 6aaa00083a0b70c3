"""Schemas for the authentication endpoints."""

from .requests import LoginRequest, RegisterRequest
from .responses import AuthResponse, MessageResponse

__all__ = ["AuthResponse", "LoginRequest", "MessageResponse", "RegisterRequest"]
