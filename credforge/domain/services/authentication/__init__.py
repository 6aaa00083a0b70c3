"""Credential orchestration (register / login / logout)."""

from .credential_service import CredentialService

__all__ = ["CredentialService"]
