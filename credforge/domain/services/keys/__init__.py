"""Secure key generation."""

from .key_generator import (
    KeyType,
    generate_alphanumeric_key,
    generate_api_key,
    generate_base64_key,
    generate_batch_keys,
    generate_hex_key,
    generate_key,
    generate_session_token,
    generate_url_safe_key,
    generate_uuid_key,
    generate_webhook_secret,
)

__all__ = [
    "KeyType",
    "generate_alphanumeric_key",
    "generate_api_key",
    "generate_base64_key",
    "generate_batch_keys",
    "generate_hex_key",
    "generate_key",
    "generate_session_token",
    "generate_url_safe_key",
    "generate_uuid_key",
    "generate_webhook_secret",
]
