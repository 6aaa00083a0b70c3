from __future__ import annotations

"""/keys route module: secure random key and token generation.

Each endpoint delegates to `credforge.domain.services.keys`. Omitted query
parameters fall back to the defaults in `KeySettings`. Out-of-range values
raise `InvalidArgumentError`, which the global handler turns into a 400.
Generated keys are never logged.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Query

from credforge.adapters.api.v1.keys.schemas import BatchKeyResponse, KeyResponse
from credforge.core.config.settings import settings
from credforge.domain.services.keys import key_generator
from credforge.domain.services.keys.key_generator import (
    SESSION_TOKEN_BYTES,
    WEBHOOK_SECRET_LENGTH,
    KeyType,
)

logger = structlog.get_logger(__name__)
router = APIRouter()

UUID_KEY_LENGTH = 32


def _respond(key_type: str, key: str, length: int) -> KeyResponse:
    logger.debug("Key generated", key_type=key_type, length=length)
    return KeyResponse(type=key_type, key=key, length=length)


@router.get("/alphanumeric", response_model=KeyResponse, summary="Generate an alphanumeric key")
async def alphanumeric_key(length: Optional[int] = Query(None, description="Key length (default 32)")):
    length = settings.DEFAULT_KEY_LENGTH if length is None else length
    return _respond("alphanumeric", key_generator.generate_alphanumeric_key(length), length)


@router.get("/hex", response_model=KeyResponse, summary="Generate a hexadecimal key")
async def hex_key(length: Optional[int] = Query(None, description="Number of hex characters (default 64)")):
    length = settings.DEFAULT_HEX_LENGTH if length is None else length
    return _respond("hex", key_generator.generate_hex_key(length), length)


@router.get("/base64", response_model=KeyResponse, summary="Generate a Base64 key")
async def base64_key(byte_length: Optional[int] = Query(None, alias="bytes", description="Random bytes (default 32)")):
    byte_length = settings.DEFAULT_BYTE_LENGTH if byte_length is None else byte_length
    return _respond("base64", key_generator.generate_base64_key(byte_length), byte_length)


@router.get("/url-safe", response_model=KeyResponse, summary="Generate a URL-safe key")
async def url_safe_key(byte_length: Optional[int] = Query(None, alias="bytes", description="Random bytes (default 32)")):
    byte_length = settings.DEFAULT_BYTE_LENGTH if byte_length is None else byte_length
    return _respond("url-safe", key_generator.generate_url_safe_key(byte_length), byte_length)


@router.get("/uuid", response_model=KeyResponse, summary="Generate a UUID key without hyphens")
async def uuid_key():
    return _respond("uuid", key_generator.generate_uuid_key(), UUID_KEY_LENGTH)


@router.get("/api-key", response_model=KeyResponse, summary="Generate a prefixed API key")
async def api_key(
    prefix: Optional[str] = Query(None, description='Key prefix (default "api")'),
    length: Optional[int] = Query(None, description="Length of the random part (default 32)"),
):
    prefix = settings.DEFAULT_API_KEY_PREFIX if prefix is None else prefix
    length = settings.DEFAULT_KEY_LENGTH if length is None else length
    return _respond("api-key", key_generator.generate_api_key(prefix, length), length)


@router.get("/webhook-secret", response_model=KeyResponse, summary="Generate a webhook secret")
async def webhook_secret():
    return _respond("webhook-secret", key_generator.generate_webhook_secret(), WEBHOOK_SECRET_LENGTH)


@router.get("/session-token", response_model=KeyResponse, summary="Generate a session token")
async def session_token():
    return _respond("session-token", key_generator.generate_session_token(), SESSION_TOKEN_BYTES)


@router.get("/batch", response_model=BatchKeyResponse, summary="Generate multiple keys at once")
async def batch_keys(
    key_type: str = Query(KeyType.ALPHANUMERIC.value, alias="type", description="alphanumeric, hex, base64, url-safe or uuid"),
    length: Optional[int] = Query(None, description="Length/bytes for each key (default 32)"),
    count: Optional[int] = Query(None, description="Number of keys, 1-100 (default 5)"),
):
    length = settings.DEFAULT_KEY_LENGTH if length is None else length
    count = settings.DEFAULT_BATCH_COUNT if count is None else count
    keys = key_generator.generate_batch_keys(key_type, length, count)
    logger.debug("Key batch generated", key_type=key_type, length=length, count=count)
    return BatchKeyResponse(type=key_type, count=count, keys=keys)
