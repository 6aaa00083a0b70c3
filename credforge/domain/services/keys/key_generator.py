"""Secure random key and token generation.

All randomness comes from the `secrets` module, which draws from the operating
system CSPRNG (`os.urandom`). It is safe to call from many threads at once
without extra locking, and it is used for every key type, including the
"simple" alphanumeric and hex ones.

Key formats:
    alphanumeric    ``length`` characters from ``[A-Za-z0-9]``
    hex             ``length`` characters from ``[0-9a-f]`` (two per byte)
    base64          ``byte_length`` random bytes, standard Base64 with padding
    url-safe        ``byte_length`` random bytes, URL-safe Base64, no padding
    uuid            random UUID4 rendered as 32 hex characters
    api key         ``<prefix>_<alphanumeric>``
    webhook secret  64 hex characters (256 bits)
    session token   32 random bytes, URL-safe Base64, no padding (43 chars)
"""

import base64
import secrets
import string
import uuid
from enum import Enum
from typing import Final, List

from credforge.core.exceptions import InvalidArgumentError

ALPHANUMERIC: Final = string.ascii_uppercase + string.ascii_lowercase + string.digits
HEX_CHARS: Final = "0123456789abcdef"

WEBHOOK_SECRET_LENGTH: Final = 64
SESSION_TOKEN_BYTES: Final = 32
MIN_BATCH_COUNT: Final = 1
MAX_BATCH_COUNT: Final = 100


class KeyType(str, Enum):
    """Type tags accepted by `generate_batch_keys`."""

    ALPHANUMERIC = "alphanumeric"
    HEX = "hex"
    BASE64 = "base64"
    URL_SAFE = "url-safe"
    UUID = "uuid"

    @classmethod
    def parse(cls, tag: "str | KeyType | None") -> "KeyType":
        """Resolve a tag case-insensitively, falling back to alphanumeric."""
        if isinstance(tag, cls):
            return tag
        try:
            return cls((tag or "").strip().lower())
        except ValueError:
            return cls.ALPHANUMERIC


def _sample(alphabet: str, length: int) -> str:
    return "".join(secrets.choice(alphabet) for _ in range(length))


def _require_positive(value: int, message: str) -> None:
    if value <= 0:
        raise InvalidArgumentError(message)


def generate_alphanumeric_key(length: int) -> str:
    """Generate a random alphanumeric key of the given length.

    Raises:
        InvalidArgumentError: If length is not positive
    """
    _require_positive(length, "Length must be positive")
    return _sample(ALPHANUMERIC, length)


def generate_hex_key(length: int) -> str:
    """Generate ``length`` random hexadecimal characters (not bytes).

    Raises:
        InvalidArgumentError: If length is not positive
    """
    _require_positive(length, "Length must be positive")
    return _sample(HEX_CHARS, length)


def generate_base64_key(byte_length: int) -> str:
    """Generate ``byte_length`` random bytes encoded as padded standard Base64.

    Raises:
        InvalidArgumentError: If byte_length is not positive
    """
    _require_positive(byte_length, "Byte length must be positive")
    return base64.b64encode(secrets.token_bytes(byte_length)).decode("ascii")


def generate_url_safe_key(byte_length: int) -> str:
    """Generate ``byte_length`` random bytes as URL-safe Base64 without padding.

    Raises:
        InvalidArgumentError: If byte_length is not positive
    """
    _require_positive(byte_length, "Byte length must be positive")
    raw_bytes = secrets.token_bytes(byte_length)
    return base64.urlsafe_b64encode(raw_bytes).rstrip(b"=").decode("ascii")


def generate_uuid_key() -> str:
    """Generate a random UUID4 without hyphens (32 hex characters)."""
    return uuid.uuid4().hex


def generate_api_key(prefix: str, length: int) -> str:
    """Generate an API key of the form ``prefix_<random alphanumeric>``.

    Args:
        prefix: Non-blank prefix identifying the key's purpose, e.g. "api"
        length: Length of the random part

    Raises:
        InvalidArgumentError: If prefix is blank or length is not positive
    """
    if not isinstance(prefix, str) or not prefix.strip():
        raise InvalidArgumentError("Prefix cannot be null or empty")
    _require_positive(length, "Key length must be positive")
    return f"{prefix}_{generate_alphanumeric_key(length)}"


def generate_webhook_secret() -> str:
    """Generate a 256-bit webhook signing secret as 64 hex characters."""
    return generate_hex_key(WEBHOOK_SECRET_LENGTH)


def generate_session_token() -> str:
    """Generate a URL-safe session token from 32 random bytes."""
    return generate_url_safe_key(SESSION_TOKEN_BYTES)


def generate_key(key_type: "str | KeyType", length: int) -> str:
    """Generate a single key of the given type.

    ``length`` is a character count for alphanumeric/hex, a byte count for
    base64/url-safe and is ignored for uuid. Unknown types produce an
    alphanumeric key.
    """
    kind = KeyType.parse(key_type)
    if kind is KeyType.HEX:
        return generate_hex_key(length)
    if kind is KeyType.BASE64:
        return generate_base64_key(length)
    if kind is KeyType.URL_SAFE:
        return generate_url_safe_key(length)
    if kind is KeyType.UUID:
        return generate_uuid_key()
    return generate_alphanumeric_key(length)


def generate_batch_keys(
    key_type: "str | KeyType" = KeyType.ALPHANUMERIC,
    length: int = 32,
    count: int = 5,
) -> List[str]:
    """Generate ``count`` independent keys of one type.

    Args:
        key_type: One of the `KeyType` tags (case-insensitive); anything else
            falls back to alphanumeric
        length: Length/byte count forwarded to the per-type generator
        count: Number of keys, 1 to 100 inclusive

    Returns:
        List[str]: The generated keys, in generation order

    Raises:
        InvalidArgumentError: If count is out of range or length is invalid
            for the chosen type
    """
    if not MIN_BATCH_COUNT <= count <= MAX_BATCH_COUNT:
        raise InvalidArgumentError(
            f"Count must be between {MIN_BATCH_COUNT} and {MAX_BATCH_COUNT}"
        )
    kind = KeyType.parse(key_type)
    return [generate_key(kind, length) for _ in range(count)]
