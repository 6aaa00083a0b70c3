"""Defaults used by the key generation endpoints.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class KeySettings(BaseSettings):
    """Default parameters applied when an HTTP caller omits them.

    The generator functions themselves take explicit arguments and never read
    these values.
    """

    DEFAULT_KEY_LENGTH: int = Field(ge=1, default=32)
    DEFAULT_HEX_LENGTH: int = Field(ge=1, default=64)
    DEFAULT_BYTE_LENGTH: int = Field(ge=1, default=32)
    DEFAULT_API_KEY_PREFIX: str = Field(min_length=1, default="api")
    DEFAULT_BATCH_COUNT: int = Field(ge=1, le=100, default=5)
