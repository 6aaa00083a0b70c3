from __future__ import annotations

"""Response models for the key generation endpoints."""

from typing import List

from pydantic import BaseModel


class KeyResponse(BaseModel):
    """A single generated key.

    ``length`` echoes the requested length parameter: characters for
    alphanumeric/hex/api-key, random bytes for base64/url-safe/session-token.
    """

    type: str
    key: str
    length: int


class BatchKeyResponse(BaseModel):
    """A batch of independently generated keys."""

    type: str
    count: int
    keys: List[str]
