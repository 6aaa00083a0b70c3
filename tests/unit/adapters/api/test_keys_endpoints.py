"""Endpoint tests for /api/v1/keys."""

import base64
import re

import pytest

HEX = re.compile(r"[0-9a-f]+")
ALNUM = re.compile(r"[A-Za-z0-9]+")


@pytest.mark.asyncio
async def test_alphanumeric_default_length(async_client):
    response = await async_client.get("/api/v1/keys/alphanumeric")

    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "alphanumeric"
    assert body["length"] == 32
    assert len(body["key"]) == 32
    assert ALNUM.fullmatch(body["key"])


@pytest.mark.asyncio
async def test_hex_custom_length(async_client):
    response = await async_client.get("/api/v1/keys/hex", params={"length": 10})

    body = response.json()
    assert response.status_code == 200
    assert len(body["key"]) == 10
    assert HEX.fullmatch(body["key"])


@pytest.mark.asyncio
async def test_hex_default_is_64_characters(async_client):
    response = await async_client.get("/api/v1/keys/hex")
    assert len(response.json()["key"]) == 64


@pytest.mark.asyncio
async def test_base64_uses_bytes_parameter(async_client):
    response = await async_client.get("/api/v1/keys/base64", params={"bytes": 16})

    body = response.json()
    assert body["length"] == 16
    assert len(base64.b64decode(body["key"])) == 16


@pytest.mark.asyncio
async def test_url_safe_key(async_client):
    response = await async_client.get("/api/v1/keys/url-safe")

    key = response.json()["key"]
    assert len(key) == 43
    assert "=" not in key


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path,length",
    [
        ("/api/v1/keys/uuid", 32),
        ("/api/v1/keys/webhook-secret", 64),
    ],
)
async def test_fixed_size_hex_keys(async_client, path, length):
    response = await async_client.get(path)

    key = response.json()["key"]
    assert response.status_code == 200
    assert len(key) == length
    assert HEX.fullmatch(key)


@pytest.mark.asyncio
async def test_session_token(async_client):
    response = await async_client.get("/api/v1/keys/session-token")
    assert len(response.json()["key"]) == 43


@pytest.mark.asyncio
async def test_api_key_with_prefix(async_client):
    response = await async_client.get("/api/v1/keys/api-key", params={"prefix": "live", "length": 20})

    key = response.json()["key"]
    assert key.startswith("live_")
    assert len(key) == len("live_") + 20


@pytest.mark.asyncio
async def test_api_key_default_prefix(async_client):
    response = await async_client.get("/api/v1/keys/api-key")
    assert response.json()["key"].startswith("api_")


@pytest.mark.asyncio
async def test_batch_of_hex_keys(async_client):
    response = await async_client.get("/api/v1/keys/batch", params={"type": "hex", "length": 16, "count": 5})

    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "hex"
    assert body["count"] == 5
    assert len(body["keys"]) == 5
    assert all(len(k) == 16 and HEX.fullmatch(k) for k in body["keys"])


@pytest.mark.asyncio
@pytest.mark.parametrize("count", [0, 101])
async def test_batch_count_out_of_range_is_bad_request(async_client, count):
    response = await async_client.get("/api/v1/keys/batch", params={"type": "hex", "length": 16, "count": count})

    assert response.status_code == 400
    assert response.json() == {"detail": "Count must be between 1 and 100", "code": "invalid_argument"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path,params,detail",
    [
        ("/api/v1/keys/alphanumeric", {"length": 0}, "Length must be positive"),
        ("/api/v1/keys/hex", {"length": -4}, "Length must be positive"),
        ("/api/v1/keys/base64", {"bytes": 0}, "Byte length must be positive"),
        ("/api/v1/keys/url-safe", {"bytes": 0}, "Byte length must be positive"),
        ("/api/v1/keys/api-key", {"prefix": " "}, "Prefix cannot be null or empty"),
        ("/api/v1/keys/api-key", {"length": 0}, "Key length must be positive"),
    ],
)
async def test_invalid_parameters_are_bad_requests(async_client, path, params, detail):
    response = await async_client.get(path, params=params)

    assert response.status_code == 400
    assert response.json()["detail"] == detail


@pytest.mark.asyncio
async def test_non_integer_length_is_rejected_by_request_validation(async_client):
    response = await async_client.get("/api/v1/keys/hex", params={"length": "ten"})
    assert response.status_code == 422
