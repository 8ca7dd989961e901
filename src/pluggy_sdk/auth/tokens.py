"""API key exchange and connect token creation."""

from __future__ import annotations

import json
from typing import Any

import httpx
import structlog

from pluggy_sdk.auth.credentials import ClientCredentials
from pluggy_sdk.core.codec import encode
from pluggy_sdk.core.exceptions import DecodeError, MissingFieldError, TransportError
from pluggy_sdk.core.request import (
    RequestSpec,
    authenticated_request,
    unauthenticated_request,
)
from pluggy_sdk.core.types import BearerToken, ConnectToken

logger = structlog.get_logger(__name__)


async def exchange_credentials(
    http: httpx.AsyncClient,
    base_url: str,
    credentials: ClientCredentials,
) -> BearerToken:
    """Exchange client credentials for an API key via ``POST /auth``.

    No API key header is sent on this call.

    Raises:
        TransportError: The HTTP call failed.
        DecodeError: The body is not a JSON object.
        MissingFieldError: The body has no string ``apiKey``.
    """
    spec = unauthenticated_request("POST", f"{base_url}/auth")
    status, body = await _send(http, spec, encode(credentials))
    return BearerToken(_extract_str(body, "apiKey", status))


async def create_connect_token(
    http: httpx.AsyncClient,
    base_url: str,
    api_key: str,
) -> ConnectToken:
    """Mint a connect token via ``POST /connect_token`` (empty body).

    Raises:
        TransportError: The HTTP call failed.
        DecodeError: The body is not a JSON object.
        MissingFieldError: The body has no string ``accessToken``.
    """
    spec = authenticated_request("POST", f"{base_url}/connect_token", api_key)
    status, body = await _send(http, spec, None)
    return ConnectToken(_extract_str(body, "accessToken", status))


async def _send(
    http: httpx.AsyncClient, spec: RequestSpec, payload: Any
) -> tuple[int, dict[str, Any]]:
    try:
        resp = await http.send(spec.build(http, json=payload))
    except httpx.HTTPError as exc:
        raise TransportError(f"{spec.method} {spec.url} failed: {exc}") from exc
    logger.debug(
        "pluggy.response",
        method=spec.method,
        path=resp.request.url.path,
        status=resp.status_code,
    )
    try:
        data = json.loads(resp.content)
    except ValueError as exc:
        raise DecodeError(
            f"Response to {spec.method} {resp.request.url.path} is not valid JSON",
            code="DECODE_ERROR",
            status_code=resp.status_code,
        ) from exc
    if not isinstance(data, dict):
        raise DecodeError(
            f"Expected a JSON object, got {type(data).__name__}",
            code="DECODE_ERROR",
            status_code=resp.status_code,
        )
    return resp.status_code, data


def _extract_str(body: dict[str, Any], field: str, status: int) -> str:
    value = body.get(field)
    if not isinstance(value, str):
        message = body.get("message")
        raise MissingFieldError(
            field,
            status_code=status,
            server_message=message if isinstance(message, str) else None,
        )
    return value
