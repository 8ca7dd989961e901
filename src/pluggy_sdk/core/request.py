"""Authenticated request construction for the Pluggy API."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

from pluggy_sdk.core.constants import API_KEY_HEADER

JSON_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class RequestSpec(BaseModel):
    """Method, URL and headers of a request, before a body is attached."""

    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    headers: dict[str, str]

    def build(self, client: httpx.AsyncClient, json: Any = None) -> httpx.Request:
        """Turn this spec into an :class:`httpx.Request` owned by *client*."""
        return client.build_request(
            self.method, self.url, headers=self.headers, json=json
        )


def unauthenticated_request(method: str, url: str) -> RequestSpec:
    return RequestSpec(method=method.upper(), url=url, headers=dict(JSON_HEADERS))


def authenticated_request(method: str, url: str, api_key: str) -> RequestSpec:
    """Build the request spec for an authenticated call.

    The API key is attached verbatim (an empty string included); nothing is
    validated here and no I/O is performed.

    Args:
        method: HTTP method, case-insensitive.
        url: Absolute URL with query parameters already applied.
        api_key: Bearer token obtained from ``POST /auth``.
    """
    headers = dict(JSON_HEADERS)
    headers[API_KEY_HEADER] = api_key
    return RequestSpec(method=method.upper(), url=url, headers=headers)
