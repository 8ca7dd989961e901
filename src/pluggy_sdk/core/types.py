from __future__ import annotations

from typing import Generic, NewType, TypeVar

from pydantic import BaseModel

from pluggy_sdk.resources.base import ResourceModel

BearerToken = NewType("BearerToken", str)
"""Short-lived API key returned by ``POST /auth``; sent as ``X-API-KEY``."""

ConnectToken = NewType("ConnectToken", str)
"""Narrow-scoped token returned by ``POST /connect_token`` for embedded flows."""

T = TypeVar("T", bound=BaseModel)


class PageResponse(ResourceModel, Generic[T]):
    """Envelope returned by every list endpoint.

    Only ``results`` is surfaced by :class:`~pluggy_sdk.core.client.PluggyClient`;
    the pagination counters are decoded so a malformed envelope still fails.
    """

    results: list[T]
    page: int
    total_pages: int
    total: int
