from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote

import httpx
import structlog

from pluggy_sdk.auth.tokens import create_connect_token, exchange_credentials
from pluggy_sdk.core.codec import decode, encode
from pluggy_sdk.core.config import ClientConfig
from pluggy_sdk.core.constants import WebhookEvent
from pluggy_sdk.core.exceptions import OperationFailedError, TransportError
from pluggy_sdk.core.request import authenticated_request
from pluggy_sdk.core.types import BearerToken, ConnectToken, PageResponse
from pluggy_sdk.resources.category import Category
from pluggy_sdk.resources.connector import Connector
from pluggy_sdk.resources.item import CreateItemRequest, Item, UpdateItemRequest
from pluggy_sdk.resources.validation import ValidationResult
from pluggy_sdk.resources.webhook import (
    CreateWebhookRequest,
    UpdateWebhookRequest,
    Webhook,
)
from pluggy_sdk.utils.logging import configure_logging

logger = structlog.get_logger(__name__)


class PluggyClient:
    """Async client for the Pluggy API.

    The client holds only immutable configuration and one pooled
    :class:`httpx.AsyncClient`, so a single instance can serve many concurrent
    callers.  API keys are *not* cached: obtain one with
    :meth:`create_api_key` and pass it to every resource operation, requesting
    a fresh key when the server starts rejecting it.

    Usage::

        async with PluggyClient.from_env() as client:
            api_key = await client.create_api_key()
            connectors = await client.get_connectors(api_key, sandbox=True)

    Errors are raised, never swallowed:
    :class:`~pluggy_sdk.core.exceptions.TransportError`,
    :class:`~pluggy_sdk.core.exceptions.DecodeError`,
    :class:`~pluggy_sdk.core.exceptions.MissingFieldError` and
    :class:`~pluggy_sdk.core.exceptions.OperationFailedError`.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._client: httpx.AsyncClient | None = http_client
        self._owns_client = http_client is None

    @classmethod
    def from_env(cls, *, setup_logging: bool = False) -> PluggyClient:
        """Build a client from ``PLUGGY_*`` environment variables.

        Args:
            setup_logging: Also call
                :func:`~pluggy_sdk.utils.logging.configure_logging` with the
                configured ``log_level`` (``PLUGGY_LOG_LEVEL``), rendering to
                the console.  Libraries embedding the SDK should leave this off
                and configure logging themselves.
        """
        config = ClientConfig.from_env()
        if setup_logging:
            configure_logging(config.log_level, json=False)
        return cls(config)

    @classmethod
    async def from_env_with_api_key(
        cls, *, setup_logging: bool = False
    ) -> tuple[PluggyClient, BearerToken]:
        """Build and connect a client from the environment and fetch an API key.

        The caller owns the returned client and must :meth:`close` it.
        """
        client = cls.from_env(setup_logging=setup_logging)
        await client.connect()
        try:
            api_key = await client.create_api_key()
        except BaseException:
            await client.close()
            raise
        return client, api_key

    @property
    def config(self) -> ClientConfig:
        """Return the client configuration."""
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    async def connect(self) -> None:
        """Open the underlying HTTP client (no-op if one is already attached)."""
        if self._client is not None:
            return
        self._client = httpx.AsyncClient(timeout=self._config.timeout)
        self._owns_client = True
        logger.info("pluggy.connected", base_url=self._config.base_url)

    async def close(self) -> None:
        """Close the underlying HTTP client if the SDK opened it."""
        if self._client is None:
            return
        if self._owns_client:
            await self._client.aclose()
        self._client = None
        logger.info("pluggy.closed", base_url=self._config.base_url)

    def _ensure_connected(self) -> httpx.AsyncClient:
        """Return the HTTP client, raising if not connected."""
        if self._client is None:
            raise RuntimeError(
                f"{type(self).__name__} is not connected. Call connect() first."
            )
        return self._client

    async def __aenter__(self) -> PluggyClient:
        await self.connect()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()

    # ------------------------------------------------------------------ #
    # Tokens
    # ------------------------------------------------------------------ #

    async def create_api_key(self) -> BearerToken:
        """Exchange the configured credentials for an API key (``POST /auth``)."""
        return await exchange_credentials(
            self._ensure_connected(), self.base_url, self._config.credentials
        )

    async def create_connect_token(self, api_key: BearerToken) -> ConnectToken:
        """Create a connect token for embedded item-creation flows."""
        return await create_connect_token(
            self._ensure_connected(), self.base_url, api_key
        )

    # ------------------------------------------------------------------ #
    # Connectors
    # ------------------------------------------------------------------ #

    async def get_connectors(
        self, api_key: BearerToken, sandbox: bool = False
    ) -> list[Connector]:
        """List connectors, including sandbox-only ones when *sandbox* is true.

        Only the first page's ``results`` are returned.
        """
        resp = await self._request(
            api_key, "GET", "/connectors", params={"sandbox": sandbox}
        )
        return decode(PageResponse[Connector], resp.content).results

    async def get_connector(
        self, api_key: BearerToken, connector_id: int | str
    ) -> Connector:
        resp = await self._request(
            api_key, "GET", f"/connectors/{_segment(connector_id)}"
        )
        return decode(Connector, resp.content)

    async def validate_parameters(
        self,
        api_key: BearerToken,
        connector_id: int | str,
        parameters: dict[str, str],
    ) -> ValidationResult:
        """Dry-run *parameters* against a connector before creating an item.

        Invalid parameters are reported in :attr:`ValidationResult.errors`,
        not raised.
        """
        resp = await self._request(
            api_key,
            "POST",
            f"/connectors/{_segment(connector_id)}/validate",
            json=dict(parameters),
        )
        return decode(ValidationResult, resp.content)

    # ------------------------------------------------------------------ #
    # Items
    # ------------------------------------------------------------------ #

    async def get_item(self, api_key: BearerToken, item_id: str) -> Item:
        resp = await self._request(api_key, "GET", f"/items/{_segment(item_id)}")
        return decode(Item, resp.content)

    async def create_item(
        self,
        api_key: BearerToken,
        connector_id: int,
        parameters: dict[str, str],
        *,
        webhook_url: str | None = None,
        client_user_id: str | None = None,
    ) -> Item:
        """Connect an end user's account to *connector_id*.

        Args:
            api_key: API key from :meth:`create_api_key`.
            connector_id: Connector to create the item under.
            parameters: Credential values keyed by
                :attr:`ConnectorCredential.name`.
            webhook_url: Per-item notification URL.
            client_user_id: Caller-side identifier of the end user.

        Raises:
            OperationFailedError: The API answered with a non-2xx status.
        """
        body = CreateItemRequest(
            connector_id=connector_id,
            parameters=parameters,
            webhook_url=webhook_url,
            client_user_id=client_user_id,
        )
        resp = await self._request(api_key, "POST", "/items", json=encode(body))
        _ensure_success(resp)
        return decode(Item, resp.content)

    async def update_item(
        self,
        api_key: BearerToken,
        item_id: str,
        parameters: dict[str, str],
        *,
        webhook_url: str | None = None,
        client_user_id: str | None = None,
    ) -> Item:
        """Send new credentials for an item and trigger a fresh execution."""
        body = UpdateItemRequest(
            parameters=parameters,
            webhook_url=webhook_url,
            client_user_id=client_user_id,
        )
        resp = await self._request(
            api_key, "PATCH", f"/items/{_segment(item_id)}", json=encode(body)
        )
        _ensure_success(resp)
        return decode(Item, resp.content)

    async def update_item_mfa(
        self,
        api_key: BearerToken,
        item_id: str,
        parameters: dict[str, str],
    ) -> Item:
        """Answer an MFA challenge for an item waiting on user input."""
        resp = await self._request(
            api_key,
            "PATCH",
            f"/items/{_segment(item_id)}/mfa",
            json=dict(parameters),
        )
        _ensure_success(resp)
        return decode(Item, resp.content)

    async def delete_item(self, api_key: BearerToken, item_id: str) -> None:
        """Delete an item.

        Raises:
            OperationFailedError: The status is anything other than 200.
        """
        resp = await self._request(
            api_key, "DELETE", f"/items/{_segment(item_id)}"
        )
        _ensure_status(resp, httpx.codes.OK)

    # ------------------------------------------------------------------ #
    # Categories
    # ------------------------------------------------------------------ #

    async def get_categories(self, api_key: BearerToken) -> list[Category]:
        resp = await self._request(api_key, "GET", "/categories")
        return decode(PageResponse[Category], resp.content).results

    async def get_category(self, api_key: BearerToken, category_id: str) -> Category:
        resp = await self._request(
            api_key, "GET", f"/categories/{_segment(category_id)}"
        )
        return decode(Category, resp.content)

    # ------------------------------------------------------------------ #
    # Webhooks
    # ------------------------------------------------------------------ #

    async def get_webhooks(self, api_key: BearerToken) -> list[Webhook]:
        resp = await self._request(api_key, "GET", "/webhooks")
        return decode(PageResponse[Webhook], resp.content).results

    async def get_webhook(self, api_key: BearerToken, webhook_id: str) -> Webhook:
        resp = await self._request(
            api_key, "GET", f"/webhooks/{_segment(webhook_id)}"
        )
        return decode(Webhook, resp.content)

    async def create_webhook(
        self,
        api_key: BearerToken,
        url: str,
        event: WebhookEvent,
        headers: dict[str, str] | None = None,
    ) -> Webhook:
        """Register *url* to be notified of *event*.

        Args:
            headers: Extra headers Pluggy will send with each notification.
        """
        body = CreateWebhookRequest(event=event, url=url, headers=headers)
        resp = await self._request(api_key, "POST", "/webhooks", json=encode(body))
        _ensure_success(resp)
        return decode(Webhook, resp.content)

    async def update_webhook(
        self,
        api_key: BearerToken,
        webhook_id: str,
        *,
        url: str | None = None,
        event: WebhookEvent | None = None,
        headers: dict[str, str] | None = None,
        enabled: bool | None = None,
    ) -> Webhook:
        """Change a webhook; only the arguments that are given are sent."""
        body = UpdateWebhookRequest(
            event=event, url=url, headers=headers, enabled=enabled
        )
        resp = await self._request(
            api_key, "PATCH", f"/webhooks/{_segment(webhook_id)}", json=encode(body)
        )
        _ensure_success(resp)
        return decode(Webhook, resp.content)

    async def delete_webhook(self, api_key: BearerToken, webhook_id: str) -> None:
        """Delete a webhook.

        Raises:
            OperationFailedError: The status is anything other than 200.
        """
        resp = await self._request(
            api_key, "DELETE", f"/webhooks/{_segment(webhook_id)}"
        )
        _ensure_status(resp, httpx.codes.OK)

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    def _url(self, path: str, params: dict[str, Any] | None = None) -> str:
        url = f"{self.base_url}{path}"
        if params:
            return str(httpx.URL(url, params=params))
        return url

    async def _request(
        self,
        api_key: BearerToken,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        client = self._ensure_connected()
        spec = authenticated_request(method, self._url(path, params), api_key)
        logger.debug("pluggy.request", method=spec.method, path=path)
        try:
            resp = await client.send(spec.build(client, json=json))
        except httpx.HTTPError as exc:
            raise TransportError(f"{spec.method} {path} failed: {exc}") from exc
        logger.debug(
            "pluggy.response",
            method=spec.method,
            path=path,
            status=resp.status_code,
        )
        return resp


def _segment(value: int | str) -> str:
    """Percent-encode one path segment so an id cannot add segments or a query."""
    return quote(str(value), safe="")


def _ensure_success(resp: httpx.Response) -> None:
    if not resp.is_success:
        raise _operation_failed(resp)


def _ensure_status(resp: httpx.Response, expected: int) -> None:
    if resp.status_code != expected:
        raise _operation_failed(resp)


def _operation_failed(resp: httpx.Response) -> OperationFailedError:
    request = resp.request
    message = f"{request.method} {request.url.path} returned {resp.status_code}"
    server_message = _server_message(resp)
    if server_message:
        message = f"{message}: {server_message}"
    return OperationFailedError(
        message,
        code="OPERATION_FAILED",
        details={"body": resp.text} if resp.content else {},
        status_code=resp.status_code,
    )


def _server_message(resp: httpx.Response) -> str | None:
    try:
        data = json.loads(resp.content)
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return str(data["message"])
    return None
