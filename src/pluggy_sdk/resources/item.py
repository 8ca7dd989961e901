"""Item resources — an end user's connection to a connector."""

from __future__ import annotations

from datetime import datetime

from pluggy_sdk.core.constants import ExecutionStatus, ItemStatus
from pluggy_sdk.resources.base import ResourceModel
from pluggy_sdk.resources.connector import Connector, ConnectorCredential
from pluggy_sdk.resources.execution import ExecutionErrorResult


class ItemProductState(ResourceModel):
    is_updated: bool
    last_updated_at: datetime | None = None


class ItemProductsStatusDetail(ResourceModel):
    accounts: ItemProductState | None = None
    credit_cards: ItemProductState | None = None
    transactions: ItemProductState | None = None
    investments: ItemProductState | None = None
    identity: ItemProductState | None = None
    payment_data: ItemProductState | None = None


class UserAction(ResourceModel):
    """Instructions for a step the end user must complete outside Pluggy."""

    instructions: str
    attributes: dict[str, str] | None = None
    expires_at: datetime | None = None


class Item(ResourceModel):
    """One end user's linked account under a :class:`Connector`.

    The item is updated server-side through the phases of
    :class:`~pluggy_sdk.core.constants.ExecutionStatus`; the SDK only observes
    it.  ``user_action`` and ``parameter`` exist only while the item waits on
    the user, and ``error`` only after a failed execution.
    """

    id: str
    connector: Connector
    status: ItemStatus
    status_detail: ItemProductsStatusDetail | None = None
    error: ExecutionErrorResult | None = None
    execution_status: ExecutionStatus
    created_at: datetime
    updated_at: datetime
    last_updated_at: datetime | None = None
    parameter: ConnectorCredential | None = None
    webhook_url: str | None = None
    client_user_id: str | None = None
    user_action: UserAction | None = None
    consecutive_failed_login_attempts: int


class CreateItemRequest(ResourceModel):
    connector_id: int
    parameters: dict[str, str]
    webhook_url: str | None = None
    client_user_id: str | None = None


class UpdateItemRequest(ResourceModel):
    """Body of ``PATCH /items/{id}``; never carries the full item."""

    parameters: dict[str, str]
    webhook_url: str | None = None
    client_user_id: str | None = None
