"""Typed Pluggy API resources."""

from __future__ import annotations

from pluggy_sdk.resources.base import ResourceModel
from pluggy_sdk.resources.category import Category
from pluggy_sdk.resources.connector import (
    Connector,
    ConnectorCredential,
    ConnectorHealth,
    CredentialSelectOption,
)
from pluggy_sdk.resources.execution import ExecutionErrorResult
from pluggy_sdk.resources.item import (
    CreateItemRequest,
    Item,
    ItemProductsStatusDetail,
    ItemProductState,
    UpdateItemRequest,
    UserAction,
)
from pluggy_sdk.resources.validation import ValidationError, ValidationResult
from pluggy_sdk.resources.webhook import (
    CreateWebhookRequest,
    UpdateWebhookRequest,
    Webhook,
)

__all__ = [
    "ResourceModel",
    "Category",
    "Connector",
    "ConnectorCredential",
    "ConnectorHealth",
    "CredentialSelectOption",
    "ExecutionErrorResult",
    "Item",
    "ItemProductsStatusDetail",
    "ItemProductState",
    "UserAction",
    "CreateItemRequest",
    "UpdateItemRequest",
    "ValidationError",
    "ValidationResult",
    "Webhook",
    "CreateWebhookRequest",
    "UpdateWebhookRequest",
]
