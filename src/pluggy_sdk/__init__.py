"""Pluggy Python SDK — typed async client for the Pluggy open finance API."""

from pluggy_sdk.__version__ import __version__

from pluggy_sdk.auth import ClientCredentials
from pluggy_sdk.core.client import PluggyClient
from pluggy_sdk.core.config import ClientConfig
from pluggy_sdk.core.constants import (
    ConnectorStage,
    ConnectorStatus,
    ConnectorType,
    Country,
    CredentialType,
    ExecutionErrorCode,
    ExecutionStatus,
    ItemStatus,
    ProductType,
    WebhookEvent,
)
from pluggy_sdk.core.exceptions import (
    ConfigurationError,
    DecodeError,
    MissingFieldError,
    OperationFailedError,
    PluggyError,
    TransportError,
)
from pluggy_sdk.core.request import RequestSpec, authenticated_request
from pluggy_sdk.core.types import BearerToken, ConnectToken, PageResponse
from pluggy_sdk.resources import (
    Category,
    Connector,
    ConnectorCredential,
    ConnectorHealth,
    CredentialSelectOption,
    ExecutionErrorResult,
    Item,
    ItemProductsStatusDetail,
    ItemProductState,
    UserAction,
    ValidationError,
    ValidationResult,
    Webhook,
)

__all__ = [
    "__version__",
    "PluggyClient",
    "ClientConfig",
    "ClientCredentials",
    "BearerToken",
    "ConnectToken",
    "PageResponse",
    "RequestSpec",
    "authenticated_request",
    "ConnectorStage",
    "ConnectorStatus",
    "ConnectorType",
    "Country",
    "CredentialType",
    "ExecutionErrorCode",
    "ExecutionStatus",
    "ItemStatus",
    "ProductType",
    "WebhookEvent",
    "PluggyError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "MissingFieldError",
    "OperationFailedError",
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
    "ValidationError",
    "ValidationResult",
    "Webhook",
]
