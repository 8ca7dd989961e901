"""Connector resources — financial institution integrations."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from pluggy_sdk.core.constants import (
    ConnectorStage,
    ConnectorStatus,
    ConnectorType,
    Country,
    CredentialType,
    ProductType,
)
from pluggy_sdk.resources.base import ResourceModel


class CredentialSelectOption(ResourceModel):
    label: str
    value: str


class ConnectorCredential(ResourceModel):
    """Descriptor of one field the end user must fill in to connect.

    ``options`` is only sent for ``select`` credentials, and ``mfa`` marks
    fields that are requested in a second step.
    """

    label: str
    name: str
    credential_type: CredentialType | None = Field(default=None, alias="type")
    mfa: bool | None = None
    data: str | None = None
    assistive_text: str | None = None
    options: list[CredentialSelectOption] | None = None
    validation: str | None = None
    validation_message: str | None = None
    placeholder: str | None = None
    optional: bool | None = None
    instructions: str | None = None
    expires_at: datetime | None = None


class ConnectorHealth(ResourceModel):
    status: ConnectorStatus
    stage: ConnectorStage | None = None


class Connector(ResourceModel):
    """A financial institution integration supported by Pluggy.

    ``health``, ``oauth_url`` and ``reset_password_url`` are only present for
    connectors that expose them; they decode to ``None`` otherwise.
    """

    id: int
    name: str
    institution_url: str
    image_url: str
    primary_color: str
    connector_type: ConnectorType = Field(alias="type")
    country: Country
    credentials: list[ConnectorCredential]
    has_mfa: bool = Field(alias="hasMFA")
    oauth: bool | None = None
    oauth_url: str | None = None
    health: ConnectorHealth | None = None
    reset_password_url: str | None = None
    products: list[ProductType]
    created_at: datetime
