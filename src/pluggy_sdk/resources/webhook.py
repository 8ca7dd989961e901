"""Webhook registrations."""

from __future__ import annotations

from datetime import datetime

from pluggy_sdk.core.constants import WebhookEvent
from pluggy_sdk.resources.base import ResourceModel


class Webhook(ResourceModel):
    id: str
    url: str
    event: WebhookEvent
    created_at: datetime
    updated_at: datetime
    disabled_at: datetime | None = None


class CreateWebhookRequest(ResourceModel):
    event: WebhookEvent
    url: str
    headers: dict[str, str] | None = None


class UpdateWebhookRequest(ResourceModel):
    """Partial update; only the fields that are set are sent."""

    event: WebhookEvent | None = None
    url: str | None = None
    headers: dict[str, str] | None = None
    enabled: bool | None = None
