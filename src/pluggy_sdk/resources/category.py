"""Category taxonomy nodes."""

from __future__ import annotations

from pluggy_sdk.resources.base import ResourceModel


class Category(ResourceModel):
    id: str
    description: str
    parent_id: str | None = None
    parent_description: str | None = None
