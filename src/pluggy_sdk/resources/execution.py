"""Execution error details attached to an item."""

from __future__ import annotations

from pluggy_sdk.core.constants import ExecutionErrorCode
from pluggy_sdk.resources.base import ResourceModel


class ExecutionErrorResult(ResourceModel):
    code: ExecutionErrorCode
    message: str
    provider_message: str | None = None
    attributes: dict[str, str] | None = None
