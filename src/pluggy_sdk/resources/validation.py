"""Dry-run credential validation results."""

from __future__ import annotations

from pluggy_sdk.resources.base import ResourceModel


class ValidationError(ResourceModel):
    code: str
    message: str
    parameter: str


class ValidationResult(ResourceModel):
    """Echo of the submitted parameters plus any per-parameter errors."""

    parameters: dict[str, str]
    errors: list[ValidationError]

    @property
    def is_valid(self) -> bool:
        return not self.errors
