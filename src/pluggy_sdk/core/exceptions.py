from __future__ import annotations

from typing import Any


class PluggyError(Exception):
    """Base exception for all Pluggy SDK errors.

    Attributes:
        code: Optional machine-readable error code.
        details: Arbitrary key/value context about the error.
        status_code: HTTP status code when the error originates from an API
            response (``None`` when not applicable).
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}
        self.status_code = status_code


class ConfigurationError(PluggyError): ...


class TransportError(PluggyError):
    """The underlying HTTP call failed (DNS, TLS, connection reset, timeout).

    The originating :class:`httpx.HTTPError` is chained as ``__cause__``.
    """


class DecodeError(PluggyError):
    """The response body is not valid JSON or does not match the resource shape.

    When the failure comes from schema validation, the individual pydantic
    errors are available under ``details["errors"]``.
    """


class MissingFieldError(PluggyError):
    """A required top-level field is absent from a well-formed JSON response."""

    def __init__(
        self,
        field: str,
        *,
        status_code: int | None = None,
        server_message: str | None = None,
    ) -> None:
        message = f"Response has no {field!r} field"
        if status_code is not None:
            message = f"{message} (HTTP {status_code})"
        if server_message:
            message = f"{message}: {server_message}"
        details: dict[str, Any] = {"field": field}
        if server_message:
            details["message"] = server_message
        super().__init__(
            message,
            code="MISSING_FIELD",
            details=details,
            status_code=status_code,
        )
        self.field = field


class OperationFailedError(PluggyError):
    """A mutating operation returned a status other than the expected success."""
