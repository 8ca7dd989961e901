from __future__ import annotations

import os
from typing import Any, Literal

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from pluggy_sdk.auth.credentials import ClientCredentials
from pluggy_sdk.core.constants import DEFAULT_BASE_URL
from pluggy_sdk.core.exceptions import ConfigurationError

_TRUTHY = {"1", "true", "yes", "on"}


class ClientConfig(BaseModel):
    """Immutable configuration captured when a client is constructed.

    Attributes:
        credentials: Client id/secret exchanged for an API key.
        base_url: API root; the production endpoint by default.
        timeout: Transport-level timeout in seconds for every request.
        log_level: Level used by :func:`pluggy_sdk.utils.logging.configure_logging`.
    """

    model_config = ConfigDict(frozen=True)

    credentials: ClientCredentials
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=30.0, gt=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Create a :class:`ClientConfig` from ``PLUGGY_*`` environment variables.

        Required:

        * ``PLUGGY_CLIENT_ID``
        * ``PLUGGY_CLIENT_SECRET``

        Optional (left at their defaults when unset or empty):

        * ``PLUGGY_NON_EXPIRING`` → ``credentials.non_expiring`` (``1``/``true``/``yes``/``on``)
        * ``PLUGGY_BASE_URL`` → ``base_url``
        * ``PLUGGY_TIMEOUT`` → ``timeout`` (seconds, float)
        * ``PLUGGY_LOG_LEVEL`` → ``log_level``

        Raises:
            ConfigurationError: A required variable is missing or a value
                cannot be parsed.
        """
        client_id = os.environ.get("PLUGGY_CLIENT_ID")
        client_secret = os.environ.get("PLUGGY_CLIENT_SECRET")
        missing = [
            name
            for name, value in (
                ("PLUGGY_CLIENT_ID", client_id),
                ("PLUGGY_CLIENT_SECRET", client_secret),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variable(s): {', '.join(missing)}",
                details={"missing": missing},
            )

        non_expiring: bool | None = None
        non_expiring_str = os.environ.get("PLUGGY_NON_EXPIRING")
        if non_expiring_str:
            non_expiring = non_expiring_str.strip().lower() in _TRUTHY

        kwargs: dict[str, Any] = {
            "credentials": ClientCredentials(
                client_id=client_id,
                client_secret=client_secret,
                non_expiring=non_expiring,
            )
        }

        base_url = os.environ.get("PLUGGY_BASE_URL")
        if base_url:
            kwargs["base_url"] = base_url

        timeout_str = os.environ.get("PLUGGY_TIMEOUT")
        if timeout_str:
            try:
                kwargs["timeout"] = float(timeout_str)
            except ValueError as exc:
                raise ConfigurationError(
                    f"PLUGGY_TIMEOUT must be a number, got {timeout_str!r}"
                ) from exc

        log_level = os.environ.get("PLUGGY_LOG_LEVEL")
        if log_level:
            kwargs["log_level"] = log_level.upper()

        try:
            return cls(**kwargs)
        except pydantic.ValidationError as exc:
            raise ConfigurationError(
                f"Invalid Pluggy configuration: {exc.error_count()} error(s)",
                details={"errors": exc.errors(include_url=False)},
            ) from exc
