from __future__ import annotations

from pydantic import Field

from pluggy_sdk.resources.base import ResourceModel


class ClientCredentials(ResourceModel):
    """Long-lived client credentials, exchanged for an API key at ``/auth``.

    Serializes to ``{"clientId", "clientSecret", "nonExpiring"}``; secrets
    are kept out of ``repr`` so they never reach log output.
    """

    client_id: str = Field(repr=False)
    client_secret: str = Field(repr=False)
    non_expiring: bool | None = None
