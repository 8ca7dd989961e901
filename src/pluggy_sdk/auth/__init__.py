"""Credentials and token exchange for the Pluggy API."""

from __future__ import annotations

from pluggy_sdk.auth.credentials import ClientCredentials
from pluggy_sdk.auth.tokens import create_connect_token, exchange_credentials

__all__ = [
    "ClientCredentials",
    "exchange_credentials",
    "create_connect_token",
]
