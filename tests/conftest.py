"""Shared test fixtures."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from pluggy_sdk.auth import ClientCredentials
from pluggy_sdk.core.config import ClientConfig

BASE_URL = "https://api.example.com"

PayloadFactory = Callable[..., dict[str, Any]]


def _connector(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": 2,
        "name": "Pluggy Bank",
        "institutionUrl": "https://pluggy.ai",
        "imageUrl": "https://cdn.pluggy.ai/assets/connector-icons/sandbox.svg",
        "primaryColor": "ef294b",
        "type": "PERSONAL_BANK",
        "country": "BR",
        "credentials": [
            {
                "label": "User",
                "name": "user",
                "type": "text",
                "placeholder": "user-ok",
                "validation": "^user-.{2,50}$",
                "validationMessage": "O user deve iniciar com 'user-'",
            },
            {
                "label": "Password",
                "name": "password",
                "type": "password",
                "placeholder": "password-ok",
            },
        ],
        "hasMFA": False,
        "oauth": False,
        "health": {"status": "ONLINE", "stage": None},
        "products": ["ACCOUNTS", "TRANSACTIONS", "IDENTITY"],
        "createdAt": "2020-09-07T00:08:06.588Z",
    }
    data.update(overrides)
    return data


def _item(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": "8b1f6cbb-8c7d-4a19-9d5f-4d5c1e8a7b21",
        "connector": _connector(),
        "status": "UPDATED",
        "executionStatus": "SUCCESS",
        "createdAt": "2023-03-01T12:00:00.000Z",
        "updatedAt": "2023-03-01T12:05:00.000Z",
        "lastUpdatedAt": "2023-03-01T12:05:00.000Z",
        "webhookUrl": None,
        "clientUserId": "user-42",
        "consecutiveFailedLoginAttempts": 0,
    }
    data.update(overrides)
    return data


def _webhook(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": "d6a4e5b0-3c2f-4e59-8f0a-1d6e2c7a9b10",
        "url": "https://hooks.example.com/pluggy",
        "event": "item/updated",
        "createdAt": "2023-03-01T12:00:00.000Z",
        "updatedAt": "2023-03-01T12:00:00.000Z",
        "disabledAt": None,
    }
    data.update(overrides)
    return data


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(
        credentials=ClientCredentials(client_id="cid", client_secret="csecret"),
        base_url=BASE_URL,
    )


@pytest.fixture
def connector_json() -> PayloadFactory:
    """Factory for a sandbox connector payload as returned by ``/connectors``."""
    return _connector


@pytest.fixture
def item_json() -> PayloadFactory:
    return _item


@pytest.fixture
def webhook_json() -> PayloadFactory:
    return _webhook
