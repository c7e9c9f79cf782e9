"""Shared test fixtures for saleor-whatsapp-notifier."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.config import AppConfig, EventNotificationConfig, WhatsAppConfig
from src.messaging.whatsapp import WhatsAppClient
from src.models import DeliveryStatus

TEST_TOKEN = "test_access_token"
TEST_PHONE_NUMBER_ID = "123456"


@pytest.fixture
def whatsapp_config() -> WhatsAppConfig:
    return WhatsAppConfig(access_token=TEST_TOKEN, phone_number_id=TEST_PHONE_NUMBER_ID)


@pytest.fixture
def app_config(whatsapp_config: WhatsAppConfig) -> AppConfig:
    return AppConfig(whatsapp=whatsapp_config)


@pytest.fixture
def mock_client() -> AsyncMock:
    client = AsyncMock(spec=WhatsAppClient)
    client.send_template.return_value = DeliveryStatus.SENT
    return client


def mock_httpx_client(mock_client_cls: MagicMock, response: Any) -> AsyncMock:
    """Wire a patched httpx.AsyncClient class to return ``response`` from post()."""
    mock_http = AsyncMock()
    if isinstance(response, BaseException):
        mock_http.post.side_effect = response
    else:
        mock_http.post.return_value = response
    mock_http.__aenter__ = AsyncMock(return_value=mock_http)
    mock_http.__aexit__ = AsyncMock(return_value=False)
    mock_client_cls.return_value = mock_http
    return mock_http


# --- Factory functions for test data ---


def make_event_config(**kwargs: Any) -> EventNotificationConfig:
    defaults: dict[str, Any] = {
        "template_name": "test_template",
        "default_greeting": "querido cliente",
    }
    defaults.update(kwargs)
    return EventNotificationConfig(**defaults)


def make_checkout_payload(
    phone: str | None = "+5215550001111",
    first_name: str | None = "maria",
    amount: float | None = 12.5,
    currency: str = "MXN",
) -> dict[str, Any]:
    """Factory for a CHECKOUT_FULLY_PAID subscription payload."""
    return {
        "checkout": {
            "totalPrice": {"gross": {"currency": currency, "amount": amount}},
            "shippingAddress": {
                "phone": phone,
                "firstName": first_name,
                "lastName": "Lopez",
            },
        },
    }


def make_order_payload(**kwargs: Any) -> dict[str, Any]:
    """Factory for an ORDER_FULFILLED subscription payload."""
    order: dict[str, Any] = {
        "id": "T3JkZXI6MQ==",
        "number": "1042",
        "shippingAddress": {
            "phone": "+5215550002222",
            "firstName": "juan",
            "lastName": "Perez",
        },
        "fulfillments": [
            {"trackingNumber": "TRK-1", "metadata": []},
        ],
        "metadata": [],
    }
    order.update(kwargs)
    return {"__typename": "OrderFulfilled", "order": order}


def metadata(**items: str) -> list[dict[str, str]]:
    return [{"key": key, "value": value} for key, value in items.items()]
