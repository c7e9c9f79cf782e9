"""Saleor app manifest describing the webhook subscriptions."""

from __future__ import annotations

from collections.abc import Sequence

from src.webhook.base import SaleorWebhookHandler

APP_ID = "saleor.app.whatsapp-notifier"
APP_NAME = "WhatsApp Notifier"
APP_VERSION = "0.1.0"
APP_PERMISSIONS = ["MANAGE_CHECKOUTS", "MANAGE_ORDERS"]


def build_manifest(
    base_url: str,
    handlers: Sequence[SaleorWebhookHandler],
) -> dict[str, object]:
    base = base_url.rstrip("/")
    return {
        "id": APP_ID,
        "name": APP_NAME,
        "version": APP_VERSION,
        "appUrl": base,
        "tokenTargetUrl": f"{base}/api/register",
        "permissions": list(APP_PERMISSIONS),
        "webhooks": [handler.manifest_entry(base) for handler in handlers],
    }
