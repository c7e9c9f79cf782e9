"""Inbound Saleor webhook checks run before a handler sees the payload.

- ``saleor-signature``: hex HMAC-SHA256 of the raw body, when a secret is set.
- ``saleor-event``: must name the route's event when present.
- ``saleor-api-url``: must match the configured Saleor instance when both
  are known.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from collections.abc import Mapping

from src.models import SaleorEvent
from src.webhook.models import WebhookResponse

logger = logging.getLogger(__name__)


class SaleorWebhookVerifier:
    """Validates Saleor webhook headers against the app configuration."""

    def __init__(
        self,
        secret: str | None = None,
        saleor_api_url: str | None = None,
    ) -> None:
        self._secret = secret
        self._saleor_api_url = saleor_api_url

    def verify_signature(self, headers: Mapping[str, str], body: bytes) -> bool:
        """Constant-time HMAC-SHA256 check; always passes without a secret."""
        if not self._secret:
            return True
        signature = headers.get("saleor-signature", "")
        if not signature:
            return False
        expected = hmac.new(self._secret.encode(), body, hashlib.sha256).hexdigest()
        return hmac.compare_digest(signature.lower(), expected)

    def verify_event(self, headers: Mapping[str, str], event: SaleorEvent) -> bool:
        received = headers.get("saleor-event")
        if received is None:
            return True
        return received.strip().lower() == event.header_value

    def verify_instance(self, headers: Mapping[str, str]) -> bool:
        received = headers.get("saleor-api-url")
        if not received or not self._saleor_api_url:
            return True
        return received.rstrip("/") == self._saleor_api_url.rstrip("/")

    def check(
        self,
        headers: Mapping[str, str],
        body: bytes,
        event: SaleorEvent,
    ) -> WebhookResponse | None:
        """Return a rejection response, or None when the request may proceed."""
        if not self.verify_signature(headers, body):
            logger.warning("Rejected %s webhook: invalid signature", event.value)
            return WebhookResponse(status_code=401, message="Invalid webhook signature")
        if not self.verify_event(headers, event):
            received = headers.get("saleor-event", "")
            logger.warning("Rejected %s webhook: saleor-event=%s", event.value, received)
            return WebhookResponse(status_code=400, message=f"Unexpected event: {received}")
        if not self.verify_instance(headers):
            logger.warning(
                "Rejected %s webhook from %s", event.value, headers.get("saleor-api-url"),
            )
            return WebhookResponse(status_code=403, message="Unknown Saleor instance")
        return None
