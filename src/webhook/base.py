"""Base class for Saleor async-event webhook handlers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from src.config import EventNotificationConfig
from src.messaging.whatsapp import WhatsAppClient
from src.models import SaleorEvent, SaleorModel
from src.webhook.models import PaymentNotification, ShipmentNotification, WebhookResponse

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=SaleorModel)
Notification = PaymentNotification | ShipmentNotification


class SaleorWebhookHandler(ABC, Generic[PayloadT]):
    """Turns one verified Saleor event payload into at most one WhatsApp message.

    Subclasses declare the event, its subscription query and payload model,
    and implement extract(). Any exception raised while handling becomes a
    500 response; everything else, including delivery failures, is a 200.
    """

    name: ClassVar[str]
    event: ClassVar[SaleorEvent]
    path: ClassVar[str]
    subscription_query: ClassVar[str]
    payload_model: ClassVar[type[SaleorModel]]

    def __init__(self, config: EventNotificationConfig, client: WhatsAppClient) -> None:
        self._config = config
        self._client = client

    @abstractmethod
    def extract(self, payload: PayloadT) -> Notification | None:
        """Return the notification to send, or None when there is nothing to do."""
        ...

    def parse(self, data: bytes | str | dict[str, Any]) -> PayloadT:
        if isinstance(data, (bytes, str)):
            return self.payload_model.model_validate_json(data)  # type: ignore[return-value]
        return self.payload_model.model_validate(data)  # type: ignore[return-value]

    async def handle(self, data: bytes | str | dict[str, Any]) -> WebhookResponse:
        logger.info("%s webhook received", self.event.value)
        try:
            payload = self.parse(data)
            notification = self.extract(payload)
            if notification is None:
                return WebhookResponse.handled()
            delivery = await self._client.send_template(
                to=notification.phone,
                template_name=self._config.template_name,
                language_code=self._config.language_code,
                parameters=notification.parameters(),
            )
        except Exception as exc:
            logger.exception("Error handling %s webhook", self.event.value)
            return WebhookResponse.error(exc)

        logger.info("%s event handled (%s)", self.event.value, delivery.value)
        return WebhookResponse.handled(delivery)

    def manifest_entry(self, base_url: str) -> dict[str, object]:
        """Webhook declaration for the app manifest."""
        return {
            "name": self.name,
            "asyncEvents": [self.event.value],
            "query": self.subscription_query,
            "targetUrl": f"{base_url.rstrip('/')}{self.path}",
            "isActive": True,
        }
