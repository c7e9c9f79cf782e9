"""Data models for the webhook handler pipelines."""

from __future__ import annotations

from dataclasses import dataclass

from src.models import DeliveryStatus


class MalformedPayloadError(ValueError):
    """A field the platform always sends is missing from the payload."""


@dataclass(frozen=True)
class PaymentNotification:
    """Parameters for the payment confirmation template."""

    phone: str
    customer_name: str
    total: str

    def parameters(self) -> list[tuple[str, str]]:
        return [("nombre", self.customer_name), ("total", self.total)]


@dataclass(frozen=True)
class ShipmentNotification:
    """Parameters for the shipment notification template."""

    phone: str
    customer_name: str
    order_number: str
    tracking_number: str
    tracking_url: str

    def parameters(self) -> list[tuple[str, str]]:
        return [
            ("nombre", self.customer_name),
            ("no_pedido", self.order_number),
            ("tracking_number", self.tracking_number),
            ("url_tracking", self.tracking_url),
        ]


@dataclass
class WebhookResponse:
    """Response returned to Saleor for one webhook delivery."""

    status_code: int
    message: str
    delivery: DeliveryStatus | None = None

    @classmethod
    def handled(cls, delivery: DeliveryStatus | None = None) -> WebhookResponse:
        return cls(status_code=200, message="event handled", delivery=delivery)

    @classmethod
    def error(cls, exc: BaseException) -> WebhookResponse:
        return cls(status_code=500, message=str(exc))

    def body(self) -> dict[str, str]:
        return {"message": self.message}
