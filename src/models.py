"""Shared Pydantic data models for saleor-whatsapp-notifier."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# --- Enums ---


class SaleorEvent(str, Enum):
    CHECKOUT_FULLY_PAID = "CHECKOUT_FULLY_PAID"
    ORDER_FULFILLED = "ORDER_FULFILLED"

    @property
    def header_value(self) -> str:
        """Value Saleor sends in the ``saleor-event`` header."""
        return self.value.lower()


class DeliveryStatus(str, Enum):
    SENT = "sent"
    FAILED = "failed"
    SKIPPED = "skipped"


# --- Saleor payload models ---


class SaleorModel(BaseModel):
    """Base for inbound payload fragments: camelCase on the wire, extras ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class MetadataItem(SaleorModel):
    key: str | None = None
    value: str | None = None


class Money(SaleorModel):
    amount: float | None = None
    currency: str | None = None


class TaxedMoney(SaleorModel):
    gross: Money | None = None


class Address(SaleorModel):
    phone: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class Checkout(SaleorModel):
    total_price: TaxedMoney | None = None
    shipping_address: Address | None = None


class Fulfillment(SaleorModel):
    tracking_number: str | None = None
    metadata: list[MetadataItem] | None = None


class Order(SaleorModel):
    id: str | None = None
    number: str | None = None
    shipping_address: Address | None = None
    fulfillments: list[Fulfillment] | None = None
    metadata: list[MetadataItem] | None = None


class CheckoutFullyPaidPayload(SaleorModel):
    checkout: Checkout | None = None


class OrderFulfilledPayload(SaleorModel):
    order: Order | None = None


# --- Outbound message models ---


class TemplateParameter(BaseModel):
    model_config = ConfigDict(frozen=True)

    parameter_name: str
    text: str


class TemplateMessage(BaseModel):
    """A WhatsApp template message addressed to one recipient."""

    model_config = ConfigDict(frozen=True)

    to: str
    template_name: str
    language_code: str
    parameters: list[TemplateParameter]

    def to_request_body(self) -> dict[str, object]:
        return {
            "messaging_product": "whatsapp",
            "to": self.to,
            "type": "template",
            "template": {
                "name": self.template_name,
                "language": {"code": self.language_code},
                "components": [
                    {
                        "type": "body",
                        "parameters": [
                            {
                                "type": "text",
                                "text": param.text,
                                "parameter_name": param.parameter_name,
                            }
                            for param in self.parameters
                        ],
                    },
                ],
            },
        }
