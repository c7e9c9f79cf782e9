"""CHECKOUT_FULLY_PAID handler: payment confirmation over WhatsApp."""

from __future__ import annotations

import logging

from src.models import CheckoutFullyPaidPayload, SaleorEvent
from src.webhook.base import SaleorWebhookHandler
from src.webhook.fields import display_name, format_amount
from src.webhook.models import MalformedPayloadError, PaymentNotification

logger = logging.getLogger(__name__)

CHECKOUT_FULLY_PAID_SUBSCRIPTION = """
fragment CheckoutFullyPaidWebhookPayload on CheckoutFullyPaid {
  checkout {
    totalPrice {
      gross {
        currency
        amount
      }
    }
    shippingAddress {
      phone
      lastName
      firstName
    }
  }
}

subscription CheckoutFullyPaid {
  event {
    ...CheckoutFullyPaidWebhookPayload
  }
}
"""


class CheckoutFullyPaidHandler(SaleorWebhookHandler[CheckoutFullyPaidPayload]):
    name = "Checkout Fully Paid in Saleor"
    event = SaleorEvent.CHECKOUT_FULLY_PAID
    path = "/api/webhooks/checkout-fully-paid"
    subscription_query = CHECKOUT_FULLY_PAID_SUBSCRIPTION
    payload_model = CheckoutFullyPaidPayload

    def extract(self, payload: CheckoutFullyPaidPayload) -> PaymentNotification | None:
        checkout = payload.checkout
        if checkout is None:
            logger.warning("No checkout in CHECKOUT_FULLY_PAID payload")
            return None

        gross = checkout.total_price.gross if checkout.total_price else None
        if gross is None or gross.amount is None:
            raise MalformedPayloadError("checkout.totalPrice.gross.amount is missing")

        address = checkout.shipping_address
        phone = self._config.resolve_phone(address.phone if address else None)
        if not phone:
            logger.warning("No shippingAddress.phone on checkout; WhatsApp not sent")
            return None

        return PaymentNotification(
            phone=phone,
            customer_name=display_name(
                address.first_name if address else None,
                self._config.default_greeting,
            ),
            total=format_amount(gross.amount),
        )
