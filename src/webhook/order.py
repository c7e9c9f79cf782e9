"""ORDER_FULFILLED handler: shipment notification with tracking details."""

from __future__ import annotations

import logging

from src.models import OrderFulfilledPayload, SaleorEvent
from src.webhook.base import SaleorWebhookHandler
from src.webhook.fields import (
    NOT_AVAILABLE,
    display_name,
    first_tracked_fulfillment,
    resolve_tracking_url,
)
from src.webhook.models import ShipmentNotification

logger = logging.getLogger(__name__)

ORDER_FULFILLED_SUBSCRIPTION = """
subscription OrderFulfilled {
  event {
    __typename
    ... on OrderFulfilled {
      order {
        id
        number
        shippingAddress {
          firstName
          lastName
          phone
        }
        fulfillments {
          trackingNumber
          metadata {
            key
            value
          }
        }
        metadata {
          key
          value
        }
      }
    }
  }
}
"""


class OrderFulfilledHandler(SaleorWebhookHandler[OrderFulfilledPayload]):
    name = "Order fulfilled"
    event = SaleorEvent.ORDER_FULFILLED
    path = "/api/webhooks/order-fulfilled"
    subscription_query = ORDER_FULFILLED_SUBSCRIPTION
    payload_model = OrderFulfilledPayload

    def extract(self, payload: OrderFulfilledPayload) -> ShipmentNotification | None:
        order = payload.order
        if order is None:
            logger.info("No order in ORDER_FULFILLED payload")
            return None

        address = order.shipping_address
        phone = self._config.resolve_phone(address.phone if address else None)
        if not phone:
            logger.info("No phone on order %s; WhatsApp not sent", order.id)
            return None

        fulfillment = first_tracked_fulfillment(order.fulfillments)
        tracking_number = (
            fulfillment.tracking_number
            if fulfillment is not None and fulfillment.tracking_number
            else NOT_AVAILABLE
        )

        return ShipmentNotification(
            phone=phone,
            customer_name=display_name(
                address.first_name if address else None,
                self._config.default_greeting,
            ),
            order_number=order.number or NOT_AVAILABLE,
            tracking_number=tracking_number,
            tracking_url=resolve_tracking_url(order.metadata, fulfillment),
        )
