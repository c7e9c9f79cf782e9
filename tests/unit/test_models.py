"""Tests for payload parsing and outbound message models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.models import (
    CheckoutFullyPaidPayload,
    OrderFulfilledPayload,
    SaleorEvent,
    TemplateMessage,
    TemplateParameter,
)
from tests.conftest import make_checkout_payload, make_order_payload


class TestPayloadParsing:
    def test_checkout_camel_case_fields(self) -> None:
        payload = CheckoutFullyPaidPayload.model_validate(make_checkout_payload())
        assert payload.checkout is not None
        assert payload.checkout.shipping_address is not None
        assert payload.checkout.shipping_address.first_name == "maria"
        assert payload.checkout.total_price is not None
        assert payload.checkout.total_price.gross is not None
        assert payload.checkout.total_price.gross.amount == 12.5

    def test_missing_checkout_is_none(self) -> None:
        assert CheckoutFullyPaidPayload.model_validate({}).checkout is None

    def test_null_address_allowed(self) -> None:
        data = make_checkout_payload()
        data["checkout"]["shippingAddress"] = None
        payload = CheckoutFullyPaidPayload.model_validate(data)
        assert payload.checkout is not None
        assert payload.checkout.shipping_address is None

    def test_order_ignores_typename(self) -> None:
        payload = OrderFulfilledPayload.model_validate(make_order_payload())
        assert payload.order is not None
        assert payload.order.number == "1042"
        assert payload.order.fulfillments is not None
        assert payload.order.fulfillments[0].tracking_number == "TRK-1"

    def test_metadata_item_tolerates_nulls(self) -> None:
        data = make_order_payload(metadata=[{"key": "note", "value": None}, {"value": "x"}])
        payload = OrderFulfilledPayload.model_validate(data)
        assert payload.order is not None
        assert payload.order.metadata is not None
        assert payload.order.metadata[0].value is None
        assert payload.order.metadata[1].key is None

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(ValidationError):
            OrderFulfilledPayload.model_validate_json(b"not json")


class TestSaleorEvent:
    def test_header_value_is_lowercase(self) -> None:
        assert SaleorEvent.CHECKOUT_FULLY_PAID.header_value == "checkout_fully_paid"
        assert SaleorEvent.ORDER_FULFILLED.header_value == "order_fulfilled"


class TestTemplateMessage:
    def test_request_body_shape(self) -> None:
        message = TemplateMessage(
            to="+521",
            template_name="payment_successful",
            language_code="es",
            parameters=[
                TemplateParameter(parameter_name="nombre", text="Maria"),
                TemplateParameter(parameter_name="total", text="12.50"),
            ],
        )
        assert message.to_request_body() == {
            "messaging_product": "whatsapp",
            "to": "+521",
            "type": "template",
            "template": {
                "name": "payment_successful",
                "language": {"code": "es"},
                "components": [
                    {
                        "type": "body",
                        "parameters": [
                            {"type": "text", "text": "Maria", "parameter_name": "nombre"},
                            {"type": "text", "text": "12.50", "parameter_name": "total"},
                        ],
                    },
                ],
            },
        }
