"""Field extraction helpers shared by the Saleor event handlers."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from src.models import Fulfillment, MetadataItem

NOT_AVAILABLE = "N/A"
TRACKING_URL_KEY = "tracking_url_provider"


def display_name(first_name: str | None, default_greeting: str) -> str:
    """Upper-case the first letter of the name, leaving the rest untouched."""
    if not first_name:
        return default_greeting
    return first_name[0].upper() + first_name[1:]


def format_amount(amount: float) -> str:
    """Two decimals, ties rounded away from zero."""
    return str(Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def get_metadata_value(
    items: Sequence[MetadataItem] | None, key: str,
) -> str | None:
    """Return the value of the first item matching ``key``, or None."""
    if not items:
        return None
    for item in items:
        if item.key == key:
            return item.value
    return None


def first_tracked_fulfillment(
    fulfillments: Sequence[Fulfillment] | None,
) -> Fulfillment | None:
    """First fulfillment, in list order, with a non-blank tracking number."""
    for fulfillment in fulfillments or []:
        if fulfillment.tracking_number and fulfillment.tracking_number.strip():
            return fulfillment
    return None


def resolve_tracking_url(
    order_metadata: Sequence[MetadataItem] | None,
    fulfillment: Fulfillment | None,
) -> str:
    # Order-level metadata wins over the fulfillment's own.
    url = get_metadata_value(order_metadata, TRACKING_URL_KEY)
    if not url and fulfillment is not None:
        url = get_metadata_value(fulfillment.metadata, TRACKING_URL_KEY)
    return url or NOT_AVAILABLE
