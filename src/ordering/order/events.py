"""Domain events for the Order aggregate.

All events are versioned, immutable facts representing order state changes.
Exactly one settlement event (OrderPaid, OrderCancelled or
OrderPaymentDeclined) is raised per payment attempt.
"""

from protean.fields import DateTime, Float, Identifier, String, Text

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderCreated:
    """A new order was placed with priced line items."""

    __version__ = 1

    order_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of item dicts
    total_amount = Float(required=True)
    created_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderPaid:
    """Payment was approved and every line item was deducted from stock."""

    __version__ = 1

    order_id = Identifier(required=True)
    payment_id = String(required=True)
    total_amount = Float(required=True)
    paid_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderCancelled:
    """Payment was approved but stock could not cover the order."""

    __version__ = 1

    order_id = Identifier(required=True)
    payment_id = String()
    reason = String(required=True)
    cancelled_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderPaymentDeclined:
    """Payment was declined. The order stays payable."""

    __version__ = 1

    order_id = Identifier(required=True)
    payment_id = String()
    reason = String(required=True)
    declined_at = DateTime(required=True)
