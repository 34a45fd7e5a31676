"""Domain events for the Payment aggregate.

All events are versioned, immutable facts recording the decision taken on
a payment. Exactly one of them is raised per payment.
"""

from protean.fields import DateTime, Float, Identifier, String

from payments.domain import payments


@payments.event(part_of="Payment")
class PaymentSucceeded:
    """The gateway approved the charge."""

    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    amount = Float(required=True)
    method = String(required=True)
    gateway_transaction_id = String()
    succeeded_at = DateTime(required=True)


@payments.event(part_of="Payment")
class PaymentFailed:
    """The gateway declined the charge."""

    __version__ = 1

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    amount = Float(required=True)
    method = String(required=True)
    reason = String()
    failed_at = DateTime(required=True)
