"""Payment processing — command and handler.

Creates a Payment, asks the active gateway for a decision, records it and
persists the payment once, already in its terminal state.
"""

import structlog
from protean import handle
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from payments.domain import payments
from payments.gateway import get_gateway
from payments.payment.payment import Payment

logger = structlog.get_logger(__name__)


@payments.command(part_of="Payment")
class ProcessPayment:
    """Charge an order's total through the payment gateway."""

    order_id = Identifier(required=True)
    amount = Float(required=True, min_value=0.0)
    method = String(required=True, max_length=50)


@payments.command_handler(part_of=Payment)
class ProcessPaymentHandler:
    @handle(ProcessPayment)
    def process_payment(self, command):
        gateway = get_gateway()

        payment = Payment.create(
            order_id=command.order_id,
            amount=command.amount,
            method=command.method,
            gateway_name=type(gateway).__name__,
        )
        result = gateway.create_charge(command.amount, command.method)
        payment.record_outcome(result)
        current_domain.repository_for(Payment).add(payment)

        logger.info(
            "Payment processed",
            payment_id=str(payment.id),
            order_id=str(payment.order_id),
            amount=payment.amount,
            status=payment.status,
        )
        return str(payment.id)
