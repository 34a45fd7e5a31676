"""Read side of the payments domain."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from payments.payment.payment import Payment
from shared.errors import PaymentNotFound


def get_payment(payment_id):
    try:
        return current_domain.repository_for(Payment).get(payment_id)
    except ObjectNotFoundError:
        raise PaymentNotFound(payment_id)


def list_payments():
    return current_domain.repository_for(Payment)._dao.query.limit(None).all().items


def list_payments_for_order(order_id):
    """Every payment recorded for an order, oldest first."""
    repo = current_domain.repository_for(Payment)
    payments = repo._dao.query.filter(order_id=str(order_id)).limit(None).all().items
    return sorted(payments, key=lambda payment: payment.created_at)
