"""In-process adapters for the payments and inventory contexts.

Each call runs the collaborator's command inside that collaborator's own
domain context, so it uses its own providers and its own unit of work.
"""

from inventory.domain import inventory
from inventory.stock.ledger import DeductStock
from ordering.clients.port import (
    DeductionOutcome,
    InventoryPort,
    PaymentReceipt,
    PaymentsPort,
)
from payments.domain import payments
from payments.payment.processing import ProcessPayment
from payments.payment.queries import get_payment
from shared.errors import InsufficientStock, SkuNotFound


class LocalPayments(PaymentsPort):
    def charge(self, order_id: str, amount: float, method: str) -> PaymentReceipt:
        with payments.domain_context():
            payment_id = payments.process(
                ProcessPayment(order_id=order_id, amount=amount, method=method),
                asynchronous=False,
            )
            payment = get_payment(payment_id)
            return PaymentReceipt(
                payment_id=str(payment.id),
                success=payment.succeeded,
                status=payment.status,
            )


class LocalInventory(InventoryPort):
    def deduct(self, sku: str, quantity: int) -> DeductionOutcome:
        with inventory.domain_context():
            try:
                inventory.process(DeductStock(sku=sku, quantity=quantity), asynchronous=False)
            except SkuNotFound:
                return DeductionOutcome.SKU_NOT_FOUND
            except InsufficientStock:
                return DeductionOutcome.INSUFFICIENT_STOCK
        return DeductionOutcome.DEDUCTED
