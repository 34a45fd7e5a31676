"""Order Fulfillment Saga — coordinates Ordering → Payments → Inventory.

Runs synchronously as an application service, outside any unit of work,
and talks to the other contexts only through the collaborator ports.

Flow:
    1. Load the order and check it is still CREATED (no side effects otherwise)
    2. Charge the order total with the fixed method CREDIT_CARD
    3a. Declined → the order stays CREATED with reason "Payment failed"
    3b. Approved → deduct each line item in order; the first shortfall or
        unknown SKU stops the loop and the order is CANCELLED
    4. Write the conclusion once through SettleOrder

Deductions that succeeded before a shortfall are not rolled back and the
charge is not refunded. Two concurrent pay calls on the same order can both
pass the guard in step 1 and charge twice; only one settlement wins.
"""

import structlog
from protean.utils.globals import current_domain

from ordering.clients import get_inventory, get_payments
from ordering.clients.port import DeductionOutcome, InventoryPort, PaymentsPort
from ordering.order.order import SettlementOutcome
from ordering.order.payment import SettleOrder
from ordering.order.queries import get_order
from shared.errors import OrchestrationError

logger = structlog.get_logger(__name__)

PAYMENT_METHOD = "CREDIT_CARD"


class OrderFulfillmentSaga:
    def __init__(self, payments: PaymentsPort, inventory: InventoryPort, payment_method: str = PAYMENT_METHOD):
        self.payments = payments
        self.inventory = inventory
        self.payment_method = payment_method

    def pay(self, order_id):
        order = get_order(order_id)
        order.assert_payable()

        total = order.total_amount()
        receipt = self._call(
            "payments",
            self.payments.charge,
            str(order.id),
            float(total),
            self.payment_method,
        )
        logger.info(
            "Payment decision received",
            order_id=str(order.id),
            payment_id=receipt.payment_id,
            success=receipt.success,
            amount=str(total),
        )

        if not receipt.success:
            outcome = SettlementOutcome.PAYMENT_DECLINED
        else:
            outcome = SettlementOutcome.PAID
            for item in order.line_items():
                result = self._call("inventory", self.inventory.deduct, item.sku, item.quantity)
                if result != DeductionOutcome.DEDUCTED:
                    logger.warning(
                        "Deduction failed, cancelling order",
                        order_id=str(order.id),
                        sku=item.sku,
                        quantity=item.quantity,
                        result=result.value,
                    )
                    outcome = SettlementOutcome.INSUFFICIENT_INVENTORY
                    break

        current_domain.process(
            SettleOrder(
                order_id=str(order.id),
                outcome=outcome.value,
                payment_id=receipt.payment_id,
            ),
            asynchronous=False,
        )
        return get_order(order.id)

    def _call(self, collaborator, fn, *args):
        try:
            return fn(*args)
        except OrchestrationError:
            raise
        except Exception as exc:
            raise OrchestrationError(
                f"{collaborator} call failed: {exc}",
                collaborator=collaborator,
            ) from exc


def pay_order(order_id):
    """Pay an order with the configured collaborators."""
    return OrderFulfillmentSaga(get_payments(), get_inventory()).pay(order_id)
