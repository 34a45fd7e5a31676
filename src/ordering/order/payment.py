"""Order settlement — command and handler.

SettleOrder is the single authoritative write at the end of a payment
attempt. It re-checks that the order is still payable, so a settlement can
never overwrite PAID or CANCELLED.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order, SettlementOutcome
from shared.errors import OrderNotFound

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class SettleOrder:
    order_id = Identifier(required=True)
    outcome = String(required=True, choices=SettlementOutcome)
    payment_id = String(max_length=255)


@ordering.command_handler(part_of=Order)
class OrderSettlementHandler:
    @handle(SettleOrder)
    def settle_order(self, command):
        repo = current_domain.repository_for(Order)
        try:
            order = repo.get(command.order_id)
        except ObjectNotFoundError:
            raise OrderNotFound(command.order_id)

        order.settle(SettlementOutcome(command.outcome), command.payment_id)
        repo.add(order)
        logger.info(
            "Order settled",
            order_id=str(order.id),
            outcome=command.outcome,
            status=order.status,
            payment_id=command.payment_id,
        )
        return order.status
