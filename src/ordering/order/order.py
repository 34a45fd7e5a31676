"""Order aggregate (CQRS) — the core of the ordering domain.

An order is a list of priced line items plus the outcome of its payment.
The total is never stored; it is derived from the items on every call.

State Machine:
    CREATED → PAID        payment approved, every item deducted
    CREATED → CANCELLED   payment approved, some item could not be deducted
    CREATED → CREATED     payment declined, the order can be paid again

PAID and CANCELLED are terminal.
"""

import json
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String

from ordering.domain import ordering
from ordering.order.events import (
    OrderCancelled,
    OrderCreated,
    OrderPaid,
    OrderPaymentDeclined,
)
from shared.errors import InvalidState

PAYMENT_FAILED_REASON = "Payment failed"
INSUFFICIENT_INVENTORY_REASON = "Insufficient inventory to fulfill order"


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    CREATED = "Created"
    PAID = "Paid"
    CANCELLED = "Cancelled"


class SettlementOutcome(Enum):
    """What the fulfillment saga concluded for one payment attempt."""

    PAID = "Paid"
    PAYMENT_DECLINED = "Payment_Declined"
    INSUFFICIENT_INVENTORY = "Insufficient_Inventory"


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    """A line item: SKU, quantity and the unit price locked at creation.

    ``position`` keeps the order in which the caller listed the items so
    fulfillment deducts stock in that same order.
    """

    sku = String(required=True, max_length=50)
    product_name = String(max_length=255)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)
    position = Integer(default=0)

    def line_total(self) -> Decimal:
        return Decimal(str(self.unit_price)) * self.quantity


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    status = String(
        choices=OrderStatus,
        default=OrderStatus.CREATED.value,
    )
    items = HasMany(OrderItem)
    payment_id = String(max_length=255)
    cancellation_reason = String(max_length=500)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, items_data):
        """Create a new order from resolved line items.

        Args:
            items_data: List of dicts with sku, quantity, unit_price and
                        optionally product_name.
        """
        if not items_data:
            raise ValidationError({"items": ["Order must contain at least one item"]})

        now = datetime.now(UTC)
        order = cls(
            status=OrderStatus.CREATED.value,
            created_at=now,
            updated_at=now,
        )
        for position, item in enumerate(items_data):
            order.add_items(
                OrderItem(
                    sku=item["sku"],
                    product_name=item.get("product_name"),
                    quantity=item["quantity"],
                    unit_price=item["unit_price"],
                    position=position,
                )
            )

        order.raise_(
            OrderCreated(
                order_id=str(order.id),
                items=json.dumps(
                    [
                        {
                            "sku": item.sku,
                            "quantity": item.quantity,
                            "unit_price": item.unit_price,
                        }
                        for item in order.line_items()
                    ]
                ),
                total_amount=float(order.total_amount()),
                created_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------
    def line_items(self) -> list:
        """Items in the order the caller listed them."""
        return sorted(self.items or [], key=lambda item: item.position or 0)

    def total_amount(self) -> Decimal:
        return sum((item.line_total() for item in self.items or []), Decimal("0"))

    # -------------------------------------------------------------------
    # Guards
    # -------------------------------------------------------------------
    def assert_payable(self) -> None:
        if self.status != OrderStatus.CREATED.value:
            raise InvalidState(
                f"Order {self.id} cannot be paid in status {self.status}",
                current_status=self.status,
            )

    # -------------------------------------------------------------------
    # Settlement
    # -------------------------------------------------------------------
    def settle(self, outcome: SettlementOutcome, payment_id: str | None) -> None:
        """Apply the saga's conclusion for one payment attempt."""
        self.assert_payable()
        if outcome == SettlementOutcome.PAID:
            self.mark_paid(payment_id)
        elif outcome == SettlementOutcome.INSUFFICIENT_INVENTORY:
            self.cancel(payment_id, INSUFFICIENT_INVENTORY_REASON)
        else:
            self.record_payment_declined(payment_id)

    def mark_paid(self, payment_id: str) -> None:
        now = datetime.now(UTC)
        self.status = OrderStatus.PAID.value
        self.payment_id = payment_id
        self.cancellation_reason = None
        self.updated_at = now
        self.raise_(
            OrderPaid(
                order_id=str(self.id),
                payment_id=payment_id,
                total_amount=float(self.total_amount()),
                paid_at=now,
            )
        )

    def cancel(self, payment_id: str | None, reason: str) -> None:
        now = datetime.now(UTC)
        self.status = OrderStatus.CANCELLED.value
        self.payment_id = payment_id
        self.cancellation_reason = reason
        self.updated_at = now
        self.raise_(
            OrderCancelled(
                order_id=str(self.id),
                payment_id=payment_id,
                reason=reason,
                cancelled_at=now,
            )
        )

    def record_payment_declined(self, payment_id: str | None) -> None:
        now = datetime.now(UTC)
        self.payment_id = payment_id
        self.cancellation_reason = PAYMENT_FAILED_REASON
        self.updated_at = now
        self.raise_(
            OrderPaymentDeclined(
                order_id=str(self.id),
                payment_id=payment_id,
                reason=PAYMENT_FAILED_REASON,
                declined_at=now,
            )
        )
