"""Payment aggregate (CQRS) — the core of the payments domain.

A Payment records one charge decision for one order. It is created in
PENDING and moves exactly once to SUCCESS or FAILED; terminal states never
change again.

State Machine:
    PENDING → SUCCESS
    PENDING → FAILED
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String

from payments.domain import payments
from payments.payment.events import PaymentFailed, PaymentSucceeded


class PaymentStatus(Enum):
    PENDING = "Pending"
    SUCCESS = "Success"
    FAILED = "Failed"


_VALID_TRANSITIONS = {
    PaymentStatus.PENDING: {PaymentStatus.SUCCESS, PaymentStatus.FAILED},
    PaymentStatus.SUCCESS: set(),  # Terminal
    PaymentStatus.FAILED: set(),  # Terminal
}


@payments.aggregate
class Payment:
    order_id = Identifier(required=True)
    amount = Float(required=True, min_value=0.0)
    method = String(required=True, max_length=50)
    status = String(
        choices=PaymentStatus,
        default=PaymentStatus.PENDING.value,
    )
    gateway_name = String(max_length=50)
    gateway_transaction_id = String(max_length=255)
    failure_reason = String(max_length=500)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, order_id: str, amount: float, method: str, gateway_name: str):
        now = datetime.now(UTC)
        return cls(
            order_id=order_id,
            amount=amount,
            method=method,
            status=PaymentStatus.PENDING.value,
            gateway_name=gateway_name,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # State transition helper
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status: PaymentStatus) -> None:
        current = PaymentStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    @property
    def succeeded(self) -> bool:
        return self.status == PaymentStatus.SUCCESS.value

    # -------------------------------------------------------------------
    # Decision
    # -------------------------------------------------------------------
    def record_success(self, gateway_transaction_id: str | None = None) -> None:
        self._assert_can_transition(PaymentStatus.SUCCESS)
        now = datetime.now(UTC)
        self.status = PaymentStatus.SUCCESS.value
        self.gateway_transaction_id = gateway_transaction_id
        self.updated_at = now
        self.raise_(
            PaymentSucceeded(
                payment_id=str(self.id),
                order_id=str(self.order_id),
                amount=self.amount,
                method=self.method,
                gateway_transaction_id=gateway_transaction_id,
                succeeded_at=now,
            )
        )

    def record_failure(self, reason: str | None) -> None:
        self._assert_can_transition(PaymentStatus.FAILED)
        now = datetime.now(UTC)
        self.status = PaymentStatus.FAILED.value
        self.failure_reason = reason
        self.updated_at = now
        self.raise_(
            PaymentFailed(
                payment_id=str(self.id),
                order_id=str(self.order_id),
                amount=self.amount,
                method=self.method,
                reason=reason,
                failed_at=now,
            )
        )

    def record_outcome(self, result) -> None:
        """Apply a gateway ChargeResult."""
        if result.success:
            self.record_success(result.gateway_transaction_id)
        else:
            self.record_failure(result.failure_reason)
