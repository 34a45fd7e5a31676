"""Deterministic payment gateway.

The decision depends only on the amount: it is converted to cents by
truncating toward zero (never rounding), then an even number of cents is
approved and an odd number is declined. Zero counts as even.

    0.00 -> 0 cents       -> approved
    0.01 -> 1 cent        -> declined
    99.99 -> 9999 cents   -> declined
    100.00 -> 10000 cents -> approved

Amounts go through ``Decimal(str(amount))`` so binary float noise
(0.29 * 100 == 28.999999999999996) never shifts the cent count.
"""

from decimal import Decimal
from uuid import uuid4

from payments.gateway.port import ChargeResult, PaymentGateway

DECLINED_REASON = "Payment declined: odd amount in cents"


def amount_in_cents(amount) -> int:
    return int(Decimal(str(amount)) * 100)


class ParityGateway(PaymentGateway):
    def create_charge(self, amount: float, method: str) -> ChargeResult:
        cents = amount_in_cents(amount)
        if cents % 2 == 0:
            return ChargeResult(
                success=True,
                gateway_transaction_id=f"txn_{uuid4().hex[:12]}",
                gateway_status="succeeded",
            )
        return ChargeResult(
            success=False,
            gateway_status="failed",
            failure_reason=DECLINED_REASON,
        )
