"""Pydantic request/response schemas for the Payments API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Payment Request Schemas
# ---------------------------------------------------------------------------
class ProcessPaymentRequest(BaseModel):
    order_id: str
    amount: float = Field(ge=0)
    method: str = Field(min_length=1, max_length=50)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "order_id": "8c2f6e0a-6f0e-4c52-9a43-2d1b8f0f3b7e",
                    "amount": 59.98,
                    "method": "CREDIT_CARD",
                }
            ]
        }
    }


class ConfigureGatewayRequest(BaseModel):
    gateway: Literal["parity", "fake"] = "fake"
    should_succeed: bool = True
    failure_reason: str = "Card declined"


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class PaymentResponse(BaseModel):
    id: str
    order_id: str
    amount: float
    method: str
    status: str
    gateway_name: str | None = None
    failure_reason: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_payment(cls, payment) -> "PaymentResponse":
        return cls(
            id=str(payment.id),
            order_id=str(payment.order_id),
            amount=payment.amount,
            method=payment.method,
            status=payment.status,
            gateway_name=payment.gateway_name,
            failure_reason=payment.failure_reason,
            created_at=payment.created_at,
            updated_at=payment.updated_at,
        )


class GatewayConfigResponse(BaseModel):
    gateway: str
    should_succeed: bool | None = None
    failure_reason: str | None = None
