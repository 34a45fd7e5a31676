"""FastAPI routes for the Payments domain."""

import os

from fastapi import APIRouter, HTTPException
from protean.utils.globals import current_domain

from payments.api.schemas import (
    ConfigureGatewayRequest,
    GatewayConfigResponse,
    PaymentResponse,
    ProcessPaymentRequest,
)
from payments.gateway import get_gateway, reset_gateway, set_gateway
from payments.gateway.fake_adapter import FakeGateway
from payments.payment.processing import ProcessPayment
from payments.payment.queries import get_payment, list_payments, list_payments_for_order

# ---------------------------------------------------------------------------
# Payment Router
# ---------------------------------------------------------------------------
payment_router = APIRouter(prefix="/payments", tags=["payments"])


@payment_router.post("/process", status_code=201, response_model=PaymentResponse)
async def process_payment(body: ProcessPaymentRequest) -> PaymentResponse:
    """Charge an order and return the recorded decision.

    A declined charge is still a 201: the payment exists with status Failed.
    """
    command = ProcessPayment(
        order_id=body.order_id,
        amount=body.amount,
        method=body.method,
    )
    payment_id = current_domain.process(command, asynchronous=False)
    return PaymentResponse.from_payment(get_payment(payment_id))


@payment_router.get("", response_model=list[PaymentResponse])
async def all_payments() -> list[PaymentResponse]:
    return [PaymentResponse.from_payment(payment) for payment in list_payments()]


@payment_router.get("/order/{order_id}", response_model=list[PaymentResponse])
async def payments_for_order(order_id: str) -> list[PaymentResponse]:
    return [PaymentResponse.from_payment(payment) for payment in list_payments_for_order(order_id)]


@payment_router.post("/gateway/configure", response_model=GatewayConfigResponse)
async def configure_gateway(body: ConfigureGatewayRequest) -> GatewayConfigResponse:
    """Switch the active gateway (non-production only).

    This endpoint is only available when PROTEAN_ENV is not 'production'.
    ``parity`` restores the deterministic default; ``fake`` installs a
    FakeGateway with a fixed outcome for manual API testing.
    """
    if os.environ.get("PROTEAN_ENV") == "production":
        raise HTTPException(status_code=403, detail="Gateway configuration not available in production")

    if body.gateway == "parity":
        reset_gateway()
        return GatewayConfigResponse(gateway=type(get_gateway()).__name__)

    gateway = get_gateway()
    if not isinstance(gateway, FakeGateway):
        gateway = FakeGateway()
        set_gateway(gateway)

    gateway.configure(
        should_succeed=body.should_succeed,
        failure_reason=body.failure_reason,
    )
    return GatewayConfigResponse(
        gateway=type(gateway).__name__,
        should_succeed=gateway.should_succeed,
        failure_reason=gateway.failure_reason,
    )


@payment_router.get("/{payment_id}", response_model=PaymentResponse)
async def payment_detail(payment_id: str) -> PaymentResponse:
    return PaymentResponse.from_payment(get_payment(payment_id))
