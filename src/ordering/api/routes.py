"""FastAPI routes for the Ordering domain — orders and the fulfillment saga.

Order creation and payment call collaborators that may block on HTTP, so
those two routes are plain functions and run in the threadpool.
"""

import json
import os

from fastapi import APIRouter, HTTPException
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    AddProductRequest,
    CreateOrderRequest,
    OrderResponse,
    ProductResponse,
)
from ordering.clients import get_catalogue
from ordering.clients.fake_catalogue import FakeCatalogue
from ordering.fulfillment.saga import pay_order
from ordering.order.creation import CreateOrder
from ordering.order.queries import get_order, list_orders

# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
def create_order(body: CreateOrderRequest) -> OrderResponse:
    command = CreateOrder(
        items=json.dumps([item.model_dump() for item in body.items]),
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderResponse.from_order(get_order(order_id))


@order_router.get("", response_model=list[OrderResponse])
async def all_orders() -> list[OrderResponse]:
    return [OrderResponse.from_order(order) for order in list_orders()]


@order_router.post("/catalogue/products", status_code=201, response_model=ProductResponse)
async def add_catalogue_product(body: AddProductRequest) -> ProductResponse:
    """Seed the in-memory catalogue (non-production only)."""
    if os.environ.get("PROTEAN_ENV") == "production":
        raise HTTPException(status_code=403, detail="Catalogue seeding not available in production")

    catalogue = get_catalogue()
    if not isinstance(catalogue, FakeCatalogue):
        raise HTTPException(status_code=400, detail="Catalogue seeding only available for FakeCatalogue")

    product = catalogue.add_product(sku=body.sku, name=body.name, price=body.price)
    return ProductResponse(sku=product.sku, name=product.name, price=product.price)


@order_router.get("/{order_id}", response_model=OrderResponse)
async def order_detail(order_id: str) -> OrderResponse:
    return OrderResponse.from_order(get_order(order_id))


@order_router.post("/{order_id}/pay", response_model=OrderResponse)
def pay(order_id: str) -> OrderResponse:
    """Charge the order and deduct its stock.

    A declined payment still answers 200; the order comes back CREATED
    with a cancellation reason.
    """
    return OrderResponse.from_order(pay_order(order_id))
