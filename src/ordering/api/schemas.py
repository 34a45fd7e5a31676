"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class OrderItemSchema(BaseModel):
    sku: str = Field(min_length=1, max_length=50)
    quantity: int = Field(ge=1)
    unit_price: float | None = Field(default=None, ge=0)


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class CreateOrderRequest(BaseModel):
    items: list[OrderItemSchema]

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": [
                        {"sku": "SKU-001", "quantity": 2, "unit_price": 29.99},
                        {"sku": "SKU-002", "quantity": 1},
                    ]
                }
            ]
        }
    }


class AddProductRequest(BaseModel):
    sku: str = Field(min_length=1, max_length=50)
    name: str
    price: float = Field(ge=0)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderItemResponse(BaseModel):
    sku: str
    product_name: str | None = None
    quantity: int
    unit_price: float


class OrderResponse(BaseModel):
    id: str
    status: str
    items: list[OrderItemResponse]
    total_amount: float
    payment_id: str | None = None
    cancellation_reason: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_order(cls, order) -> "OrderResponse":
        return cls(
            id=str(order.id),
            status=order.status,
            items=[
                OrderItemResponse(
                    sku=item.sku,
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                )
                for item in order.line_items()
            ],
            total_amount=float(order.total_amount()),
            payment_id=order.payment_id,
            cancellation_reason=order.cancellation_reason,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class ProductResponse(BaseModel):
    sku: str
    name: str
    price: float
