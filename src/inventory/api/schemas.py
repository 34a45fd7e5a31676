"""Pydantic request/response schemas for the Inventory API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Ledger Request Schemas
# ---------------------------------------------------------------------------
class CreateInventoryItemRequest(BaseModel):
    sku: str = Field(min_length=1, max_length=50)
    available: int = Field(ge=0)
    threshold: int = Field(ge=0)


class UpdateInventoryItemRequest(BaseModel):
    available: int | None = Field(default=None, ge=0)
    threshold: int | None = Field(default=None, ge=0)


class DeductStockRequest(BaseModel):
    # Range is checked by the domain so a bad quantity maps to 400
    quantity: int


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class InventoryItemResponse(BaseModel):
    id: str
    sku: str
    available: int | None = None
    threshold: int | None = None
    last_updated: datetime | None = None
    low_stock: bool

    @classmethod
    def from_item(cls, item) -> "InventoryItemResponse":
        return cls(
            id=str(item.id),
            sku=item.sku,
            available=item.available,
            threshold=item.threshold,
            last_updated=item.last_updated,
            low_stock=item.is_low_stock(),
        )


class LowStockAlertResponse(BaseModel):
    id: str
    sku: str
    available: int | None = None
    threshold: int | None = None
    raised_at: datetime

    @classmethod
    def from_alert(cls, alert) -> "LowStockAlertResponse":
        return cls(
            id=str(alert.id),
            sku=alert.sku,
            available=alert.available,
            threshold=alert.threshold,
            raised_at=alert.raised_at,
        )


class LowStockEntryResponse(BaseModel):
    sku: str
    available: int | None = None
    threshold: int | None = None
    raised_at: datetime


class AlertCountResponse(BaseModel):
    count: int


class ClearedResponse(BaseModel):
    removed: int
