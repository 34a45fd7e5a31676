"""FastAPI routes for the Inventory domain — stock ledger and low-stock alerts."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from inventory.alerts.management import ClearLowStockAlerts, ClearLowStockEventLog
from inventory.alerts.queries import (
    count_alerts,
    list_alerts,
    list_alerts_for_sku,
    list_event_log_entries,
)
from inventory.api.schemas import (
    AlertCountResponse,
    ClearedResponse,
    CreateInventoryItemRequest,
    DeductStockRequest,
    InventoryItemResponse,
    LowStockAlertResponse,
    LowStockEntryResponse,
    UpdateInventoryItemRequest,
)
from inventory.stock.ledger import CreateInventoryItem, DeductStock, UpdateInventoryItem
from inventory.stock.queries import get_inventory_item, list_inventory_items, list_low_stock_items

# ---------------------------------------------------------------------------
# Inventory Router
# ---------------------------------------------------------------------------
inventory_router = APIRouter(prefix="/inventory", tags=["inventory"])


@inventory_router.post("", status_code=201, response_model=InventoryItemResponse)
async def create_inventory_item(body: CreateInventoryItemRequest) -> InventoryItemResponse:
    command = CreateInventoryItem(
        sku=body.sku,
        available=body.available,
        threshold=body.threshold,
    )
    current_domain.process(command, asynchronous=False)
    return InventoryItemResponse.from_item(get_inventory_item(body.sku))


@inventory_router.get("", response_model=list[InventoryItemResponse])
async def list_items() -> list[InventoryItemResponse]:
    return [InventoryItemResponse.from_item(item) for item in list_inventory_items()]


@inventory_router.get("/low-stock", response_model=list[InventoryItemResponse])
async def low_stock_items() -> list[InventoryItemResponse]:
    return [InventoryItemResponse.from_item(item) for item in list_low_stock_items()]


# ---------------------------------------------------------------------------
# Event log and alerts
# ---------------------------------------------------------------------------
@inventory_router.get("/events", response_model=list[LowStockEntryResponse])
async def event_log() -> list[LowStockEntryResponse]:
    return [LowStockEntryResponse(**entry.to_dict()) for entry in list_event_log_entries()]


@inventory_router.delete("/events", response_model=ClearedResponse)
async def clear_event_log() -> ClearedResponse:
    removed = current_domain.process(ClearLowStockEventLog(), asynchronous=False)
    return ClearedResponse(removed=removed)


@inventory_router.get("/alerts", response_model=list[LowStockAlertResponse])
async def alerts() -> list[LowStockAlertResponse]:
    return [LowStockAlertResponse.from_alert(alert) for alert in list_alerts()]


@inventory_router.get("/alerts/count", response_model=AlertCountResponse)
async def alert_count() -> AlertCountResponse:
    return AlertCountResponse(count=count_alerts())


@inventory_router.get("/alerts/{sku}", response_model=list[LowStockAlertResponse])
async def alerts_for_sku(sku: str) -> list[LowStockAlertResponse]:
    return [LowStockAlertResponse.from_alert(alert) for alert in list_alerts_for_sku(sku)]


@inventory_router.delete("/alerts", response_model=ClearedResponse)
async def clear_alerts() -> ClearedResponse:
    removed = current_domain.process(ClearLowStockAlerts(), asynchronous=False)
    return ClearedResponse(removed=removed)


# ---------------------------------------------------------------------------
# Single item (declared last so the fixed paths above win)
# ---------------------------------------------------------------------------
@inventory_router.get("/{sku}", response_model=InventoryItemResponse)
async def get_item(sku: str) -> InventoryItemResponse:
    return InventoryItemResponse.from_item(get_inventory_item(sku))


@inventory_router.put("/{sku}", response_model=InventoryItemResponse)
async def update_item(sku: str, body: UpdateInventoryItemRequest) -> InventoryItemResponse:
    command = UpdateInventoryItem(
        sku=sku,
        available=body.available,
        threshold=body.threshold,
    )
    current_domain.process(command, asynchronous=False)
    return InventoryItemResponse.from_item(get_inventory_item(sku))


@inventory_router.post("/{sku}/deduct", response_model=InventoryItemResponse)
async def deduct_stock(sku: str, body: DeductStockRequest) -> InventoryItemResponse:
    command = DeductStock(sku=sku, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return InventoryItemResponse.from_item(get_inventory_item(sku))
