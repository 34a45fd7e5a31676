"""Domain events for the InventoryItem aggregate.

All events are versioned, immutable facts about stock movements. They are
persisted to the event store when the unit of work commits.
"""

from protean.fields import DateTime, Identifier, Integer, String

from inventory.domain import inventory


@inventory.event(part_of="InventoryItem")
class InventoryItemCreated:
    """A SKU was added to the ledger."""

    __version__ = 1

    inventory_item_id = Identifier(required=True)
    sku = String(required=True)
    available = Integer(required=True)
    threshold = Integer(required=True)
    created_at = DateTime(required=True)


@inventory.event(part_of="InventoryItem")
class InventoryItemUpdated:
    """Available quantity and/or threshold were set explicitly."""

    __version__ = 1

    inventory_item_id = Identifier(required=True)
    sku = String(required=True)
    previous_available = Integer()
    available = Integer()
    previous_threshold = Integer()
    threshold = Integer()
    updated_at = DateTime(required=True)


@inventory.event(part_of="InventoryItem")
class StockDeducted:
    """Stock was taken out of the ledger, usually for a paid order."""

    __version__ = 1

    inventory_item_id = Identifier(required=True)
    sku = String(required=True)
    quantity = Integer(required=True)
    previous_available = Integer(required=True)
    new_available = Integer(required=True)
    deducted_at = DateTime(required=True)


@inventory.event(part_of="InventoryItem")
class LowStockDetected:
    """Available stock is at or below the reorder threshold."""

    __version__ = 1

    inventory_item_id = Identifier(required=True)
    sku = String(required=True)
    current_available = Integer(required=True)
    threshold = Integer(required=True)
    detected_at = DateTime(required=True)
