"""InventoryItem aggregate (CQRS) — the core of the inventory domain.

One record per SKU with the quantity available for sale and the reorder
threshold at or below which the SKU counts as low on stock. This is a
standard CQRS aggregate (not event sourced); events are raised for the
audit trail and for downstream consumers.

Invariants:
    available never goes negative. A deduction that would make it negative
    is rejected with InsufficientStock, never clamped.

Low stock:
    available <= threshold, with both fields set. An item missing either
    value is never low on stock.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String

from inventory.domain import inventory
from inventory.stock.events import (
    InventoryItemCreated,
    InventoryItemUpdated,
    LowStockDetected,
    StockDeducted,
)
from shared.errors import InsufficientStock, SkuNotFound


@inventory.aggregate
class InventoryItem:
    """Stock ledger entry for one SKU."""

    sku = String(required=True, max_length=50)
    available = Integer(min_value=0)
    threshold = Integer(min_value=0)
    last_updated = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, sku, available, threshold):
        """Register a SKU in the ledger.

        The low-stock check runs right away, so an item created at or below
        its threshold raises LowStockDetected as part of creation.
        """
        now = datetime.now(UTC)
        item = cls(
            sku=sku,
            available=available,
            threshold=threshold,
            last_updated=now,
        )
        item.raise_(
            InventoryItemCreated(
                inventory_item_id=str(item.id),
                sku=sku,
                available=available,
                threshold=threshold,
                created_at=now,
            )
        )
        item._check_low_stock()
        return item

    # -------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------
    def is_low_stock(self) -> bool:
        if self.available is None or self.threshold is None:
            return False
        return self.available <= self.threshold

    def _check_low_stock(self) -> bool:
        """Raise LowStockDetected if available is at or below threshold."""
        if not self.is_low_stock():
            return False

        self.raise_(
            LowStockDetected(
                inventory_item_id=str(self.id),
                sku=self.sku,
                current_available=self.available,
                threshold=self.threshold,
                detected_at=self.last_updated or datetime.now(UTC),
            )
        )
        return True

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def update_levels(self, available=None, threshold=None) -> bool:
        """Partial update: fields left as None keep their current value.

        Returns True when the item is low on stock afterwards.
        """
        previous_available = self.available
        previous_threshold = self.threshold

        if available is not None:
            self.available = available
        if threshold is not None:
            self.threshold = threshold
        self.last_updated = datetime.now(UTC)

        self.raise_(
            InventoryItemUpdated(
                inventory_item_id=str(self.id),
                sku=self.sku,
                previous_available=previous_available,
                available=self.available,
                previous_threshold=previous_threshold,
                threshold=self.threshold,
                updated_at=self.last_updated,
            )
        )
        return self._check_low_stock()

    def deduct(self, quantity) -> bool:
        """Take `quantity` units out of stock.

        Requesting exactly the available quantity succeeds and leaves zero.
        Returns True when the item is low on stock afterwards.
        """
        if quantity is None or quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})

        available = self.available or 0
        if available < quantity:
            raise InsufficientStock(self.sku, available, quantity)

        self.available = available - quantity
        self.last_updated = datetime.now(UTC)

        self.raise_(
            StockDeducted(
                inventory_item_id=str(self.id),
                sku=self.sku,
                quantity=quantity,
                previous_available=available,
                new_available=self.available,
                deducted_at=self.last_updated,
            )
        )
        return self._check_low_stock()


@inventory.repository(part_of=InventoryItem)
class InventoryItemRepository:
    """SKU-keyed access to the ledger."""

    def find_by_sku(self, sku):
        results = self._dao.query.filter(sku=sku).all().items
        return results[0] if results else None

    def get_by_sku(self, sku):
        item = self.find_by_sku(sku)
        if item is None:
            raise SkuNotFound(sku)
        return item

    def list_all(self):
        return self._dao.query.limit(None).all().items
