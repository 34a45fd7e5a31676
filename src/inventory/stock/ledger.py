"""Inventory ledger — commands and handler.

Every mutation ends with the low-stock check. When the item is at or below
its threshold afterwards, the alert pipeline runs inside the same unit of
work as the ledger write.
"""

import structlog
from protean import handle
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from inventory.alerts.pipeline import LowStockAlertPipeline
from inventory.domain import inventory
from inventory.stock.stock import InventoryItem
from shared.errors import DuplicateSku

logger = structlog.get_logger(__name__)


@inventory.command(part_of="InventoryItem")
class CreateInventoryItem:
    """Register a new SKU with its starting stock and reorder threshold."""

    sku = String(required=True, max_length=50)
    available = Integer(required=True, min_value=0)
    threshold = Integer(required=True, min_value=0)


@inventory.command(part_of="InventoryItem")
class UpdateInventoryItem:
    """Set available and/or threshold. Omitted fields keep their value."""

    sku = String(required=True, max_length=50)
    available = Integer(min_value=0)
    threshold = Integer(min_value=0)


@inventory.command(part_of="InventoryItem")
class DeductStock:
    """Take stock out of the ledger."""

    sku = String(required=True, max_length=50)
    quantity = Integer(required=True)


@inventory.command_handler(part_of=InventoryItem)
class InventoryLedgerHandler:
    @handle(CreateInventoryItem)
    def create_inventory_item(self, command):
        repo = current_domain.repository_for(InventoryItem)
        if repo.find_by_sku(command.sku) is not None:
            raise DuplicateSku(command.sku)

        item = InventoryItem.create(
            sku=command.sku,
            available=command.available,
            threshold=command.threshold,
        )
        repo.add(item)
        logger.info(
            "Inventory item created",
            sku=item.sku,
            available=item.available,
            threshold=item.threshold,
        )
        self._alert_if_low(item)
        return str(item.id)

    @handle(UpdateInventoryItem)
    def update_inventory_item(self, command):
        repo = current_domain.repository_for(InventoryItem)
        item = repo.get_by_sku(command.sku)
        item.update_levels(available=command.available, threshold=command.threshold)
        repo.add(item)
        logger.info(
            "Inventory item updated",
            sku=item.sku,
            available=item.available,
            threshold=item.threshold,
        )
        self._alert_if_low(item)
        return str(item.id)

    @handle(DeductStock)
    def deduct_stock(self, command):
        repo = current_domain.repository_for(InventoryItem)
        item = repo.get_by_sku(command.sku)
        item.deduct(command.quantity)
        repo.add(item)
        logger.info(
            "Stock deducted",
            sku=item.sku,
            quantity=command.quantity,
            available=item.available,
        )
        self._alert_if_low(item)
        return item.available

    def _alert_if_low(self, item):
        if item.is_low_stock():
            LowStockAlertPipeline().trigger(item)
