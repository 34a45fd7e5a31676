"""Read side of the inventory ledger."""

from protean.utils.globals import current_domain

from inventory.stock.stock import InventoryItem


def get_inventory_item(sku):
    return current_domain.repository_for(InventoryItem).get_by_sku(sku)


def list_inventory_items():
    return current_domain.repository_for(InventoryItem).list_all()


def list_low_stock_items():
    return [item for item in list_inventory_items() if item.is_low_stock()]
