"""Inventory bounded context — Stock Ledger and Low-Stock Alerting.

Holds available quantity and a reorder threshold per SKU, deducts stock for
paid orders, and records a low-stock alert every time a mutation leaves an
item at or below its threshold.
"""

import structlog
from protean.domain import Domain

inventory = Domain(name="inventory")

logger = structlog.get_logger(__name__)
