"""Low-stock alert pipeline.

Invoked by the ledger handler after every mutation that leaves an item at
or below its threshold. Each invocation persists a new ``LowStockAlert``
and then appends a matching entry to the in-memory event log. There is no
deduplication: three consecutive low-stock mutations on the same SKU give
three alerts.
"""

import structlog
from protean.utils.globals import current_domain

from inventory.alerts.alert import LowStockAlert
from inventory.alerts.event_log import LowStockEntry, get_event_log

logger = structlog.get_logger(__name__)


class LowStockAlertPipeline:
    def __init__(self, event_log=None):
        self._event_log = event_log

    @property
    def event_log(self):
        return self._event_log or get_event_log()

    def trigger(self, item) -> LowStockAlert:
        alert = LowStockAlert.raise_for(item)
        current_domain.repository_for(LowStockAlert).add(alert)

        self.event_log.append(
            LowStockEntry(
                sku=alert.sku,
                available=alert.available,
                threshold=alert.threshold,
                raised_at=alert.raised_at,
            )
        )
        logger.warning(
            "Low stock alert",
            sku=alert.sku,
            available=alert.available,
            threshold=alert.threshold,
        )
        return alert
