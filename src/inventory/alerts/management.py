"""Administrative commands for low-stock alerts and the event log."""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from inventory.alerts.alert import LowStockAlert
from inventory.alerts.event_log import get_event_log
from inventory.domain import inventory

logger = structlog.get_logger(__name__)


@inventory.command(part_of="LowStockAlert")
class ClearLowStockAlerts:
    """Delete every persisted low-stock alert."""

    requested_by = String(max_length=100)


@inventory.command(part_of="LowStockAlert")
class ClearLowStockEventLog:
    """Empty the in-memory low-stock event log."""

    requested_by = String(max_length=100)


@inventory.command_handler(part_of=LowStockAlert)
class LowStockAlertManagementHandler:
    @handle(ClearLowStockAlerts)
    def clear_alerts(self, command):
        removed = current_domain.repository_for(LowStockAlert).delete_all()
        logger.info("Low stock alerts cleared", removed=removed)
        return removed

    @handle(ClearLowStockEventLog)
    def clear_event_log(self, command):
        removed = get_event_log().clear()
        logger.info("Low stock event log cleared", removed=removed)
        return removed
