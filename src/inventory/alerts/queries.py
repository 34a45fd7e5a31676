"""Read side for low-stock alerts and the event log."""

from protean.utils.globals import current_domain

from inventory.alerts.alert import LowStockAlert
from inventory.alerts.event_log import get_event_log


def list_alerts():
    """All alerts, newest first. Alerts raised at the same instant keep
    their reverse insertion order."""
    alerts = current_domain.repository_for(LowStockAlert).list_all()
    return list(reversed(sorted(alerts, key=lambda alert: alert.raised_at)))


def list_alerts_for_sku(sku):
    """Alerts for one SKU, oldest first."""
    alerts = current_domain.repository_for(LowStockAlert).for_sku(sku)
    return sorted(alerts, key=lambda alert: alert.raised_at)


def count_alerts() -> int:
    return current_domain.repository_for(LowStockAlert).count()


def list_event_log_entries():
    return get_event_log().entries()
