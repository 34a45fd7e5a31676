"""LowStockAlert aggregate — durable record of a low-stock condition.

Alerts are written once by the pipeline and never modified afterwards.
They are removed only in bulk by the administrative clear command.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Integer, String

from inventory.domain import inventory


def _utc_now():
    return datetime.now(UTC)


@inventory.aggregate
class LowStockAlert:
    sku = String(required=True, max_length=50)
    available = Integer()
    threshold = Integer()
    raised_at = DateTime(default=_utc_now)

    @classmethod
    def raise_for(cls, item):
        return cls(
            sku=item.sku,
            available=item.available,
            threshold=item.threshold,
            raised_at=item.last_updated or _utc_now(),
        )


@inventory.repository(part_of=LowStockAlert)
class LowStockAlertRepository:
    def list_all(self):
        # Queries are capped at the provider default (100 rows) unless lifted.
        return self._dao.query.limit(None).all().items

    def for_sku(self, sku):
        return self._dao.query.filter(sku=sku).limit(None).all().items

    def count(self) -> int:
        return self._dao.query.all().total

    def delete_all(self) -> int:
        alerts = self.list_all()
        for alert in alerts:
            self._dao.delete(alert)
        return len(alerts)
