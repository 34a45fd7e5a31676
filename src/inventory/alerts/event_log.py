"""In-memory low-stock event log.

An append-only list of low-stock entries kept for the lifetime of the
process. It starts empty and is only ever cleared by an explicit
administrative call. The log is owned by this module and can be swapped
out (for tests) through ``set_event_log`` / ``reset_event_log``.
"""

import threading
from dataclasses import asdict, dataclass
from datetime import datetime


@dataclass(frozen=True)
class LowStockEntry:
    sku: str
    available: int | None
    threshold: int | None
    raised_at: datetime

    def to_dict(self) -> dict:
        return asdict(self)


class LowStockEventLog:
    def __init__(self) -> None:
        self._entries: list[LowStockEntry] = []
        self._lock = threading.Lock()

    def append(self, entry: LowStockEntry) -> None:
        with self._lock:
            self._entries.append(entry)

    def entries(self) -> list[LowStockEntry]:
        """Snapshot of the log, oldest first."""
        with self._lock:
            return list(self._entries)

    def clear(self) -> int:
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
            return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_event_log: LowStockEventLog | None = None


def get_event_log() -> LowStockEventLog:
    global _event_log
    if _event_log is None:
        _event_log = LowStockEventLog()
    return _event_log


def set_event_log(event_log: LowStockEventLog) -> None:
    """Override the event log (for testing)."""
    global _event_log
    _event_log = event_log


def reset_event_log() -> None:
    """Reset to a fresh, empty log."""
    global _event_log
    _event_log = None
