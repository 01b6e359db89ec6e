"""In-process counter store."""

import threading
from typing import Any

from voicecollect.domain.models import CounterSnapshot


class InMemoryCounterStore:
    """Counter store holding records in a dict guarded by a lock.

    Implements CounterStoreProtocol for single-process deployments and tests.
    Values are kept as given, so a seeded non-integer survives until the next
    successful write.
    """

    def __init__(self, records: dict[str, Any] | None = None) -> None:
        """Initialize store.

        Args:
            records: Optional initial raw values keyed by counter name
        """
        self._lock = threading.Lock()
        self._records: dict[str, tuple[Any, int]] = {
            name: (value, 1) for name, value in (records or {}).items()
        }

    def read(self, name: str) -> CounterSnapshot | None:
        with self._lock:
            record = self._records.get(name)
        if record is None:
            return None
        value, version = record
        return CounterSnapshot(raw_value=value, version=version)

    def create(self, name: str, value: int) -> bool:
        with self._lock:
            if name in self._records:
                return False
            self._records[name] = (value, 1)
            return True

    def compare_and_set(self, name: str, expected_version: int, value: int) -> bool:
        with self._lock:
            record = self._records.get(name)
            if record is None or record[1] != expected_version:
                return False
            self._records[name] = (value, expected_version + 1)
            return True

    def peek(self, name: str) -> int | None:
        snapshot = self.read(name)
        return None if snapshot is None else snapshot.value
