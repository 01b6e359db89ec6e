"""Counter snapshot domain model."""

from dataclasses import dataclass
from typing import Any


def coerce_counter_value(raw: Any) -> int | None:
    """Parse a stored counter value, returning None if it is not an integer."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class CounterSnapshot:
    """State of a counter record as read from the store.

    raw_value is returned exactly as stored so callers can detect corruption.
    version changes on every successful write.
    """

    raw_value: Any
    version: int

    @property
    def value(self) -> int | None:
        """raw_value as an integer, or None if it does not parse."""
        return coerce_counter_value(self.raw_value)
