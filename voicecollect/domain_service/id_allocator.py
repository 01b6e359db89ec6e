"""Sequential speaker identifier allocation.

Identifiers are issued from a single shared counter record. Each allocation
reads the record, computes the next value and writes it back with a
conditional update that only succeeds if nobody else wrote in between. A lost
race is retried against the fresh record, with bounded exponential backoff.

Numbers consumed by an allocation whose caller later fails are never handed
out again: gaps are allowed, duplicates are not.
"""

import logging
import random
import threading
import time
from collections.abc import Callable
from typing import Any

from voicecollect.database.exceptions import CounterConflictError
from voicecollect.domain.models import CounterSnapshot
from voicecollect.domain.protocols import CounterStoreProtocol
from voicecollect.domain.speaker_id import format_speaker_id
from voicecollect.domain_service.exceptions import (
    CorruptCounterStateError,
    RetriesExhaustedError,
)
from voicecollect.domain_service.settings import AllocatorSettings, allocator_settings

logger = logging.getLogger(__name__)

# Counters whose corruption has already been reported by this process
_reported_corrupt: set[str] = set()
_reported_lock = threading.Lock()


def _report_corruption_once(counter_name: str, raw: Any, floor: int) -> None:
    with _reported_lock:
        if counter_name in _reported_corrupt:
            return
        _reported_corrupt.add(counter_name)
    logger.warning(
        f"Counter '{counter_name}' holds invalid value {raw!r}; "
        f"continuing from floor {floor}"
    )


class SequentialIdAllocator:
    """Allocates ``id<N>`` speaker identifiers from a shared counter."""

    def __init__(
        self,
        store: CounterStoreProtocol,
        settings: AllocatorSettings = allocator_settings,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize allocator.

        Args:
            store: Counter store offering conditional writes.
            settings: Allocation settings.
            sleep: Delay function used between attempts.
        """
        self.store = store
        self.settings = settings
        self._sleep = sleep

    @property
    def floor(self) -> int:
        """Effective last value of a counter that has never issued anything."""
        return self.settings.starting_value - 1

    def allocate_next_id(self) -> str:
        """Issue the next speaker identifier.

        Returns:
            Identifier such as ``id90000``.

        Raises:
            StoreUnavailableError: If the counter store cannot be reached.
            RetriesExhaustedError: If every attempt lost a concurrent update.
            CorruptCounterStateError: If the stored value is invalid and
                clamping is disabled.
        """
        name = self.settings.counter_name
        max_attempts = self.settings.max_attempts

        for attempt in range(1, max_attempts + 1):
            next_value = self._try_increment(name)
            if next_value is not None:
                speaker_id = format_speaker_id(next_value, self.settings.prefix)
                logger.info(f"Allocated speaker ID {speaker_id} (attempt {attempt})")
                return speaker_id

            logger.debug(f"Counter '{name}' conflict on attempt {attempt}")
            if attempt < max_attempts:
                self._sleep(self._backoff_delay(attempt))

        logger.warning(
            f"Gave up allocating from counter '{name}' after {max_attempts} attempts"
        )
        raise RetriesExhaustedError(name, max_attempts)

    def _try_increment(self, name: str) -> int | None:
        """Run one read-compute-write cycle.

        Returns:
            The newly committed value, or None if a concurrent writer won.
        """
        try:
            snapshot = self.store.read(name)
        except CounterConflictError:
            return None

        next_value = self._last_value(name, snapshot) + 1

        if snapshot is None:
            committed = self.store.create(name, next_value)
        else:
            committed = self.store.compare_and_set(name, snapshot.version, next_value)
        return next_value if committed else None

    def _last_value(self, name: str, snapshot: CounterSnapshot | None) -> int:
        if snapshot is None:
            return self.floor

        value = snapshot.value
        if value is not None and value >= self.floor:
            return value

        if not self.settings.clamp_corrupt_counter:
            raise CorruptCounterStateError(
                f"Counter '{name}' holds invalid value {snapshot.raw_value!r}"
            )
        _report_corruption_once(name, snapshot.raw_value, self.floor)
        return self.floor

    def _backoff_delay(self, attempt: int) -> float:
        """Exponential backoff with full jitter."""
        ceiling = min(
            self.settings.backoff_max,
            self.settings.backoff_base * (2 ** (attempt - 1)),
        )
        return random.uniform(0, ceiling)
