"""Tests for SequentialIdAllocator."""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlalchemy import Engine, create_engine, text

from voicecollect.database import CounterStore, InMemoryCounterStore
from voicecollect.database.exceptions import CounterConflictError, StoreUnavailableError
from voicecollect.domain.models import CounterSnapshot
from voicecollect.domain.speaker_id import parse_speaker_id
from voicecollect.domain_service import SequentialIdAllocator
from voicecollect.domain_service.exceptions import (
    CorruptCounterStateError,
    RetriesExhaustedError,
)
from voicecollect.domain_service.settings import AllocatorSettings


def _no_sleep(_: float) -> None:
    return None


class AlwaysConflictingStore(InMemoryCounterStore):
    """Counter store where every conditional write loses a race."""

    def __init__(self) -> None:
        super().__init__({"speaker_id": 90010})
        self.write_attempts = 0

    def compare_and_set(self, name: str, expected_version: int, value: int) -> bool:
        self.write_attempts += 1
        return False


class UnavailableOnWriteStore(InMemoryCounterStore):
    """Counter store whose backend goes away before the write lands."""

    def compare_and_set(self, name: str, expected_version: int, value: int) -> bool:
        raise StoreUnavailableError("connection refused")


class ConflictThenSucceedStore(InMemoryCounterStore):
    """Counter store whose first reads are blocked by a writer."""

    def __init__(self, blocked_reads: int) -> None:
        super().__init__()
        self.blocked_reads = blocked_reads

    def read(self, name: str) -> CounterSnapshot | None:
        if self.blocked_reads > 0:
            self.blocked_reads -= 1
            raise CounterConflictError("database is locked")
        return super().read(name)


@pytest.fixture
def memory_store() -> InMemoryCounterStore:
    return InMemoryCounterStore()


@pytest.fixture
def allocator(
    memory_store: InMemoryCounterStore,
    allocator_settings: AllocatorSettings,
) -> SequentialIdAllocator:
    return SequentialIdAllocator(memory_store, allocator_settings, sleep=_no_sleep)


class TestSequentialAllocation:
    """Tests for allocation on a healthy store."""

    def test_first_id_on_empty_store(self, allocator: SequentialIdAllocator) -> None:
        """The first identifier is the configured starting value."""
        assert allocator.allocate_next_id() == "id90000"

    def test_sequential_calls_are_contiguous(
        self, allocator: SequentialIdAllocator
    ) -> None:
        ids = [allocator.allocate_next_id() for _ in range(5)]

        assert ids == ["id90000", "id90001", "id90002", "id90003", "id90004"]

    def test_counter_holds_last_issued_value(
        self,
        allocator: SequentialIdAllocator,
        memory_store: InMemoryCounterStore,
    ) -> None:
        allocator.allocate_next_id()
        allocator.allocate_next_id()

        assert memory_store.peek("speaker_id") == 90001

    def test_continues_from_existing_counter(
        self, allocator_settings: AllocatorSettings
    ) -> None:
        store = InMemoryCounterStore({"speaker_id": 90041})
        allocator = SequentialIdAllocator(store, allocator_settings, sleep=_no_sleep)

        assert allocator.allocate_next_id() == "id90042"

    def test_custom_prefix_and_start(self) -> None:
        settings = AllocatorSettings(
            counter_name="other",
            prefix="spk",
            starting_value=1,
            backoff_base=0.0,
            backoff_max=0.0,
        )
        allocator = SequentialIdAllocator(
            InMemoryCounterStore(), settings, sleep=_no_sleep
        )

        assert allocator.allocate_next_id() == "spk1"
        assert allocator.allocate_next_id() == "spk2"

    def test_floor_is_one_below_start(self, allocator: SequentialIdAllocator) -> None:
        assert allocator.floor == 89999

    def test_sql_store_sequential(
        self, engine: Engine, allocator_settings: AllocatorSettings
    ) -> None:
        allocator = SequentialIdAllocator(
            CounterStore(engine), allocator_settings, sleep=_no_sleep
        )

        ids = [allocator.allocate_next_id() for _ in range(3)]

        assert ids == ["id90000", "id90001", "id90002"]


class TestConcurrentAllocation:
    """Tests for uniqueness under concurrent callers."""

    def test_memory_store_no_duplicates(self) -> None:
        settings = AllocatorSettings(
            max_attempts=1000, backoff_base=0.0, backoff_max=0.0
        )
        store = InMemoryCounterStore()
        allocator = SequentialIdAllocator(store, settings, sleep=_no_sleep)

        with ThreadPoolExecutor(max_workers=16) as pool:
            ids = list(pool.map(lambda _: allocator.allocate_next_id(), range(200)))

        assert len(set(ids)) == 200
        numbers = sorted(parse_speaker_id(i) for i in ids)
        assert numbers == list(range(90000, 90200))

    def test_sql_store_no_duplicates(self, engine: Engine) -> None:
        """Separate allocators sharing one database never issue the same ID."""
        settings = AllocatorSettings(
            max_attempts=200, backoff_base=0.001, backoff_max=0.01
        )

        def allocate(_: int) -> str:
            allocator = SequentialIdAllocator(CounterStore(engine), settings)
            return allocator.allocate_next_id()

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(allocate, range(60)))

        assert len(set(ids)) == 60
        assert all(parse_speaker_id(i) >= 90000 for i in ids)
        assert CounterStore(engine).peek("speaker_id") == max(
            parse_speaker_id(i) for i in ids
        )

    def test_lost_read_is_retried(self, allocator_settings: AllocatorSettings) -> None:
        store = ConflictThenSucceedStore(blocked_reads=2)
        allocator = SequentialIdAllocator(store, allocator_settings, sleep=_no_sleep)

        assert allocator.allocate_next_id() == "id90000"


class TestCorruptCounter:
    """Tests for invalid stored counter values."""

    @pytest.mark.parametrize("raw_value", ["abc", "", None, 3.5, -5, 12])
    def test_invalid_value_is_clamped(
        self, raw_value: object, allocator_settings: AllocatorSettings
    ) -> None:
        store = InMemoryCounterStore({"speaker_id": raw_value})
        allocator = SequentialIdAllocator(store, allocator_settings, sleep=_no_sleep)

        assert allocator.allocate_next_id() == "id90000"
        assert allocator.allocate_next_id() == "id90001"

    def test_numeric_string_is_accepted(
        self, allocator_settings: AllocatorSettings
    ) -> None:
        store = InMemoryCounterStore({"speaker_id": "90100"})
        allocator = SequentialIdAllocator(store, allocator_settings, sleep=_no_sleep)

        assert allocator.allocate_next_id() == "id90101"

    def test_negative_value_in_sql_store_is_clamped(
        self, engine: Engine, allocator_settings: AllocatorSettings
    ) -> None:
        with engine.begin() as connection:
            connection.execute(
                text(
                    "INSERT INTO counters (name, last_issued_value, version, updated_at) "
                    "VALUES ('speaker_id', -5, 1, '2024-01-01 00:00:00')"
                )
            )
        allocator = SequentialIdAllocator(
            CounterStore(engine), allocator_settings, sleep=_no_sleep
        )

        assert allocator.allocate_next_id() == "id90000"

    def test_corruption_logged_once(self, caplog: pytest.LogCaptureFixture) -> None:
        settings = AllocatorSettings(
            counter_name="corrupt_logged_once", backoff_base=0.0, backoff_max=0.0
        )
        store = InMemoryCounterStore({"corrupt_logged_once": "garbage"})
        allocator = SequentialIdAllocator(store, settings, sleep=_no_sleep)

        with caplog.at_level(logging.WARNING):
            allocator.allocate_next_id()
            store.compare_and_set("corrupt_logged_once", 2, -1)
            allocator.allocate_next_id()

        warnings = [r for r in caplog.records if "invalid value" in r.getMessage()]
        assert len(warnings) == 1

    def test_clamp_disabled_raises(self) -> None:
        settings = AllocatorSettings(
            clamp_corrupt_counter=False, backoff_base=0.0, backoff_max=0.0
        )
        store = InMemoryCounterStore({"speaker_id": "abc"})
        allocator = SequentialIdAllocator(store, settings, sleep=_no_sleep)

        with pytest.raises(CorruptCounterStateError):
            allocator.allocate_next_id()

        assert store.read("speaker_id") == CounterSnapshot(raw_value="abc", version=1)


class TestAllocationFailures:
    """Tests for exhausted retries and unavailable stores."""

    def test_retries_exhausted(self) -> None:
        settings = AllocatorSettings(max_attempts=4, backoff_base=0.0, backoff_max=0.0)
        store = AlwaysConflictingStore()
        delays: list[float] = []
        allocator = SequentialIdAllocator(store, settings, sleep=delays.append)

        with pytest.raises(RetriesExhaustedError) as exc_info:
            allocator.allocate_next_id()

        assert exc_info.value.attempts == 4
        assert exc_info.value.counter_name == "speaker_id"
        assert store.write_attempts == 4
        # No sleep after the final attempt
        assert len(delays) == 3
        assert store.peek("speaker_id") == 90010

    def test_exhaustion_logged_as_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        settings = AllocatorSettings(max_attempts=2, backoff_base=0.0, backoff_max=0.0)
        allocator = SequentialIdAllocator(
            AlwaysConflictingStore(), settings, sleep=_no_sleep
        )

        with caplog.at_level(logging.WARNING), pytest.raises(RetriesExhaustedError):
            allocator.allocate_next_id()

        assert any(r.levelno == logging.WARNING for r in caplog.records)

    def test_store_unavailable_leaves_counter_unchanged(
        self, allocator_settings: AllocatorSettings
    ) -> None:
        store = UnavailableOnWriteStore({"speaker_id": 90005})
        allocator = SequentialIdAllocator(store, allocator_settings, sleep=_no_sleep)

        with pytest.raises(StoreUnavailableError):
            allocator.allocate_next_id()

        assert store.read("speaker_id") == CounterSnapshot(raw_value=90005, version=1)

    def test_unreachable_database(
        self, tmp_path, allocator_settings: AllocatorSettings
    ) -> None:
        missing = tmp_path / "no_such_dir" / "counter.db"
        engine = create_engine(f"sqlite:///{missing}")
        allocator = SequentialIdAllocator(
            CounterStore(engine), allocator_settings, sleep=_no_sleep
        )

        with pytest.raises(StoreUnavailableError):
            allocator.allocate_next_id()

    def test_backoff_is_bounded(self) -> None:
        settings = AllocatorSettings(max_attempts=12, backoff_base=0.01, backoff_max=0.05)
        delays: list[float] = []
        allocator = SequentialIdAllocator(
            AlwaysConflictingStore(), settings, sleep=delays.append
        )

        with pytest.raises(RetriesExhaustedError):
            allocator.allocate_next_id()

        assert len(delays) == 11
        assert all(0.0 <= d <= 0.05 for d in delays)
