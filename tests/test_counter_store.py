"""Tests for CounterStore and InMemoryCounterStore."""

import pytest
from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import OperationalError

from voicecollect.database import CounterStore, InMemoryCounterStore
from voicecollect.database.exceptions import CounterConflictError, StoreUnavailableError
from voicecollect.database.stores.counter_store import _is_contention
from voicecollect.domain.models import CounterSnapshot


@pytest.fixture
def store(engine: Engine) -> CounterStore:
    """Create a CounterStore instance."""
    return CounterStore(engine)


class TestCounterStoreRead:
    """Tests for read and peek."""

    def test_read_missing(self, store: CounterStore) -> None:
        assert store.read("speaker_id") is None

    def test_read_after_create(self, store: CounterStore) -> None:
        store.create("speaker_id", 90000)

        assert store.read("speaker_id") == CounterSnapshot(raw_value=90000, version=1)

    def test_peek(self, store: CounterStore) -> None:
        assert store.peek("speaker_id") is None
        store.create("speaker_id", 90003)

        assert store.peek("speaker_id") == 90003


class TestCounterStoreWrite:
    """Tests for create and compare_and_set."""

    def test_create_twice_returns_false(self, store: CounterStore) -> None:
        assert store.create("speaker_id", 90000) is True
        assert store.create("speaker_id", 90000) is False

    def test_compare_and_set_bumps_version(self, store: CounterStore) -> None:
        store.create("speaker_id", 90000)

        assert store.compare_and_set("speaker_id", 1, 90001) is True
        assert store.read("speaker_id") == CounterSnapshot(raw_value=90001, version=2)

    def test_compare_and_set_stale_version(self, store: CounterStore) -> None:
        """A write based on an outdated read is rejected and changes nothing."""
        store.create("speaker_id", 90000)
        store.compare_and_set("speaker_id", 1, 90001)

        assert store.compare_and_set("speaker_id", 1, 90001) is False
        assert store.read("speaker_id") == CounterSnapshot(raw_value=90001, version=2)

    def test_compare_and_set_missing_record(self, store: CounterStore) -> None:
        assert store.compare_and_set("speaker_id", 1, 90000) is False

    def test_counters_are_independent(self, store: CounterStore) -> None:
        store.create("a", 1)
        store.create("b", 100)
        store.compare_and_set("a", 1, 2)

        assert store.peek("a") == 2
        assert store.peek("b") == 100


class TestCounterStoreErrors:
    """Tests for driver error translation."""

    def test_unreachable_database(self, tmp_path) -> None:
        engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'db.sqlite'}")
        store = CounterStore(engine)

        with pytest.raises(StoreUnavailableError):
            store.read("speaker_id")
        with pytest.raises(StoreUnavailableError):
            store.compare_and_set("speaker_id", 1, 90000)

    def test_lock_error_is_contention(self) -> None:
        exc = OperationalError("UPDATE", {}, Exception("database is locked"))

        assert _is_contention(exc) is True

    def test_other_error_is_not_contention(self) -> None:
        exc = OperationalError("SELECT", {}, Exception("unable to open database file"))

        assert _is_contention(exc) is False

    def test_postgres_serialization_failure_is_contention(self) -> None:
        class PgError(Exception):
            pgcode = "40001"

        exc = OperationalError("UPDATE", {}, PgError("could not serialize access"))

        assert _is_contention(exc) is True

    def test_locked_read_raises_conflict(self, store: CounterStore) -> None:
        def raise_locked():
            raise OperationalError("SELECT", {}, Exception("database is locked"))

        with pytest.raises(CounterConflictError):
            with store._translate_errors():
                raise_locked()


class TestInMemoryCounterStore:
    """Tests for InMemoryCounterStore."""

    def test_seeded_value_kept_as_given(self) -> None:
        store = InMemoryCounterStore({"speaker_id": "abc"})

        assert store.read("speaker_id") == CounterSnapshot(raw_value="abc", version=1)
        assert store.peek("speaker_id") is None

    def test_compare_and_set(self) -> None:
        store = InMemoryCounterStore()
        assert store.create("speaker_id", 5) is True
        assert store.create("speaker_id", 6) is False

        assert store.compare_and_set("speaker_id", 1, 6) is True
        assert store.compare_and_set("speaker_id", 1, 7) is False
        assert store.peek("speaker_id") == 6

    def test_peek_matches_allocation_parsing(self) -> None:
        """Display reads parse values the same way allocation does."""
        store = InMemoryCounterStore({"numeric": "90100", "flag": True, "junk": "abc"})

        assert store.peek("numeric") == 90100
        assert store.peek("flag") is None
        assert store.peek("junk") is None


class TestCounterSnapshotValue:
    """Tests for CounterSnapshot.value."""

    @pytest.mark.parametrize(
        ("raw_value", "expected"),
        [(90000, 90000), (" 90100 ", 90100), (True, None), ("abc", None), (3.5, None)],
    )
    def test_value(self, raw_value: object, expected: int | None) -> None:
        assert CounterSnapshot(raw_value=raw_value, version=1).value == expected
