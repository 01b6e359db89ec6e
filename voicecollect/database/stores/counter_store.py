"""Counter store backed by a version-checked SQL update."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

from sqlalchemy import Engine, insert, update
from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, OperationalError
from sqlmodel import Session

from voicecollect.database.exceptions import CounterConflictError, StoreUnavailableError
from voicecollect.database.models import CounterModel
from voicecollect.domain.models import CounterSnapshot

logger = logging.getLogger(__name__)

# PostgreSQL serialization_failure and deadlock_detected
_CONTENTION_SQLSTATES = frozenset({"40001", "40P01"})
_SQLITE_CONTENTION_MESSAGES = ("database is locked", "database table is locked")


def _is_contention(exc: DBAPIError) -> bool:
    """Check whether a driver error means another writer holds the record."""
    orig = exc.orig
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if sqlstate in _CONTENTION_SQLSTATES:
        return True
    message = str(orig).lower()
    return any(text in message for text in _SQLITE_CONTENTION_MESSAGES)


class CounterStore:
    """Store for named sequence counters.

    Implements CounterStoreProtocol from voicecollect.domain.protocols.store.
    Each call runs in its own short transaction so a retry always observes
    the latest committed state.
    """

    def __init__(self, engine: Engine) -> None:
        """Initialize store with a database engine.

        Args:
            engine: SQLAlchemy engine for the counters table
        """
        self.engine = engine

    @contextmanager
    def _translate_errors(self) -> Iterator[None]:
        try:
            yield
        except (OperationalError, InterfaceError) as exc:
            if _is_contention(exc):
                raise CounterConflictError(str(exc.orig)) from exc
            logger.error(f"Counter store unreachable: {exc.orig}")
            raise StoreUnavailableError("Counter store is unavailable") from exc

    def read(self, name: str) -> CounterSnapshot | None:
        """Read a counter record.

        Args:
            name: Counter name

        Returns:
            The current snapshot, or None if the record does not exist

        Raises:
            StoreUnavailableError: If the database cannot be reached
            CounterConflictError: If the read was blocked by a writer
        """
        with self._translate_errors(), Session(self.engine) as session:
            model = session.get(CounterModel, name)
            if model is None:
                return None
            return CounterSnapshot(
                raw_value=model.last_issued_value,
                version=model.version,
            )

    def create(self, name: str, value: int) -> bool:
        """Insert a counter record.

        Args:
            name: Counter name
            value: Initial value

        Returns:
            True if inserted, False if the record already exists
        """
        statement = insert(CounterModel).values(
            name=name,
            last_issued_value=value,
            version=1,
            updated_at=datetime.now(UTC),
        )
        try:
            with self._translate_errors(), self.engine.begin() as connection:
                connection.execute(statement)
        except (IntegrityError, CounterConflictError):
            return False
        return True

    def compare_and_set(self, name: str, expected_version: int, value: int) -> bool:
        """Write value if the record is still at expected_version.

        Args:
            name: Counter name
            expected_version: Version observed by the caller's read
            value: New value

        Returns:
            True if the row was updated, False on a concurrent modification
        """
        statement = (
            update(CounterModel)
            .where(
                CounterModel.name == name,  # type: ignore[arg-type]
                CounterModel.version == expected_version,  # type: ignore[arg-type]
            )
            .values(
                last_issued_value=value,
                version=CounterModel.version + 1,
                updated_at=datetime.now(UTC),
            )
        )
        try:
            with self._translate_errors(), self.engine.begin() as connection:
                result = connection.execute(statement)
        except CounterConflictError:
            return False
        return result.rowcount == 1

    def peek(self, name: str) -> int | None:
        """Read the stored value for display.

        Returns:
            The stored value if it is an integer, otherwise None
        """
        try:
            snapshot = self.read(name)
        except CounterConflictError:
            return None
        return None if snapshot is None else snapshot.value
