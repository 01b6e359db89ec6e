"""Pytest fixtures for voicecollect tests."""

from pathlib import Path

import pytest
from sqlalchemy import Engine
from sqlmodel import Session, SQLModel

from voicecollect.database.session import build_engine
from voicecollect.database.settings import DatabaseSettings
from voicecollect.domain_service.settings import AllocatorSettings
from voicecollect.storages import LocalStorage


@pytest.fixture
def engine(tmp_path: Path) -> Engine:
    """Create a file-backed SQLite engine.

    A file is used instead of :memory: so that every connection, including
    the counter store's own, sees the same database.
    """
    db_settings = DatabaseSettings(
        db_type="sqlite",
        sqlite_path=str(tmp_path / "test.db"),
        sqlite_busy_timeout=30000,
    )
    engine = build_engine(db_settings)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine):
    """Create a database session for testing."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def allocator_settings() -> AllocatorSettings:
    """Allocation settings without backoff delays."""
    return AllocatorSettings(
        counter_name="speaker_id",
        prefix="id",
        starting_value=90000,
        max_attempts=10,
        backoff_base=0.0,
        backoff_max=0.0,
        clamp_corrupt_counter=True,
    )


@pytest.fixture
def storage(tmp_path: Path) -> LocalStorage:
    """Create a local storage rooted in a temp directory."""
    return LocalStorage(base_path=str(tmp_path / "blobs"))
