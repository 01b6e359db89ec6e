"""Database session management."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, event
from sqlmodel import Session, create_engine

from voicecollect.database.settings import DatabaseSettings, settings


def build_engine(db_settings: DatabaseSettings = settings) -> Engine:
    """Create an engine for the configured backend."""
    if not db_settings.is_sqlite:
        return create_engine(db_settings.database_url, echo=db_settings.echo)

    engine = create_engine(
        db_settings.database_url,
        echo=db_settings.echo,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
        """Make concurrent writers wait on the lock instead of failing fast."""
        cursor = dbapi_connection.cursor()
        cursor.execute(f"PRAGMA busy_timeout={db_settings.sqlite_busy_timeout}")
        cursor.close()

    return engine


engine = build_engine()


def get_session() -> Generator[Session, None, None]:
    """Get a database session.

    Yields:
        SQLModel Session instance.
    """
    with Session(engine) as session:
        yield session

