"""Database layer."""

from voicecollect.database.session import engine, get_session
from voicecollect.database.stores import (
    CounterStore,
    IdentityStore,
    InMemoryCounterStore,
    RecordingStore,
    SpeakerStore,
)

__all__ = [
    "engine",
    "get_session",
    "CounterStore",
    "IdentityStore",
    "InMemoryCounterStore",
    "RecordingStore",
    "SpeakerStore",
]
