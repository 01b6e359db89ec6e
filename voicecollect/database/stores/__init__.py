"""Database stores."""

from voicecollect.database.stores.counter_store import CounterStore
from voicecollect.database.stores.identity_store import IdentityStore
from voicecollect.database.stores.memory_counter_store import InMemoryCounterStore
from voicecollect.database.stores.recording_store import RecordingStore
from voicecollect.database.stores.speaker_store import SpeakerStore

__all__ = [
    "CounterStore",
    "IdentityStore",
    "InMemoryCounterStore",
    "RecordingStore",
    "SpeakerStore",
]
