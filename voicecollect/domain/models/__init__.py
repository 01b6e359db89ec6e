"""Domain models."""

from voicecollect.domain.models.counter import CounterSnapshot
from voicecollect.domain.models.identity import Identity
from voicecollect.domain.models.recording import Recording, RecordingStatus
from voicecollect.domain.models.speaker import Language, SpeakerProfile

__all__ = [
    "CounterSnapshot",
    "Identity",
    "Language",
    "Recording",
    "RecordingStatus",
    "SpeakerProfile",
]
