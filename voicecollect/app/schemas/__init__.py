"""API request and response schemas."""

from voicecollect.app.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    SpeakerResponse,
)
from voicecollect.app.schemas.recordings import (
    CounterResponse,
    PhraseRequest,
    PhraseResponse,
    RecordingResponse,
    RecordingStatusUpdate,
)

__all__ = [
    "CounterResponse",
    "LoginRequest",
    "PhraseRequest",
    "PhraseResponse",
    "RecordingResponse",
    "RecordingStatusUpdate",
    "RegisterRequest",
    "SpeakerResponse",
]
