"""Phrase, recording and admin schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from voicecollect.domain.models import Language, Recording, RecordingStatus


class PhraseRequest(BaseModel):
    language: Language


class PhraseResponse(BaseModel):
    language: Language
    phrase: str


class RecordingResponse(BaseModel):
    """Logged recording metadata."""

    public_id: str
    speaker_id: str
    full_name: str
    native_language: str
    recorded_language: str
    phrase_index: int = Field(..., description="1-based phrase number")
    phrase_text: str
    file_name: str
    mime_type: str
    status: RecordingStatus
    created_at: datetime

    @classmethod
    def from_recording(cls, recording: Recording) -> "RecordingResponse":
        return cls(
            public_id=recording.public_id,
            speaker_id=recording.speaker_id,
            full_name=recording.full_name,
            native_language=recording.native_language,
            recorded_language=recording.recorded_language,
            phrase_index=recording.phrase_index,
            phrase_text=recording.phrase_text,
            file_name=recording.file_name,
            mime_type=recording.mime_type,
            status=recording.status,
            created_at=recording.created_at,
        )


class RecordingStatusUpdate(BaseModel):
    status: RecordingStatus


class CounterResponse(BaseModel):
    """Last issued identifier, for display only."""

    counter_name: str
    last_issued_value: int | None
