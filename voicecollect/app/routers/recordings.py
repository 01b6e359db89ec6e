"""Phrase generation and recording upload endpoints."""

from typing import Annotated

from fastapi import APIRouter, File, Form, UploadFile, status

from voicecollect.app.dependencies import PhraseServiceDep, RecordingServiceDep
from voicecollect.app.schemas import PhraseRequest, PhraseResponse, RecordingResponse
from voicecollect.domain.models import Language
from voicecollect.domain_service import RecordingUpload

router = APIRouter(prefix="/api/v1", tags=["recordings"])


@router.post("/phrases", response_model=PhraseResponse)
def generate_phrase(
    request: PhraseRequest,
    phrase_service: PhraseServiceDep,
) -> PhraseResponse:
    """Generate a sentence to read aloud."""
    phrase = phrase_service.generate_phrase(request.language)
    return PhraseResponse(language=request.language, phrase=phrase)


@router.post(
    "/recordings",
    status_code=status.HTTP_201_CREATED,
    response_model=RecordingResponse,
)
def upload_recording(
    speaker_id: Annotated[str, Form(min_length=1, max_length=32)],
    recorded_language: Annotated[Language, Form()],
    phrase_index: Annotated[int, Form(ge=0, description="0-based phrase number")],
    phrase_text: Annotated[str, Form(min_length=1)],
    audio: Annotated[UploadFile, File()],
    recording_service: RecordingServiceDep,
) -> RecordingResponse:
    """Upload one recorded phrase."""
    # One byte past the limit is enough for validation to reject the clip
    data = audio.file.read(recording_service.settings.max_audio_bytes + 1)
    recording = recording_service.upload_recording(
        RecordingUpload(
            speaker_id=speaker_id,
            recorded_language=recorded_language,
            phrase_index=phrase_index,
            phrase_text=phrase_text,
            audio=data,
            mime_type=audio.content_type or "audio/webm",
            original_filename=audio.filename,
        )
    )
    return RecordingResponse.from_recording(recording)
