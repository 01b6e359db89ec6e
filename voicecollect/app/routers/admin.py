"""Admin dashboard endpoints, protected by HTTP Basic auth."""

from fastapi import APIRouter, Response

from voicecollect.app.dependencies import (
    AdminUser,
    CounterStoreDep,
    RecordingServiceDep,
    SpeakerStoreDep,
)
from voicecollect.app.schemas import (
    CounterResponse,
    RecordingResponse,
    RecordingStatusUpdate,
    SpeakerResponse,
)
from voicecollect.domain_service.settings import allocator_settings

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.get("/speakers", response_model=list[SpeakerResponse])
def list_speakers(
    _admin: AdminUser,
    speaker_store: SpeakerStoreDep,
) -> list[SpeakerResponse]:
    return [SpeakerResponse.from_profile(p) for p in speaker_store.list_speakers()]


@router.get("/recordings", response_model=list[RecordingResponse])
def list_recordings(
    _admin: AdminUser,
    recording_service: RecordingServiceDep,
) -> list[RecordingResponse]:
    """List recordings, newest first."""
    return [
        RecordingResponse.from_recording(r)
        for r in recording_service.list_recordings()
    ]


@router.get("/recordings/{public_id}/audio")
def download_recording(
    public_id: str,
    _admin: AdminUser,
    recording_service: RecordingServiceDep,
) -> Response:
    download = recording_service.download_recording(public_id)
    return Response(
        content=download.data,
        media_type=download.recording.mime_type,
        headers={
            "Content-Disposition": (
                f'attachment; filename="{download.recording.file_name}"'
            )
        },
    )


@router.patch("/recordings/{public_id}", response_model=RecordingResponse)
def update_recording_status(
    public_id: str,
    request: RecordingStatusUpdate,
    _admin: AdminUser,
    recording_service: RecordingServiceDep,
) -> RecordingResponse:
    """Mark a recording verified or rejected."""
    recording = recording_service.update_status(public_id, request.status)
    return RecordingResponse.from_recording(recording)


@router.get("/counter", response_model=CounterResponse)
def get_counter(
    _admin: AdminUser,
    counter_store: CounterStoreDep,
) -> CounterResponse:
    """Show the last issued identifier number. Never used for allocation."""
    return CounterResponse(
        counter_name=allocator_settings.counter_name,
        last_issued_value=counter_store.peek(allocator_settings.counter_name),
    )
