"""Registration and login endpoints."""

from fastapi import APIRouter, status

from voicecollect.app.dependencies import RegistrationServiceDep, SpeakerStoreDep
from voicecollect.app.schemas import LoginRequest, RegisterRequest, SpeakerResponse
from voicecollect.domain_service import RegistrationForm

router = APIRouter(prefix="/api/v1", tags=["auth"])


@router.post(
    "/auth/register",
    status_code=status.HTTP_201_CREATED,
    response_model=SpeakerResponse,
)
def register(
    request: RegisterRequest,
    registration_service: RegistrationServiceDep,
) -> SpeakerResponse:
    """Register a speaker and return the allocated speaker ID."""
    profile = registration_service.register(
        RegistrationForm(
            full_name=request.full_name,
            email=request.email,
            password=request.password,
            whatsapp_number=request.whatsapp_number,
            language=request.language,
        )
    )
    return SpeakerResponse.from_profile(profile)


@router.post("/auth/login", response_model=SpeakerResponse)
def login(
    request: LoginRequest,
    registration_service: RegistrationServiceDep,
) -> SpeakerResponse:
    profile = registration_service.login(request.email, request.password)
    return SpeakerResponse.from_profile(profile)


@router.get("/speakers/{speaker_id}", response_model=SpeakerResponse)
def get_speaker(speaker_id: str, speaker_store: SpeakerStoreDep) -> SpeakerResponse:
    """Look up a profile by its speaker ID."""
    return SpeakerResponse.from_profile(speaker_store.get_speaker_by_id(speaker_id))
