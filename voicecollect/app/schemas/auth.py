"""Registration and login schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from voicecollect.domain.models import Language, SpeakerProfile

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
WHATSAPP_PATTERN = r"^(?:\+94|0)?7[0-9]{8}$"


class RegisterRequest(BaseModel):
    """Speaker registration request."""

    full_name: str = Field(..., min_length=3, max_length=50)
    email: str = Field(..., max_length=254, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=6, max_length=128)
    whatsapp_number: str = Field(
        ...,
        description="Sri Lankan mobile number, e.g. 0771234567 or +94771234567",
        pattern=WHATSAPP_PATTERN,
    )
    language: Language

    @field_validator("full_name", "email", mode="before")
    @classmethod
    def strip_whitespace(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("whatsapp_number", mode="before")
    @classmethod
    def strip_number(cls, value: object) -> object:
        """Drop spaces and dashes people type inside phone numbers."""
        if isinstance(value, str):
            return value.replace(" ", "").replace("-", "")
        return value


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1, max_length=128)


class SpeakerResponse(BaseModel):
    """Speaker profile as returned to the client."""

    speaker_id: str
    full_name: str
    language: Language
    email: str
    whatsapp_number: str
    created_at: datetime

    @classmethod
    def from_profile(cls, profile: SpeakerProfile) -> "SpeakerResponse":
        return cls(
            speaker_id=profile.speaker_id,
            full_name=profile.full_name,
            language=profile.language,
            email=profile.email,
            whatsapp_number=profile.whatsapp_number,
            created_at=profile.created_at,
        )
