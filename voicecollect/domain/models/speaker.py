"""Speaker profile domain model."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

from ulid import ULID


def _generate_ulid() -> str:
    """Generate a new ULID string."""
    return str(ULID())


def _utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


class Language(str, Enum):
    """Languages speakers can declare and record in."""

    SINHALA = "Sinhala"
    TAMIL = "Tamil"


@dataclass
class SpeakerProfile:
    """Profile of a registered speaker, immutable after registration."""

    handle: str
    speaker_id: str
    full_name: str
    language: Language
    email: str
    whatsapp_number: str
    id: int | None = None
    public_id: str = field(default_factory=_generate_ulid)
    created_at: datetime = field(default_factory=_utc_now)
