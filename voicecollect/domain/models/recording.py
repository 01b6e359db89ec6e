"""Recording domain model."""

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


class RecordingStatus(str, Enum):
    """Review states set from the admin dashboard."""

    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


@dataclass
class Recording:
    """An uploaded voice clip and the phrase it was read from."""

    speaker_id: str
    full_name: str
    native_language: str
    recorded_language: str
    phrase_index: int  # 1-based, as shown to the speaker
    phrase_text: str
    file_name: str
    blob_path: str
    mime_type: str
    status: RecordingStatus = RecordingStatus.PENDING
    id: int | None = None
    public_id: str = field(default_factory=_generate_ulid)
    created_at: datetime = field(default_factory=_utc_now)
