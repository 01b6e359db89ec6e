"""Database models (SQLModel)."""

from datetime import UTC, datetime

from sqlmodel import Field, SQLModel
from ulid import ULID


def _generate_ulid() -> str:
    """Generate a new ULID string."""
    return str(ULID())


def _utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


class CounterModel(SQLModel, table=True):
    """Named sequence counter.

    Kept in its own table so profile enumeration never sees it.
    """

    __tablename__ = "counters"  # pyright: ignore[reportAssignmentType]

    name: str = Field(primary_key=True, max_length=64)
    last_issued_value: int
    version: int = Field(default=1)
    updated_at: datetime = Field(default_factory=_utc_now)


class IdentityModel(SQLModel, table=True):
    """Email/password identity issued by the local identity provider."""

    __tablename__ = "identities"  # pyright: ignore[reportAssignmentType]

    id: int | None = Field(default=None, primary_key=True)
    handle: str = Field(
        default_factory=_generate_ulid,
        unique=True,
        index=True,
        max_length=26,
    )
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=128)
    created_at: datetime = Field(default_factory=_utc_now)


class SpeakerModel(SQLModel, table=True):
    """Speaker profile created at registration."""

    __tablename__ = "speakers"  # pyright: ignore[reportAssignmentType]

    id: int | None = Field(default=None, primary_key=True)
    public_id: str = Field(
        default_factory=_generate_ulid,
        unique=True,
        index=True,
        max_length=26,
    )
    handle: str = Field(unique=True, index=True, max_length=26)
    speaker_id: str = Field(unique=True, index=True, max_length=32)
    full_name: str = Field(max_length=50)
    language: str = Field(max_length=16)
    email: str = Field(max_length=255)
    whatsapp_number: str = Field(max_length=16)
    created_at: datetime = Field(default_factory=_utc_now)


class RecordingModel(SQLModel, table=True):
    """Metadata for an uploaded voice clip."""

    __tablename__ = "recordings"  # pyright: ignore[reportAssignmentType]

    id: int | None = Field(default=None, primary_key=True)
    public_id: str = Field(
        default_factory=_generate_ulid,
        unique=True,
        index=True,
        max_length=26,
    )
    speaker_id: str = Field(index=True, max_length=32)
    full_name: str = Field(max_length=50)
    native_language: str = Field(max_length=16)
    recorded_language: str = Field(max_length=16)
    phrase_index: int  # 1-based
    phrase_text: str = Field(max_length=1000)
    file_name: str = Field(max_length=255)
    blob_path: str = Field(max_length=500)
    mime_type: str = Field(max_length=100)
    status: str = Field(default="pending", max_length=16)
    created_at: datetime = Field(default_factory=_utc_now, index=True)
