"""Domain service settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AllocatorSettings(BaseSettings):
    """Speaker identifier allocation settings."""

    model_config = SettingsConfigDict(
        env_prefix="VOICECOLLECT_ALLOCATOR_",
        env_file=".env",
        extra="ignore",
    )

    counter_name: str = "speaker_id"
    prefix: str = "id"
    starting_value: int = Field(default=90000, ge=0)

    # Optimistic-concurrency retry bound
    max_attempts: int = Field(default=10, ge=1)
    backoff_base: float = Field(default=0.01, ge=0.0)  # seconds
    backoff_max: float = Field(default=0.5, ge=0.0)  # seconds

    # Replace unparsable or below-floor counter values with the floor
    clamp_corrupt_counter: bool = True


class RecordingSettings(BaseSettings):
    """Recording upload settings."""

    model_config = SettingsConfigDict(
        env_prefix="VOICECOLLECT_RECORDING_",
        env_file=".env",
        extra="ignore",
    )

    max_audio_bytes: int = 10 * 1024 * 1024
    default_extension: str = "webm"
    blob_prefix: str = "recordings"


allocator_settings = AllocatorSettings()
recording_settings = RecordingSettings()
