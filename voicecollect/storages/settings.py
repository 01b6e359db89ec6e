"""Blob storage settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Blob storage configuration."""

    model_config = SettingsConfigDict(
        env_prefix="VOICECOLLECT_STORAGE_",
        env_file=".env",
        extra="ignore",
    )

    storage_type: str = "local"  # "local" or "gcs"
    local_path: str = "./data/recordings"
    gcs_bucket_name: str | None = None
    gcs_project_id: str | None = None


settings = StorageSettings()
