"""API settings configuration."""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """Settings for the VoiceCollect API server."""

    model_config = SettingsConfigDict(
        env_prefix="VOICECOLLECT_API_",
        env_file=".env",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = Field(default=8000, validation_alias="PORT")
    log_level: str = "info"

    # HTTP Basic credentials for the admin dashboard
    admin_username: str = "admin"
    admin_password: SecretStr = SecretStr("admin")


settings = APISettings()
