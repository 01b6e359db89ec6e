"""Phrase generator settings."""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class PhraseSettings(BaseSettings):
    """Reading-phrase generator configuration."""

    model_config = SettingsConfigDict(
        env_prefix="VOICECOLLECT_PHRASE_",
        env_file=".env",
        extra="ignore",
    )

    provider: str = "openai"  # "openai" or "static"
    openai_api_key: SecretStr | None = None
    model: str = "gpt-4o-mini"
    temperature: float = 0.6
    max_tokens: int = 200


settings = PhraseSettings()
