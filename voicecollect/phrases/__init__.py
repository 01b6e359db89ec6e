"""Reading-phrase generators."""

from openai import OpenAI

from voicecollect.domain.protocols import PhraseGeneratorProtocol
from voicecollect.phrases.openai_generator import OpenAIPhraseGenerator
from voicecollect.phrases.settings import PhraseSettings, settings
from voicecollect.phrases.static_generator import StaticPhraseGenerator


def create_phrase_generator(
    phrase_settings: PhraseSettings = settings,
) -> PhraseGeneratorProtocol:
    """Create the configured phrase generator."""
    if phrase_settings.provider == "static":
        return StaticPhraseGenerator()
    if phrase_settings.openai_api_key is None:
        raise ValueError(
            "VOICECOLLECT_PHRASE_OPENAI_API_KEY must be set when provider is 'openai'"
        )
    client = OpenAI(api_key=phrase_settings.openai_api_key.get_secret_value())
    return OpenAIPhraseGenerator(
        client=client,
        model=phrase_settings.model,
        temperature=phrase_settings.temperature,
        max_tokens=phrase_settings.max_tokens,
    )


__all__ = ["OpenAIPhraseGenerator", "StaticPhraseGenerator", "create_phrase_generator"]
