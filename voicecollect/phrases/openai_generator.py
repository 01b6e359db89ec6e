"""Reading-phrase generation through the OpenAI chat API."""

import logging

from openai import OpenAI, OpenAIError

from voicecollect.domain.models import Language
from voicecollect.domain_service.exceptions import PhraseGenerationError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a creative assistant tasked with generating short, natural-sounding "
    "sentences for a voice recording application."
)

EXAMPLES = {
    Language.SINHALA: (
        "අහස නිල් පාටයි, සමහර වලාකුළු සුදු පාටයි, "
        "ඒ වගේම හිරු එළිය දීප්තිමත්ව බබලනවා."
    ),
    Language.TAMIL: (
        "வானம் நீல நிறமாகவும், சில மேகங்கள் வெண்மையாகவும், "
        "சூரியன் பிரகாசமாகவும் பிரகாசிக்கிறது."
    ),
}


def build_prompt(language: Language) -> str:
    """Build the user prompt for one sentence in language."""
    return (
        f"The sentence should be in {language.value}.\n"
        "The sentence must be suitable for a native speaker to read aloud in "
        "approximately 8 to 15 seconds.\n"
        "The sentence should be grammatically correct, common, and easy to "
        "understand. Avoid complex jargon, proper nouns (unless very common like "
        "a country name), or overly specific topics.\n"
        "Generate only one sentence.\n\n"
        f"Language: {language.value}\n"
        "Desired reading time: 8-15 seconds.\n\n"
        f'Example: "{EXAMPLES[language]}"\n\n'
        "Return ONLY the generated sentence."
    )


class OpenAIPhraseGenerator:
    """Phrase generator backed by an OpenAI chat model."""

    def __init__(
        self,
        client: OpenAI,
        model: str,
        temperature: float = 0.6,
        max_tokens: int = 200,
    ) -> None:
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    def generate(self, language: Language) -> str:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": build_prompt(language)},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except OpenAIError as e:
            logger.error(f"Phrase generation failed: {e}")
            raise PhraseGenerationError(f"Phrase generation failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        phrase = (content or "").strip().strip('"').strip()
        if not phrase:
            raise PhraseGenerationError("Phrase generator returned an empty sentence")
        return phrase
