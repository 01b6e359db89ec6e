"""Fixed phrase list for development without an API key."""

import random

from voicecollect.domain.models import Language
from voicecollect.phrases.openai_generator import EXAMPLES


class StaticPhraseGenerator:
    """Returns phrases from a fixed per-language list."""

    def __init__(
        self,
        phrases: dict[Language, list[str]] | None = None,
        seed: int | None = None,
    ) -> None:
        self.phrases = phrases or {lang: [text] for lang, text in EXAMPLES.items()}
        self._rng = random.Random(seed)

    def generate(self, language: Language) -> str:
        return self._rng.choice(self.phrases[language])
