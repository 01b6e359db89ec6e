"""Phrase service for recording sessions."""

import logging

from voicecollect.domain.models import Language
from voicecollect.domain.protocols import PhraseGeneratorProtocol
from voicecollect.domain_service.exceptions import PhraseGenerationError

logger = logging.getLogger(__name__)


class PhraseService:
    """Supplies sentences for speakers to read aloud."""

    def __init__(self, generator: PhraseGeneratorProtocol) -> None:
        self.generator = generator

    def generate_phrase(self, language: Language) -> str:
        """Generate one reading phrase.

        Raises:
            PhraseGenerationError: If the generator produced no text.
        """
        phrase = self.generator.generate(language).strip()
        if not phrase:
            raise PhraseGenerationError("Phrase generator returned an empty sentence")
        logger.info(f"Generated {language.value} phrase ({len(phrase)} chars)")
        return phrase
