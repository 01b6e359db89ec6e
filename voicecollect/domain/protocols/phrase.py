"""Phrase generator Protocol."""

from typing import Protocol

from voicecollect.domain.models import Language


class PhraseGeneratorProtocol(Protocol):
    """Protocol for reading-phrase generation."""

    def generate(self, language: Language) -> str:
        """Generate one short sentence to be read aloud.

        Args:
            language: Language of the sentence.

        Returns:
            The sentence text.
        """
        ...
