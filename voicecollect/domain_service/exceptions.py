"""Domain service exceptions."""


class VoiceCollectError(Exception):
    """Base exception for service-level failures."""

    pass


class RetriesExhaustedError(VoiceCollectError):
    """Raised when identifier allocation keeps losing concurrent updates."""

    def __init__(self, counter_name: str, attempts: int) -> None:
        self.counter_name = counter_name
        self.attempts = attempts
        super().__init__(
            f"Counter '{counter_name}' still conflicting after {attempts} attempts"
        )


class CorruptCounterStateError(VoiceCollectError):
    """Raised for an invalid stored counter when clamping is disabled."""

    pass


class RegistrationFailedError(VoiceCollectError):
    """Raised when registration could not complete. Nothing is left behind."""

    pass


class InvalidCredentialsError(VoiceCollectError):
    """Raised when login credentials do not match an identity."""

    pass


class PhraseGenerationError(VoiceCollectError):
    """Raised when the phrase generator returns nothing usable."""

    pass


class InvalidRecordingError(VoiceCollectError):
    """Raised when an uploaded recording fails validation."""

    pass
