"""Domain service layer."""

from voicecollect.domain_service.exceptions import (
    CorruptCounterStateError,
    InvalidCredentialsError,
    InvalidRecordingError,
    PhraseGenerationError,
    RegistrationFailedError,
    RetriesExhaustedError,
    VoiceCollectError,
)
from voicecollect.domain_service.id_allocator import SequentialIdAllocator
from voicecollect.domain_service.phrase import PhraseService
from voicecollect.domain_service.recording import (
    RecordingDownload,
    RecordingService,
    RecordingUpload,
)
from voicecollect.domain_service.registration import (
    RegistrationForm,
    RegistrationService,
)

__all__ = [
    "SequentialIdAllocator",
    "RegistrationService",
    "RegistrationForm",
    "PhraseService",
    "RecordingService",
    "RecordingUpload",
    "RecordingDownload",
    "VoiceCollectError",
    "RetriesExhaustedError",
    "CorruptCounterStateError",
    "RegistrationFailedError",
    "InvalidCredentialsError",
    "InvalidRecordingError",
    "PhraseGenerationError",
]
