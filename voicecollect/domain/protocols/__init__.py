"""Domain protocols."""

from voicecollect.domain.protocols.identity import IdentityProviderProtocol
from voicecollect.domain.protocols.phrase import PhraseGeneratorProtocol
from voicecollect.domain.protocols.storage import BlobStorageProtocol
from voicecollect.domain.protocols.store import (
    CounterStoreProtocol,
    RecordingStoreProtocol,
    SpeakerStoreProtocol,
)

__all__ = [
    "BlobStorageProtocol",
    "CounterStoreProtocol",
    "IdentityProviderProtocol",
    "PhraseGeneratorProtocol",
    "RecordingStoreProtocol",
    "SpeakerStoreProtocol",
]
