"""Store Protocols for data persistence."""

from typing import Protocol

from voicecollect.domain.models import (
    CounterSnapshot,
    Recording,
    RecordingStatus,
    SpeakerProfile,
)


class CounterStoreProtocol(Protocol):
    """Conditional-update primitive backing the identifier allocator.

    Every method raises StoreUnavailableError when the store cannot be
    reached.
    """

    def read(self, name: str) -> CounterSnapshot | None:
        """Read a counter record.

        Args:
            name: Counter name

        Returns:
            The current snapshot, or None if the record does not exist
        """
        ...

    def create(self, name: str, value: int) -> bool:
        """Create a counter record if it does not exist.

        Args:
            name: Counter name
            value: Initial value

        Returns:
            True if created, False if another writer created it first
        """
        ...

    def compare_and_set(self, name: str, expected_version: int, value: int) -> bool:
        """Write a new value only if the record is still at expected_version.

        Args:
            name: Counter name
            expected_version: Version observed by the caller's read
            value: New value

        Returns:
            True if written, False on a concurrent modification
        """
        ...

    def peek(self, name: str) -> int | None:
        """Read the stored value for display. Never used to allocate."""
        ...


class SpeakerStoreProtocol(Protocol):
    """Protocol for speaker profile persistence."""

    def create_speaker(self, profile: SpeakerProfile) -> SpeakerProfile:
        """Persist a new profile.

        Args:
            profile: Profile to store

        Returns:
            The stored profile with its database id
        """
        ...

    def get_speaker_by_id(self, speaker_id: str) -> SpeakerProfile:
        """Get a profile by its allocated identifier."""
        ...

    def get_speaker_by_handle(self, handle: str) -> SpeakerProfile:
        """Get a profile by its identity handle."""
        ...

    def list_speakers(self) -> list[SpeakerProfile]:
        """List all profiles, oldest first."""
        ...


class RecordingStoreProtocol(Protocol):
    """Protocol for recording metadata persistence."""

    def add_recording(self, recording: Recording) -> Recording:
        """Log an uploaded recording."""
        ...

    def get_recording(self, public_id: str) -> Recording:
        """Get a recording by public_id."""
        ...

    def list_recordings(self) -> list[Recording]:
        """List recordings, newest first."""
        ...

    def update_status(self, public_id: str, status: RecordingStatus) -> Recording:
        """Set the review status of a recording."""
        ...
