"""Database exceptions."""


class DatabaseError(Exception):
    """Base exception for database operations."""

    pass


class StoreUnavailableError(DatabaseError):
    """Raised when the backing store cannot be reached."""

    pass


class CounterConflictError(DatabaseError):
    """Raised when a counter read loses to a concurrent writer's lock."""

    pass


class SpeakerNotFoundError(DatabaseError):
    """Raised when a speaker profile is not found."""

    pass


class SpeakerAlreadyExistsError(DatabaseError):
    """Raised when a profile already exists for a handle or speaker_id."""

    pass


class EmailAlreadyRegisteredError(DatabaseError):
    """Raised when an identity already exists for an email address."""

    pass


class RecordingNotFoundError(DatabaseError):
    """Raised when a recording is not found."""

    pass
