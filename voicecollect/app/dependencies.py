"""Dependency injection for FastAPI."""

import logging
import secrets
from collections.abc import Generator
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy import Engine
from sqlmodel import Session

from voicecollect.database import (
    CounterStore,
    IdentityStore,
    RecordingStore,
    SpeakerStore,
    engine,
    get_session,
)
from voicecollect.domain.protocols import BlobStorageProtocol, PhraseGeneratorProtocol
from voicecollect.domain_service import (
    PhraseService,
    RecordingService,
    RegistrationService,
    SequentialIdAllocator,
)
from voicecollect.domain_service.exceptions import PhraseGenerationError
from voicecollect.phrases import create_phrase_generator
from voicecollect.storages import create_storage

from .settings import settings

logger = logging.getLogger(__name__)

security = HTTPBasic()


def get_db() -> Generator[Session, None, None]:
    """Get database session."""
    yield from get_session()


def get_engine() -> Engine:
    """Get the engine the allocator opens its own sessions on."""
    return engine


@lru_cache
def get_storage() -> BlobStorageProtocol:
    """Get the configured blob storage (created once)."""
    return create_storage()


@lru_cache
def get_phrase_generator() -> PhraseGeneratorProtocol:
    """Get the configured phrase generator (created once).

    Raises:
        PhraseGenerationError: If the generator settings are incomplete.
    """
    try:
        return create_phrase_generator()
    except ValueError as e:
        logger.error(f"Phrase generator misconfigured: {e}")
        raise PhraseGenerationError("Phrase generator is not configured") from e


def get_counter_store(
    db_engine: Annotated[Engine, Depends(get_engine)],
) -> CounterStore:
    return CounterStore(db_engine)


def get_speaker_store(
    session: Annotated[Session, Depends(get_db)],
) -> SpeakerStore:
    """Get speaker store with injected session."""
    return SpeakerStore(session)


def get_identity_store(
    session: Annotated[Session, Depends(get_db)],
) -> IdentityStore:
    return IdentityStore(session)


def get_recording_store(
    session: Annotated[Session, Depends(get_db)],
) -> RecordingStore:
    return RecordingStore(session)


def get_allocator(
    counter_store: Annotated[CounterStore, Depends(get_counter_store)],
) -> SequentialIdAllocator:
    return SequentialIdAllocator(counter_store)


def get_registration_service(
    identity_store: Annotated[IdentityStore, Depends(get_identity_store)],
    speaker_store: Annotated[SpeakerStore, Depends(get_speaker_store)],
    allocator: Annotated[SequentialIdAllocator, Depends(get_allocator)],
) -> RegistrationService:
    """Get registration service with injected stores."""
    return RegistrationService(
        identity_provider=identity_store,
        speaker_store=speaker_store,
        allocator=allocator,
    )


def get_phrase_service(
    generator: Annotated[PhraseGeneratorProtocol, Depends(get_phrase_generator)],
) -> PhraseService:
    return PhraseService(generator)


def get_recording_service(
    storage: Annotated[BlobStorageProtocol, Depends(get_storage)],
    recording_store: Annotated[RecordingStore, Depends(get_recording_store)],
    speaker_store: Annotated[SpeakerStore, Depends(get_speaker_store)],
) -> RecordingService:
    return RecordingService(
        storage=storage,
        recording_store=recording_store,
        speaker_store=speaker_store,
    )


def require_admin(
    credentials: Annotated[HTTPBasicCredentials, Depends(security)],
) -> str:
    """Check HTTP Basic credentials against the configured admin account."""
    username_ok = secrets.compare_digest(
        credentials.username.encode("utf-8"),
        settings.admin_username.encode("utf-8"),
    )
    password_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"),
        settings.admin_password.get_secret_value().encode("utf-8"),
    )
    if not (username_ok and password_ok):
        logger.warning(f"Rejected admin login for user '{credentials.username}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username


# Type aliases for dependency injection
SpeakerStoreDep = Annotated[SpeakerStore, Depends(get_speaker_store)]
CounterStoreDep = Annotated[CounterStore, Depends(get_counter_store)]
RegistrationServiceDep = Annotated[
    RegistrationService, Depends(get_registration_service)
]
PhraseServiceDep = Annotated[PhraseService, Depends(get_phrase_service)]
RecordingServiceDep = Annotated[RecordingService, Depends(get_recording_service)]
AdminUser = Annotated[str, Depends(require_admin)]
