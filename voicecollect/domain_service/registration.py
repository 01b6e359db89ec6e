"""Registration service for new speakers.

Manages the registration flow:
1. Create the login identity
2. Allocate a speaker identifier
3. Save the speaker profile

The identity provider and the profile store do not share a transaction, so a
failure after step 1 is undone by deleting the identity again. An identifier
allocated before the failure stays consumed.
"""

import logging
from dataclasses import dataclass

from voicecollect.domain.models import Language, SpeakerProfile
from voicecollect.domain.protocols import IdentityProviderProtocol, SpeakerStoreProtocol
from voicecollect.domain_service.exceptions import (
    InvalidCredentialsError,
    RegistrationFailedError,
)
from voicecollect.domain_service.id_allocator import SequentialIdAllocator

logger = logging.getLogger(__name__)


@dataclass
class RegistrationForm:
    """Validated registration form input."""

    full_name: str
    email: str
    password: str
    whatsapp_number: str
    language: Language


class RegistrationService:
    """Service for speaker registration and login."""

    def __init__(
        self,
        identity_provider: IdentityProviderProtocol,
        speaker_store: SpeakerStoreProtocol,
        allocator: SequentialIdAllocator,
    ) -> None:
        """Initialize registration service.

        Args:
            identity_provider: Email/password identity provider.
            speaker_store: Store for speaker profiles.
            allocator: Speaker identifier allocator.
        """
        self.identity_provider = identity_provider
        self.speaker_store = speaker_store
        self.allocator = allocator

    def register(self, form: RegistrationForm) -> SpeakerProfile:
        """Register a new speaker.

        Args:
            form: Registration form input.

        Returns:
            The stored profile carrying the allocated speaker_id.

        Raises:
            EmailAlreadyRegisteredError: If the email is already registered.
            RegistrationFailedError: If allocation or profile storage failed.
        """
        identity = self.identity_provider.create_identity(form.email, form.password)
        logger.info(f"Identity created: {identity.handle}")

        try:
            speaker_id = self.allocator.allocate_next_id()
            profile = self.speaker_store.create_speaker(
                SpeakerProfile(
                    handle=identity.handle,
                    speaker_id=speaker_id,
                    full_name=form.full_name,
                    language=form.language,
                    email=identity.email,
                    whatsapp_number=form.whatsapp_number,
                )
            )
        except Exception as e:
            logger.error(f"Registration failed for identity {identity.handle}: {e}")
            self._undo_identity(identity.handle)
            raise RegistrationFailedError(
                "Registration failed, please try again"
            ) from e

        logger.info(f"Speaker registered: {profile.speaker_id}")
        return profile

    def _undo_identity(self, handle: str) -> None:
        try:
            self.identity_provider.delete_identity(handle)
        except Exception:
            logger.exception(f"Could not remove identity {handle} after failure")

    def login(self, email: str, password: str) -> SpeakerProfile:
        """Authenticate a speaker.

        Raises:
            InvalidCredentialsError: If email or password is wrong.
            SpeakerNotFoundError: If the identity has no profile.
        """
        identity = self.identity_provider.authenticate(email, password)
        if identity is None:
            raise InvalidCredentialsError("Invalid email or password")
        return self.speaker_store.get_speaker_by_handle(identity.handle)

