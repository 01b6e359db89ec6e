"""Speaker store for database operations."""

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from voicecollect.database.exceptions import (
    SpeakerAlreadyExistsError,
    SpeakerNotFoundError,
)
from voicecollect.database.models import SpeakerModel
from voicecollect.domain.models import Language, SpeakerProfile


class SpeakerStore:
    """Store for speaker profile database operations.

    Implements SpeakerStoreProtocol from voicecollect.domain.protocols.store.
    """

    def __init__(self, session: Session) -> None:
        """Initialize store with a database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def _to_domain_speaker(self, model: SpeakerModel) -> SpeakerProfile:
        """Convert database model to domain model."""
        return SpeakerProfile(
            id=model.id,
            public_id=model.public_id,
            handle=model.handle,
            speaker_id=model.speaker_id,
            full_name=model.full_name,
            language=Language(model.language),
            email=model.email,
            whatsapp_number=model.whatsapp_number,
            created_at=model.created_at,
        )

    def create_speaker(self, profile: SpeakerProfile) -> SpeakerProfile:
        """Create a new speaker profile.

        Args:
            profile: Profile to persist

        Returns:
            The created SpeakerProfile with its database id

        Raises:
            SpeakerAlreadyExistsError: If the handle or speaker_id is taken
        """
        model = SpeakerModel(
            public_id=profile.public_id,
            handle=profile.handle,
            speaker_id=profile.speaker_id,
            full_name=profile.full_name,
            language=profile.language.value,
            email=profile.email,
            whatsapp_number=profile.whatsapp_number,
            created_at=profile.created_at,
        )
        self.session.add(model)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise SpeakerAlreadyExistsError(
                f"Speaker '{profile.speaker_id}' already exists"
            ) from e
        self.session.refresh(model)
        return self._to_domain_speaker(model)

    def get_speaker_by_id(self, speaker_id: str) -> SpeakerProfile:
        """Get a speaker by their allocated speaker_id.

        Args:
            speaker_id: Identifier such as ``id90000``

        Returns:
            The SpeakerProfile instance

        Raises:
            SpeakerNotFoundError: If speaker not found
        """
        statement = select(SpeakerModel).where(SpeakerModel.speaker_id == speaker_id)
        model = self.session.exec(statement).first()
        if model is None:
            raise SpeakerNotFoundError(f"Speaker '{speaker_id}' not found")
        return self._to_domain_speaker(model)

    def get_speaker_by_handle(self, handle: str) -> SpeakerProfile:
        """Get a speaker by their identity handle.

        Raises:
            SpeakerNotFoundError: If no profile belongs to the handle
        """
        statement = select(SpeakerModel).where(SpeakerModel.handle == handle)
        model = self.session.exec(statement).first()
        if model is None:
            raise SpeakerNotFoundError(f"No speaker profile for handle '{handle}'")
        return self._to_domain_speaker(model)

    def list_speakers(self) -> list[SpeakerProfile]:
        """List all speaker profiles, oldest first."""
        statement = select(SpeakerModel).order_by(col(SpeakerModel.id))
        return [self._to_domain_speaker(m) for m in self.session.exec(statement).all()]
