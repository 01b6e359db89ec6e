"""Recording metadata store."""

from sqlmodel import Session, col, select

from voicecollect.database.exceptions import RecordingNotFoundError
from voicecollect.database.models import RecordingModel
from voicecollect.domain.models import Recording, RecordingStatus


class RecordingStore:
    """Store for uploaded recording metadata.

    Implements RecordingStoreProtocol from voicecollect.domain.protocols.store.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def _to_domain(self, model: RecordingModel) -> Recording:
        return Recording(
            id=model.id,
            public_id=model.public_id,
            speaker_id=model.speaker_id,
            full_name=model.full_name,
            native_language=model.native_language,
            recorded_language=model.recorded_language,
            phrase_index=model.phrase_index,
            phrase_text=model.phrase_text,
            file_name=model.file_name,
            blob_path=model.blob_path,
            mime_type=model.mime_type,
            status=RecordingStatus(model.status),
            created_at=model.created_at,
        )

    def _get_model(self, public_id: str) -> RecordingModel:
        statement = select(RecordingModel).where(RecordingModel.public_id == public_id)
        model = self.session.exec(statement).first()
        if model is None:
            raise RecordingNotFoundError(f"Recording '{public_id}' not found")
        return model

    def add_recording(self, recording: Recording) -> Recording:
        model = RecordingModel(
            public_id=recording.public_id,
            speaker_id=recording.speaker_id,
            full_name=recording.full_name,
            native_language=recording.native_language,
            recorded_language=recording.recorded_language,
            phrase_index=recording.phrase_index,
            phrase_text=recording.phrase_text,
            file_name=recording.file_name,
            blob_path=recording.blob_path,
            mime_type=recording.mime_type,
            status=recording.status.value,
            created_at=recording.created_at,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_domain(model)

    def get_recording(self, public_id: str) -> Recording:
        """Get a recording by public_id.

        Raises:
            RecordingNotFoundError: If recording not found
        """
        return self._to_domain(self._get_model(public_id))

    def list_recordings(self) -> list[Recording]:
        """List all recordings, newest first."""
        statement = select(RecordingModel).order_by(
            col(RecordingModel.created_at).desc(),
            col(RecordingModel.id).desc(),
        )
        return [self._to_domain(m) for m in self.session.exec(statement).all()]

    def update_status(self, public_id: str, status: RecordingStatus) -> Recording:
        """Set the review status of a recording.

        Raises:
            RecordingNotFoundError: If recording not found
        """
        model = self._get_model(public_id)
        model.status = status.value
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_domain(model)
