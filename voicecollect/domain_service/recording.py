"""Recording service for uploaded voice clips.

Clips are written to blob storage under a name that encodes the speaker,
language and phrase number, then logged with their phrase text for review.
"""

import logging
import re
from dataclasses import dataclass
from datetime import UTC, datetime

from voicecollect.database.exceptions import RecordingNotFoundError
from voicecollect.domain.models import Language, Recording, RecordingStatus
from voicecollect.domain.protocols import (
    BlobStorageProtocol,
    RecordingStoreProtocol,
    SpeakerStoreProtocol,
)
from voicecollect.domain_service.exceptions import InvalidRecordingError
from voicecollect.domain_service.settings import RecordingSettings, recording_settings

logger = logging.getLogger(__name__)


@dataclass
class RecordingUpload:
    """A clip submitted from the recorder."""

    speaker_id: str
    recorded_language: Language
    phrase_index: int  # 0-based position in the session
    phrase_text: str
    audio: bytes
    mime_type: str
    original_filename: str | None = None


@dataclass
class RecordingDownload:
    """A stored clip and its metadata."""

    recording: Recording
    data: bytes


def _file_extension(filename: str | None, default: str) -> str:
    if filename and "." in filename:
        extension = filename.rsplit(".", 1)[1].lower()
        if re.fullmatch(r"[a-z0-9]{1,10}", extension):
            return extension
    return default


def build_file_name(
    speaker_id: str,
    language: Language,
    phrase_index: int,
    extension: str,
    timestamp: datetime,
) -> str:
    """Build the stored file name for a clip.

    Example:
        >>> build_file_name(
        ...     "id90000", Language.SINHALA, 0, "webm",
        ...     datetime(2024, 5, 1, 10, 30, 15, 123000, tzinfo=UTC),
        ... )
        'id90000_sinhala_phrase1_2024-05-01T10-30-15-123Z.webm'
    """
    utc = timestamp.astimezone(UTC)
    stamp = utc.strftime("%Y-%m-%dT%H-%M-%S") + f"-{utc.microsecond // 1000:03d}Z"
    return (
        f"{speaker_id}_{language.value.lower()}_phrase{phrase_index + 1}"
        f"_{stamp}.{extension}"
    )


class RecordingService:
    """Service for storing and reviewing voice clips."""

    def __init__(
        self,
        storage: BlobStorageProtocol,
        recording_store: RecordingStoreProtocol,
        speaker_store: SpeakerStoreProtocol,
        settings: RecordingSettings = recording_settings,
    ) -> None:
        self.storage = storage
        self.recording_store = recording_store
        self.speaker_store = speaker_store
        self.settings = settings

    def _validate(self, upload: RecordingUpload) -> None:
        if not upload.audio:
            raise InvalidRecordingError("No audio data provided")
        if len(upload.audio) > self.settings.max_audio_bytes:
            raise InvalidRecordingError(
                f"Audio size {len(upload.audio)} bytes exceeds "
                f"maximum {self.settings.max_audio_bytes} bytes"
            )
        if not upload.phrase_text.strip():
            raise InvalidRecordingError("Phrase text is missing")
        if upload.phrase_index < 0:
            raise InvalidRecordingError("Phrase index must not be negative")

    def upload_recording(
        self,
        upload: RecordingUpload,
        now: datetime | None = None,
    ) -> Recording:
        """Store a clip and log its metadata.

        Args:
            upload: The submitted clip.
            now: Upload time, defaults to the current UTC time.

        Returns:
            The logged Recording with status pending.

        Raises:
            SpeakerNotFoundError: If speaker_id is not registered.
            InvalidRecordingError: If the clip fails validation.
        """
        speaker = self.speaker_store.get_speaker_by_id(upload.speaker_id)
        self._validate(upload)

        file_name = build_file_name(
            speaker.speaker_id,
            upload.recorded_language,
            upload.phrase_index,
            _file_extension(upload.original_filename, self.settings.default_extension),
            now or datetime.now(UTC),
        )
        logger.info(f"Uploading to storage: {file_name}")
        blob_path = self.storage.upload(
            data=upload.audio,
            path=f"{self.settings.blob_prefix}/{file_name}",
            content_type=upload.mime_type,
        )

        try:
            recording = self.recording_store.add_recording(
                Recording(
                    speaker_id=speaker.speaker_id,
                    full_name=speaker.full_name,
                    native_language=speaker.language.value,
                    recorded_language=upload.recorded_language.value,
                    phrase_index=upload.phrase_index + 1,
                    phrase_text=upload.phrase_text.strip(),
                    file_name=file_name,
                    blob_path=blob_path,
                    mime_type=upload.mime_type,
                )
            )
        except Exception:
            logger.exception(f"Could not log {file_name}, removing uploaded blob")
            self.storage.delete(blob_path)
            raise
        logger.info(f"Recording logged: {recording.public_id}")
        return recording

    def list_recordings(self) -> list[Recording]:
        return self.recording_store.list_recordings()

    def download_recording(self, public_id: str) -> RecordingDownload:
        """Fetch a clip's bytes.

        Raises:
            RecordingNotFoundError: If the recording or its blob is missing.
        """
        recording = self.recording_store.get_recording(public_id)
        try:
            data = self.storage.download(recording.blob_path)
        except FileNotFoundError as e:
            logger.warning(f"Blob missing for recording {public_id}: {recording.blob_path}")
            raise RecordingNotFoundError(
                f"Audio for recording '{public_id}' not found"
            ) from e
        return RecordingDownload(recording=recording, data=data)

    def update_status(self, public_id: str, status: RecordingStatus) -> Recording:
        recording = self.recording_store.update_status(public_id, status)
        logger.info(f"Recording {public_id} marked {status.value}")
        return recording
