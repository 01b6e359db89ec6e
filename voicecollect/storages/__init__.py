"""Blob storage backends."""

from voicecollect.domain.protocols import BlobStorageProtocol
from voicecollect.storages.local_storage import LocalStorage
from voicecollect.storages.settings import StorageSettings, settings


def create_storage(storage_settings: StorageSettings = settings) -> BlobStorageProtocol:
    """Create the configured storage backend."""
    if storage_settings.storage_type == "gcs":
        if not storage_settings.gcs_bucket_name:
            raise ValueError(
                "VOICECOLLECT_STORAGE_GCS_BUCKET_NAME must be set when storage_type is 'gcs'"
            )
        from voicecollect.storages.gcs_storage import GCSStorage

        return GCSStorage(
            bucket_name=storage_settings.gcs_bucket_name,
            project_id=storage_settings.gcs_project_id,
        )
    return LocalStorage(base_path=storage_settings.local_path)


__all__ = ["LocalStorage", "create_storage"]
