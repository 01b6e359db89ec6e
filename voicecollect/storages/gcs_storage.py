"""Google Cloud Storage blob backend."""

import logging
from typing import Any

from google.cloud import storage  # type: ignore[import-untyped]
from google.cloud.exceptions import NotFound

logger = logging.getLogger(__name__)


class GCSStorage:
    """Stores blobs in a GCS bucket and addresses them as ``gs://`` URLs."""

    client: Any
    bucket: Any

    def __init__(self, bucket_name: str, project_id: str | None = None) -> None:
        self.client = storage.Client(project=project_id)
        self.bucket = self.client.bucket(bucket_name)
        self.bucket_name = bucket_name

    def _blob_name(self, path: str) -> str:
        """Accept either a bucket-relative key or a gs:// URL for this bucket."""
        prefix = f"gs://{self.bucket_name}/"
        return path.removeprefix(prefix)

    def upload(
        self,
        data: bytes,
        path: str,
        content_type: str | None = None,
    ) -> str:
        name = self._blob_name(path)
        self.bucket.blob(name).upload_from_string(data, content_type=content_type)
        logger.info(f"Uploaded {len(data)} bytes to gs://{self.bucket_name}/{name}")
        return f"gs://{self.bucket_name}/{name}"

    def download(self, path: str) -> bytes:
        """Fetch a blob's bytes.

        Raises:
            FileNotFoundError: If the blob does not exist.
        """
        try:
            return self.bucket.blob(self._blob_name(path)).download_as_bytes()
        except NotFound as e:
            raise FileNotFoundError(path) from e

    def delete(self, path: str) -> None:
        try:
            self.bucket.blob(self._blob_name(path)).delete()
        except NotFound:
            logger.debug(f"Blob already gone: {path}")
