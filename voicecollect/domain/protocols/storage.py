"""Blob storage Protocol."""

from typing import Protocol


class BlobStorageProtocol(Protocol):
    """Blob storage interface."""

    def upload(
        self,
        data: bytes,
        path: str,
        content_type: str | None = None,
    ) -> str:
        """Upload a payload.

        Args:
            data: File data
            path: Destination path
            content_type: MIME type

        Returns:
            Handle usable for later download
        """
        ...

    def download(self, path: str) -> bytes:
        """Fetch a payload by the handle returned from upload.

        Raises:
            FileNotFoundError: If nothing is stored under path
        """
        ...

    def delete(self, path: str) -> None:
        """Delete a payload. Missing files are ignored."""
        ...
