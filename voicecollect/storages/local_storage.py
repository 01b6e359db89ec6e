"""Filesystem blob storage for development and tests."""

from pathlib import Path


class LocalStorage:
    """Stores blobs as files below base_path.

    upload returns an absolute file path; download and delete accept either
    that path or the key passed to upload.
    """

    def __init__(self, base_path: str = "./data/recordings") -> None:
        self.base_path = Path(base_path).resolve()
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _resolve(self, path: str) -> Path:
        file_path = Path(path) if Path(path).is_absolute() else self.base_path / path
        file_path = file_path.resolve()
        if not file_path.is_relative_to(self.base_path):
            raise ValueError(f"Path escapes storage root: {path}")
        return file_path

    def upload(
        self,
        data: bytes,
        path: str,
        content_type: str | None = None,
    ) -> str:
        file_path = self._resolve(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(data)
        return str(file_path)

    def download(self, path: str) -> bytes:
        """Read a stored blob.

        Raises:
            FileNotFoundError: If nothing is stored at path.
        """
        file_path = self._resolve(path)
        if not file_path.is_file():
            raise FileNotFoundError(path)
        return file_path.read_bytes()

    def delete(self, path: str) -> None:
        """Delete a stored blob. Missing files are ignored."""
        self._resolve(path).unlink(missing_ok=True)
