import re
import time
from pathlib import Path

from app.processor.exceptions import UploadStoreError
from app.processor.models import UploadedDocument

_WHITESPACE_RE = re.compile(r"\s+")
_FALLBACK_NAME = "upload"


def sanitize_filename(original_name: str) -> str:
    """Keep only the base name and replace whitespace runs with underscores."""
    base = original_name.replace("\\", "/").rsplit("/", 1)[-1]
    safe = _WHITESPACE_RE.sub("_", base.strip())
    if safe in ("", ".", ".."):
        return _FALLBACK_NAME
    return safe


def stored_filename(original_name: str, timestamp_ms: int, attempt: int = 0) -> str:
    """Build ``{timestamp_ms}_{safe_name}``, with a counter after a collision."""
    safe = sanitize_filename(original_name)
    if attempt:
        return f"{timestamp_ms}_{attempt}_{safe}"
    return f"{timestamp_ms}_{safe}"


class FileStore:
    """Persists uploaded files under a single directory. Files are never deleted."""

    MAX_NAME_ATTEMPTS = 100

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def save(self, data: bytes, original_name: str, content_type: str = "") -> UploadedDocument:
        """Write *data* to a new unique file and describe it as an UploadedDocument.

        Raises:
            UploadStoreError: if the file cannot be written.
        """
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            path = self._write_new(data, original_name, int(time.time() * 1000))
        except OSError as exc:
            raise UploadStoreError(f"Cannot store upload '{original_name}': {exc}") from exc
        return UploadedDocument(
            stored_path=path,
            original_name=original_name,
            content_type=content_type,
        )

    def _write_new(self, data: bytes, original_name: str, timestamp_ms: int) -> Path:
        for attempt in range(self.MAX_NAME_ATTEMPTS):
            path = self._root / stored_filename(original_name, timestamp_ms, attempt)
            try:
                with path.open("xb") as fh:
                    fh.write(data)
            except FileExistsError:
                continue
            return path
        raise UploadStoreError(f"No free file name for upload '{original_name}'")
