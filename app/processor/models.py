from dataclasses import dataclass
from pathlib import Path

from app.extraction.models import ExtractedFields
from app.ocr.models import RawText


@dataclass(frozen=True)
class UploadedDocument:
    """One submitted file, persisted before the pipeline runs."""

    stored_path: Path
    original_name: str
    content_type: str = ""  # as reported by the client, advisory only

    @property
    def stored_name(self) -> str:
        return self.stored_path.name


@dataclass(frozen=True)
class ExtractionResult:
    """Merged fields paired with the OCR text they were extracted from."""

    fields: ExtractedFields
    raw_text: RawText

    @property
    def is_unverified(self) -> bool:
        """True when the fields were not derived from real OCR output."""
        return self.raw_text.is_stub
