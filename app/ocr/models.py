from dataclasses import dataclass


@dataclass(frozen=True)
class RawText:
    """OCR output for one document."""

    content: str
    is_stub: bool = False  # True when no real OCR was performed
