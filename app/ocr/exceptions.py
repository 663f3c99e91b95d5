class OcrError(Exception):
    """Raised when an OCR engine cannot produce text for a document."""


class UnsupportedDocumentError(OcrError):
    """Raised when no configured engine can read the document format."""
