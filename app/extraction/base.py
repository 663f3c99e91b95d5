from abc import ABC, abstractmethod

from app.extraction.models import ExtractedFields


class BaseFieldExtractor(ABC):
    """Contract for structured field extractors."""

    @abstractmethod
    def extract(self, text: str) -> ExtractedFields:
        """Turn raw OCR text into a schema-conformant record.

        Args:
            text: Raw text produced by the text recognizer.

        Returns:
            ExtractedFields with a confidence in [0, 1].

        Raises:
            ExtractionError: on any failure. No partial record is returned.
        """
