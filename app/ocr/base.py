from abc import ABC, abstractmethod


class BaseOcrEngine(ABC):
    """Contract for all OCR / text-layer adapters."""

    @abstractmethod
    def recognize(self, data: bytes) -> str:
        """Return the text recognized in a document.

        Args:
            data: Raw file content (PDF or image bytes).

        Returns:
            Recognized text as a single stripped string, possibly empty.

        Raises:
            OcrError: if recognition fails for any reason.
        """
