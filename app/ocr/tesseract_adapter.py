import io

import pytesseract
from PIL import Image

from app.ocr.base import BaseOcrEngine
from app.ocr.exceptions import OcrError


class TesseractAdapter(BaseOcrEngine):
    """Runs Tesseract OCR on an image (photo or scan of a certificate)."""

    def __init__(self, lang: str = "ita+eng", timeout_seconds: int = 20) -> None:
        self._lang = lang
        self._timeout_seconds = timeout_seconds

    def recognize(self, data: bytes) -> str:
        try:
            with Image.open(io.BytesIO(data)) as image:
                text = pytesseract.image_to_string(
                    image.convert("RGB"),
                    lang=self._lang,
                    timeout=self._timeout_seconds,
                )
        except Exception as exc:
            # pytesseract signals a timeout with RuntimeError
            raise OcrError(f"tesseract could not read document: {exc}") from exc
        return text.strip()
