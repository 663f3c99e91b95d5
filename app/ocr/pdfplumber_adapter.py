import io

import pdfplumber

from app.ocr.base import BaseOcrEngine
from app.ocr.exceptions import OcrError


class PdfPlumberAdapter(BaseOcrEngine):
    """Reads the embedded text layer of a PDF with pdfplumber."""

    def recognize(self, data: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise OcrError(f"pdfplumber could not read document: {exc}") from exc
        return "\n".join(pages).strip()
