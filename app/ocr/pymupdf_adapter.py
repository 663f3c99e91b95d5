import pymupdf

from app.ocr.base import BaseOcrEngine
from app.ocr.exceptions import OcrError


class PyMuPdfAdapter(BaseOcrEngine):
    """Reads the embedded text layer of a PDF with PyMuPDF."""

    def recognize(self, data: bytes) -> str:
        try:
            with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise OcrError(f"pymupdf could not read document: {exc}") from exc
        return "\n".join(pages).strip()
