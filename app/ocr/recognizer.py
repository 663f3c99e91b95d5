from app.logging.logger import Log
from app.ocr.base import BaseOcrEngine
from app.ocr.exceptions import OcrError
from app.ocr.models import RawText
from app.processor.models import UploadedDocument


def stub_text(document: UploadedDocument) -> str:
    """Placeholder text used when no OCR was performed on *document*."""
    return f"OCR from: {document.original_name} (OCR not performed)"


class TextRecognizer:
    """Obtains raw text for an uploaded document.

    Never raises: a missing engine or any engine failure produces a stub
    result flagged with ``is_stub=True``. The engine is called once, with
    no retries.
    """

    def __init__(self, engine: BaseOcrEngine | None) -> None:
        self._engine = engine

    @property
    def available(self) -> bool:
        return self._engine is not None

    def recognize(self, document: UploadedDocument) -> RawText:
        if self._engine is None:
            Log.info(f"OCR not configured, using stub text for {document.stored_name}")
            return RawText(content=stub_text(document), is_stub=True)

        try:
            data = document.stored_path.read_bytes()
            content = self._engine.recognize(data)
        except (OcrError, OSError) as exc:
            Log.warning(f"OCR failed for {document.stored_name}, using stub text: {exc}")
            return RawText(content=stub_text(document), is_stub=True)
        except Exception as exc:
            Log.warning(
                f"OCR engine raised unexpected {type(exc).__name__} for "
                f"{document.stored_name}, using stub text: {exc}"
            )
            return RawText(content=stub_text(document), is_stub=True)

        Log.info(f"Recognized {len(content)} chars in {document.stored_name}")
        return RawText(content=content, is_stub=False)
