from collections.abc import Callable
from typing import ClassVar

from app.config.settings import Settings
from app.ocr.base import BaseOcrEngine
from app.ocr.dispatch_adapter import DispatchAdapter
from app.ocr.pdfplumber_adapter import PdfPlumberAdapter
from app.ocr.pymupdf_adapter import PyMuPdfAdapter
from app.ocr.tesseract_adapter import TesseractAdapter


def _tesseract(settings: Settings) -> BaseOcrEngine:
    return TesseractAdapter(
        lang=settings.tesseract_lang,
        timeout_seconds=settings.ocr_timeout_seconds,
    )


def _auto(settings: Settings) -> BaseOcrEngine:
    return DispatchAdapter(pdf_engine=PyMuPdfAdapter(), image_engine=_tesseract(settings))


class OcrEngineFactory:
    """Creates the configured OCR engine, or None when OCR is switched off."""

    ENGINES: ClassVar[dict[str, Callable[[Settings], BaseOcrEngine]]] = {
        "auto": _auto,
        "pdfplumber": lambda _settings: PdfPlumberAdapter(),
        "pymupdf": lambda _settings: PyMuPdfAdapter(),
        "tesseract": _tesseract,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrEngine | None:
        engine = settings.ocr_engine.lower()
        if engine == "none":
            return None
        builder = cls.ENGINES.get(engine)
        if builder is None:
            raise ValueError(
                f"Unknown OCR engine '{engine}'. Choose from: {['none', *cls.ENGINES]}"
            )
        return builder(settings)
