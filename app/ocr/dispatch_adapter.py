from app.ocr.base import BaseOcrEngine
from app.ocr.exceptions import UnsupportedDocumentError

_PDF_MAGIC = b"%PDF"
_IMAGE_MAGICS: tuple[bytes, ...] = (
    b"\x89PNG\r\n\x1a\n",
    b"\xff\xd8\xff",  # JPEG
    b"II*\x00",  # TIFF, little endian
    b"MM\x00*",  # TIFF, big endian
    b"BM",
    b"GIF8",
)


class DispatchAdapter(BaseOcrEngine):
    """Routes a document to the PDF or image engine by sniffing its bytes.

    The client-supplied file name and content type are not trusted.
    """

    def __init__(self, pdf_engine: BaseOcrEngine, image_engine: BaseOcrEngine) -> None:
        self._pdf_engine = pdf_engine
        self._image_engine = image_engine

    def recognize(self, data: bytes) -> str:
        if data.startswith(_PDF_MAGIC):
            return self._pdf_engine.recognize(data)
        if data.startswith(_IMAGE_MAGICS) or _is_webp(data):
            return self._image_engine.recognize(data)
        raise UnsupportedDocumentError("Document is neither a PDF nor a supported image")


def _is_webp(data: bytes) -> bool:
    return data[:4] == b"RIFF" and data[8:12] == b"WEBP"
