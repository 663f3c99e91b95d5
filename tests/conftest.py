import io
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from app.processor.models import UploadedDocument

CERTIFICATE_LINES = (
    "ATTESTATO DI FORMAZIONE GENERALE",
    "Nome: Mario Rossi",
    "Codice fiscale: RSSMRA80A01H501U",
    "Rilasciato il 15/03/2024",
    "Valido fino al 15/03/2026",
)


def _pdf(lines: tuple[str, ...]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    y = 780
    for line in lines:
        c.drawString(72, y, line)
        y -= 24
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """A minimal single-page PDF with known text content."""
    return _pdf(("Hello PDF World",))


@pytest.fixture()
def certificate_pdf_bytes() -> bytes:
    """A training certificate with a holder, a tax code and two dates."""
    return _pdf(CERTIFICATE_LINES)


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """A valid PDF with a blank page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (40, 20), "white").save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def make_document(tmp_path: Path) -> Callable[..., UploadedDocument]:
    """Write bytes under tmp_path and describe them as an UploadedDocument."""

    def _make(data: bytes = b"%PDF-fake", original_name: str = "certificato.pdf") -> UploadedDocument:
        path = tmp_path / f"1700000000000_{original_name.replace(' ', '_')}"
        path.write_bytes(data)
        return UploadedDocument(stored_path=path, original_name=original_name)

    return _make
