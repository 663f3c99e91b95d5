from datetime import date

from pydantic import BaseModel, Field

from app.processor.models import ExtractionResult


class ExtractedPayload(BaseModel):
    """Structured fields as returned to the client."""

    doc_type: str
    holder_name: str | None = None
    tax_code: str | None = None
    issue_date: date | None = None
    expiry_date: date | None = None


class UploadResponse(BaseModel):
    """Response of the worker document upload endpoint."""

    ok: bool = True
    file: str = Field(description="Server-relative path of the stored upload")
    url: str = Field(description="Absolute URL of the stored upload")
    ocr: str = Field(description="Raw OCR text, or the stub text when OCR was not performed")
    ocr_stub: bool = Field(description="True when the record was not derived from real OCR")
    extracted: ExtractedPayload
    confidence: float = Field(ge=0.0, le=1.0)

    @classmethod
    def from_result(cls, result: ExtractionResult, file: str, url: str) -> "UploadResponse":
        fields = result.fields
        return cls(
            file=file,
            url=url,
            ocr=result.raw_text.content,
            ocr_stub=result.raw_text.is_stub,
            extracted=ExtractedPayload(
                doc_type=fields.doc_type,
                holder_name=fields.holder_name,
                tax_code=fields.tax_code,
                issue_date=fields.issue_date,
                expiry_date=fields.expiry_date,
            ),
            confidence=fields.confidence,
        )


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str
