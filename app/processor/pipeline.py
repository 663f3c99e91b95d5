from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from app.extraction.models import ExtractedFields
from app.fallback.models import PartialFields
from app.ocr.models import RawText
from app.processor.models import UploadedDocument


@dataclass(slots=True)
class PipelineContext:
    """Per-request state passed from step to step. Never shared between requests."""

    document: UploadedDocument
    raw_text: RawText | None = None
    fields: ExtractedFields = field(default_factory=ExtractedFields)
    structured: bool = False  # True when the field extractor succeeded
    fallback: PartialFields | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
