from dataclasses import replace

from app.extraction.base import BaseFieldExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.models import ExtractedFields
from app.fallback.pattern_scanner import PatternFallback
from app.logging.logger import Log
from app.ocr.recognizer import TextRecognizer
from app.processor.pipeline import PipelineContext, PipelineStep


class RecognizeTextStep(PipelineStep):
    def __init__(self, recognizer: TextRecognizer) -> None:
        self._recognizer = recognizer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_text = self._recognizer.recognize(context.document)
        return context


class ExtractFieldsStep(PipelineStep):
    """Sets the base record: the extractor's answer, or an empty zero-confidence one."""

    def __init__(self, extractor: BaseFieldExtractor | None) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.raw_text is None:
            raise ValueError("PipelineContext.raw_text must be set before extraction")
        context.fields = ExtractedFields()
        context.structured = False
        if self._extractor is None:
            Log.info(
                f"Structured extraction not configured for {context.document.stored_name}"
            )
            return context
        try:
            context.fields = self._extractor.extract(context.raw_text.content)
            context.structured = True
        except ExtractionError as exc:
            Log.warning(
                f"Structured extraction failed for {context.document.stored_name}, "
                f"falling back to patterns: {exc}"
            )
        return context


class BackfillStep(PipelineStep):
    """Fills empty fields from the pattern scan. Present values are never replaced."""

    def __init__(self, fallback: PatternFallback) -> None:
        self._fallback = fallback

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.raw_text is None:
            raise ValueError("PipelineContext.raw_text must be set before backfill")
        if context.raw_text.is_stub:
            # stub text only echoes the client file name
            Log.info(f"No OCR text for {context.document.stored_name}, backfill skipped")
            return context
        scanned = self._fallback.scan(context.raw_text.content)
        context.fallback = scanned

        base = context.fields
        updates: dict[str, object] = {}
        if base.issue_date is None and scanned.issue_date is not None:
            updates["issue_date"] = scanned.issue_date
        if base.expiry_date is None and scanned.expiry_date is not None:
            updates["expiry_date"] = scanned.expiry_date
        if base.tax_code is None and scanned.tax_code is not None:
            updates["tax_code"] = scanned.tax_code

        if updates:
            # confidence is left untouched
            context.fields = replace(base, **updates)
            Log.info(
                f"Backfilled {sorted(updates)} for {context.document.stored_name} "
                "from text patterns"
            )
        return context
