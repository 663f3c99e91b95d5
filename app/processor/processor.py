from app.config.settings import Settings
from app.extraction.base import BaseFieldExtractor
from app.extraction.factory import FieldExtractorFactory
from app.fallback.pattern_scanner import PatternFallback
from app.logging.logger import Log
from app.ocr.factory import OcrEngineFactory
from app.ocr.recognizer import TextRecognizer
from app.processor.models import ExtractionResult, UploadedDocument
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import BackfillStep, ExtractFieldsStep, RecognizeTextStep


class ExtractionPipeline:
    """Turns an uploaded document into one confidence-scored record.

    Pipeline: recognize text -> structured extraction -> pattern backfill.

    OCR and extraction failures are absorbed by the steps, so ``extract``
    always returns a result. The instance holds only its collaborators and
    can serve concurrent requests.
    """

    def __init__(
        self,
        recognizer: TextRecognizer,
        extractor: BaseFieldExtractor | None,
        fallback: PatternFallback,
    ) -> None:
        self._steps: list[PipelineStep] = [
            RecognizeTextStep(recognizer),
            ExtractFieldsStep(extractor),
            BackfillStep(fallback),
        ]

    def extract(self, document: UploadedDocument) -> ExtractionResult:
        Log.info(f"Extracting fields from {document.stored_name}")
        context = PipelineContext(document=document)
        for step in self._steps:
            context = step.run(context)

        if context.raw_text is None:
            raise ValueError("Pipeline finished without recognized text")
        result = ExtractionResult(fields=context.fields, raw_text=context.raw_text)
        Log.info(
            f"Extraction finished for {document.stored_name}: "
            f"doc_type={result.fields.doc_type}, confidence={result.fields.confidence:.2f}, "
            f"structured={context.structured}, ocr_stub={result.raw_text.is_stub}"
        )
        return result


def build_pipeline(settings: Settings) -> ExtractionPipeline:
    """Build an ExtractionPipeline with the adapters selected in settings."""
    recognizer = TextRecognizer(OcrEngineFactory.create(settings))
    extractor = FieldExtractorFactory.create(settings)
    return ExtractionPipeline(
        recognizer=recognizer,
        extractor=extractor,
        fallback=PatternFallback(),
    )
