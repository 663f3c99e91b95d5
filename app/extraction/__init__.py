from app.extraction.base import BaseFieldExtractor
from app.extraction.extractor import FieldExtractor
from app.extraction.factory import FieldExtractorFactory

__all__ = ["BaseFieldExtractor", "FieldExtractor", "FieldExtractorFactory"]
