class ProcessorError(Exception):
    """Base exception for upload handling errors outside the extraction pipeline."""


class UploadStoreError(ProcessorError):
    """Raised when an uploaded file cannot be written to the uploads directory."""
