class ExtractionError(Exception):
    """Raised when structured extraction produces no usable record."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class MalformedResponseError(ExtractionError):
    """Raised when the AI provider answers with something that is not a JSON object."""


class ExtractionValidationError(MalformedResponseError):
    """Raised when the JSON object lacks required keys or has wrongly typed fields."""
