from abc import ABC, abstractmethod


class BaseExtractionClient(ABC):
    """Provider-specific chat completion client used by the field extractor."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        schema_name: str,
        json_schema: dict[str, object],
    ) -> str:
        """Return the provider's answer as plain text (expected to be JSON).

        Raises:
            ExtractionNetworkError: when the provider cannot be reached or errors.
            MalformedResponseError: when the provider returns no content.
        """
