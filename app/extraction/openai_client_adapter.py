import httpx
import openai
from openai.types.chat import ChatCompletion

from app.extraction.client_base import BaseExtractionClient
from app.extraction.exceptions import ExtractionNetworkError, MalformedResponseError


class OpenAIClientAdapter(BaseExtractionClient):
    """Extraction client for OpenAI and OpenAI-compatible chat completion APIs.

    One request per document: retries are disabled on the SDK client and a
    failed call surfaces as ExtractionNetworkError.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

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
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {"name": schema_name, "strict": True, "schema": json_schema},
                },
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ExtractionNetworkError(f"AI provider API error: {exc}") from exc

        return self._message_content(response)

    @staticmethod
    def _message_content(response: ChatCompletion) -> str:
        if not response.choices:
            raise MalformedResponseError("AI returned no choices")
        choice = response.choices[0]
        if choice.message.refusal:
            raise MalformedResponseError(f"AI refused the request: {choice.message.refusal}")
        if choice.finish_reason == "length":
            # strict JSON cut at the token limit cannot be parsed
            raise MalformedResponseError("AI response truncated at the token limit")
        if not choice.message.content:
            raise MalformedResponseError("AI returned empty response")
        return choice.message.content
