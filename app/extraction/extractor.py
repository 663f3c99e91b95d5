"""AI-powered field extraction for safety documents."""

import json
from pathlib import Path

from app.extraction.base import BaseFieldExtractor
from app.extraction.client_base import BaseExtractionClient
from app.extraction.exceptions import MalformedResponseError
from app.extraction.models import ExtractedFields
from app.extraction.prompt_loader import load_json_schema, load_prompt_template
from app.extraction.validator import validate_and_build
from app.logging.logger import Log

SCHEMA_NAME = "document_fields"
DEFAULT_SYSTEM_PROMPT = (
    "Sei un assistente che estrae dati da documenti di sicurezza sul lavoro. "
    "Rispondi esclusivamente con JSON valido."
)


class FieldExtractor(BaseFieldExtractor):
    """Extracts ExtractedFields from raw OCR text through a chat completion client."""

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.0,
        max_text_chars: int = 4000,
        default_confidence: float = 0.7,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    ) -> None:
        if not 0.0 <= default_confidence <= 1.0:
            raise ValueError(
                f"default_confidence must be within [0, 1], got {default_confidence}"
            )
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._max_text_chars = max_text_chars
        self._default_confidence = default_confidence
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        schema_str = load_json_schema(json_schema_path)
        self._json_schema = schema_str
        self._json_schema_dict = json.loads(schema_str)

    def extract(self, text: str) -> ExtractedFields:
        """Ask the provider for a structured record describing *text*."""
        prompt = self._build_prompt(self._truncate(text))
        Log.debug(f"Extraction prompt:\n{prompt}")

        raw_response = self._call_ai(prompt)
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        fields = validate_and_build(parsed, default_confidence=self._default_confidence)

        Log.info(
            f"Structured extraction complete: doc_type={fields.doc_type}, "
            f"confidence={fields.confidence:.2f}"
        )
        return fields

    def _truncate(self, text: str) -> str:
        # Identity fields sit at the top of certificates, keep the head.
        if self._max_text_chars <= 0 or len(text) <= self._max_text_chars:
            return text
        Log.debug(f"Truncating OCR text from {len(text)} to {self._max_text_chars} chars")
        return text[: self._max_text_chars]

    def _build_prompt(self, text: str) -> str:
        return self._prompt_template.format(
            ocr_text=text,
            json_schema=self._json_schema,
        )

    def _call_ai(self, prompt: str) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            schema_name=SCHEMA_NAME,
            json_schema=self._json_schema_dict,
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError, oversized integer literals, pathological nesting
            raise MalformedResponseError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise MalformedResponseError("JSON response must be an object")
        return parsed
