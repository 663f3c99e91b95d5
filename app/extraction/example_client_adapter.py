"""Offline extraction client adapter.

Returns a fixed, schema-valid answer without network calls. Selected with
``EXTRACTION_PROVIDER=example`` for local development and as a template
for new provider adapters (implement BaseExtractionClient and register the
provider in FieldExtractorFactory).
"""

import json
from typing import ClassVar

from app.extraction.client_base import BaseExtractionClient


class ExampleClientAdapter(BaseExtractionClient):
    """Answers every request with an unclassified, empty record scored 0."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "doc_type": "altro",
        "holder_name": None,
        "tax_code": None,
        "issue_date": None,
        "expiry_date": None,
        "confidence_overall": 0.0,
    }

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
        _ = model, temperature, system_prompt, user_prompt, schema_name, json_schema
        return json.dumps(self.DEFAULT_RESPONSE)
