"""Tests for prompt template and JSON schema loading."""

import json
from pathlib import Path

import pytest

from app.extraction.exceptions import ExtractionError
from app.extraction.models import DOC_TYPES
from app.extraction.prompt_loader import load_json_schema, load_prompt_template
from app.extraction.validator import REQUIRED_FIELDS


class TestLoadPromptTemplate:
    def test_loads_default_template(self) -> None:
        template = load_prompt_template()
        assert "{ocr_text}" in template
        assert "{json_schema}" in template

    def test_default_template_formats_with_placeholders_only(self) -> None:
        rendered = load_prompt_template().format(ocr_text="TESTO", json_schema="SCHEMA")
        assert "TESTO" in rendered
        assert "SCHEMA" in rendered

    def test_default_template_lists_every_doc_type(self) -> None:
        template = load_prompt_template()
        for doc_type in DOC_TYPES:
            assert doc_type in template

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Estrai da {ocr_text}")
        assert load_prompt_template(custom) == "Estrai da {ocr_text}"

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(ExtractionError, match="Failed to load prompt"):
            load_prompt_template(Path("/nonexistent/file.txt"))


class TestLoadJsonSchema:
    def test_default_schema_matches_doc_type_set(self) -> None:
        schema = json.loads(load_json_schema())
        assert schema["properties"]["doc_type"]["enum"] == list(DOC_TYPES)

    def test_default_schema_requires_every_field(self) -> None:
        schema = json.loads(load_json_schema())
        assert set(REQUIRED_FIELDS) <= set(schema["required"])
        assert "confidence_overall" in schema["required"]
        assert schema["additionalProperties"] is False

    def test_loads_custom_schema(self, tmp_path: Path) -> None:
        custom = tmp_path / "schema.json"
        custom.write_text('{"type": "object"}')
        assert load_json_schema(custom) == '{"type": "object"}'

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(ExtractionError, match="Failed to load JSON schema"):
            load_json_schema(Path("/nonexistent/schema.json"))
