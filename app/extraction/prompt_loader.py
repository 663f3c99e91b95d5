from pathlib import Path

from app.extraction.exceptions import ExtractionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def _read(path: Path, what: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load {what}: {exc}") from exc


def load_prompt_template(path: Path | None = None) -> str:
    """Load the extraction prompt template.

    The template carries two placeholders, ``{ocr_text}`` and
    ``{json_schema}``. Defaults to the bundled extraction_prompt.txt.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / "extraction_prompt.txt", "prompt template")


def load_json_schema(path: Path | None = None) -> str:
    """Load the JSON schema the provider's answer must match.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    return _read(path or _DEFAULT_PROMPT_DIR / "extraction_schema.json", "JSON schema")
