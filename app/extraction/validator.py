"""Validates the provider's parsed JSON and builds ExtractedFields."""

from datetime import date, datetime
from typing import Any

from app.extraction.exceptions import ExtractionValidationError
from app.extraction.models import DEFAULT_DOC_TYPE, DOC_TYPES, ExtractedFields
from app.logging.logger import Log

REQUIRED_FIELDS: tuple[str, ...] = (
    "doc_type",
    "holder_name",
    "tax_code",
    "issue_date",
    "expiry_date",
)
_ISO_DATE_FORMAT = "%Y-%m-%d"


def validate_and_build(data: dict[str, Any], default_confidence: float) -> ExtractedFields:
    """Validate a parsed provider answer and build ExtractedFields.

    ``doc_type`` outside the closed set is coerced to ``altro``. Date strings
    that are not ISO calendar dates become None so the gap can be backfilled.
    ``confidence_overall`` is used when it is a number within [0, 1],
    otherwise *default_confidence* applies.

    Raises:
        ExtractionValidationError: when a required key is missing or a field
            has the wrong JSON type.
    """
    _require_fields(data)
    return ExtractedFields(
        doc_type=_build_doc_type(data["doc_type"]),
        holder_name=_build_optional_text(data["holder_name"], "holder_name"),
        tax_code=_build_tax_code(data["tax_code"]),
        issue_date=_build_date(data["issue_date"], "issue_date"),
        expiry_date=_build_date(data["expiry_date"], "expiry_date"),
        confidence=_build_confidence(data.get("confidence_overall"), default_confidence),
    )


def _require_fields(data: dict[str, Any]) -> None:
    missing = [field for field in REQUIRED_FIELDS if field not in data]
    if missing:
        raise ExtractionValidationError(f"Missing required fields: {', '.join(missing)}")


def _build_doc_type(raw: Any) -> str:
    if isinstance(raw, str):
        candidate = raw.strip().lower()
        if candidate in DOC_TYPES:
            return candidate
    Log.debug(f"doc_type {raw!r} outside the allowed set, using {DEFAULT_DOC_TYPE}")
    return DEFAULT_DOC_TYPE


def _build_optional_text(raw: Any, name: str) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ExtractionValidationError(f"'{name}' must be a string or null")
    value = " ".join(raw.split())
    return value or None


def _build_tax_code(raw: Any) -> str | None:
    value = _build_optional_text(raw, "tax_code")
    if value is None:
        return None
    return value.replace(" ", "").upper()


def _build_date(raw: Any, name: str) -> date | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ExtractionValidationError(f"'{name}' must be a string or null")
    try:
        return datetime.strptime(raw.strip(), _ISO_DATE_FORMAT).date()
    except ValueError:
        Log.debug(f"'{name}' value {raw!r} is not a YYYY-MM-DD date, discarded")
        return None


def _build_confidence(raw: Any, default: float) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return default
    # also rejects NaN; ints beyond float range compare exactly
    if not 0.0 <= raw <= 1.0:
        return default
    return float(raw)
