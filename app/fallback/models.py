from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PartialFields:
    """Fields recovered from raw text by pattern matching alone."""

    issue_date: date | None = None
    expiry_date: date | None = None
    tax_code: str | None = None
