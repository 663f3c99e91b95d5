from dataclasses import dataclass
from datetime import date

DEFAULT_DOC_TYPE = "altro"

DOC_TYPES: tuple[str, ...] = (
    "visita_medica",
    "formazione_generale",
    "formazione_specifica",
    "alto_rischio",
    "antincendio",
    "primo_soccorso",
    "dpi",
    "tesserino",
    "preposto",
    "rls",
    DEFAULT_DOC_TYPE,
)


@dataclass(frozen=True)
class ExtractedFields:
    """Structured record extracted from a safety document.

    Both the language-model path and the pattern fallback populate this
    type. ``doc_type`` is never null; unknown documents are ``altro``.
    """

    doc_type: str = DEFAULT_DOC_TYPE
    holder_name: str | None = None
    tax_code: str | None = None
    issue_date: date | None = None
    expiry_date: date | None = None
    confidence: float = 0.0

    def __post_init__(self) -> None:
        if self.doc_type not in DOC_TYPES:
            raise ValueError(f"Unknown doc_type: {self.doc_type!r}")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {self.confidence}")

