"""Deterministic pattern scanner used to backfill extraction gaps.

Dates are purely positional: the first date in the text is taken as the
issue date, the next different one as the expiry date. No ordering check
is made between them.
"""

import re
from datetime import date
from typing import ClassVar

from app.fallback.models import PartialFields


class PatternFallback:
    """Scans raw OCR text for dates (DD/MM/YYYY, YYYY-MM-DD) and a tax code."""

    _DATE_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"(?<!\d)"
        r"(?:"
        r"(?P<day>\d{2})/(?P<month>\d{2})/(?P<year>\d{4})"
        r"|"
        r"(?P<iso_year>\d{4})-(?P<iso_month>\d{2})-(?P<iso_day>\d{2})"
        r")"
        r"(?!\d)",
    )
    # Italian codice fiscale, without omocodia substitutions
    _TAX_CODE_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"\b[A-Z]{6}\d{2}[A-Z]\d{2}[A-Z]\d{3}[A-Z]\b",
        re.IGNORECASE,
    )

    def scan(self, text: str) -> PartialFields:
        """Extract candidate fields from *text*. Pure and deterministic."""
        dates = self.find_dates(text)
        return PartialFields(
            issue_date=dates[0] if dates else None,
            expiry_date=dates[1] if len(dates) > 1 else None,
            tax_code=self.find_tax_code(text),
        )

    def find_dates(self, text: str) -> list[date]:
        """Distinct valid calendar dates in order of first appearance."""
        found: list[date] = []
        for match in self._DATE_RE.finditer(text):
            value = self._to_date(match)
            if value is not None and value not in found:
                found.append(value)
        return found

    def find_tax_code(self, text: str) -> str | None:
        match = self._TAX_CODE_RE.search(text)
        return match.group(0).upper() if match else None

    @staticmethod
    def _to_date(match: re.Match[str]) -> date | None:
        if match.group("year") is not None:
            year, month, day = match.group("year"), match.group("month"), match.group("day")
        else:
            year, month, day = (
                match.group("iso_year"),
                match.group("iso_month"),
                match.group("iso_day"),
            )
        try:
            return date(int(year), int(month), int(day))
        except ValueError:
            # 31/02/2024 and similar: not a calendar date
            return None
