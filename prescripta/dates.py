"""
prescripta.dates
================

Date helpers shared by every component: ``DD/MM/YYYY`` parsing and
formatting, whole‑year addition and signed day differences.

Year addition uses :class:`dateutil.relativedelta.relativedelta`, which
clamps to the last valid day of the target month: 29 February plus one
year is 28 February.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from dateutil.relativedelta import relativedelta

from .errors import InvalidDate

DATE_FORMAT = "%d/%m/%Y"
_DATE_RE = re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$")


def parse_date(text: str) -> date:
    """
    Parse ``DD/MM/YYYY`` (leading zeros optional) into a :class:`date`.

    Raises :class:`~prescripta.errors.InvalidDate` for anything else,
    impossible calendar dates included.

    >>> parse_date("01/06/2023")
    datetime.date(2023, 6, 1)
    """
    cleaned = (text or "").strip()
    if not _DATE_RE.match(cleaned):
        raise InvalidDate(text)
    try:
        return datetime.strptime(cleaned, DATE_FORMAT).date()
    except ValueError:
        raise InvalidDate(text) from None


def format_date(value: Optional[date]) -> str:
    return value.strftime(DATE_FORMAT) if value is not None else "—"


def add_years(start: date, years: int) -> date:
    """Same day‑of‑year *years* later, clamped to the end of the month."""
    return start + relativedelta(years=years)


def days_between(start: date, end: date) -> int:
    """Signed calendar‑day difference ``end - start``."""
    return (end - start).days
