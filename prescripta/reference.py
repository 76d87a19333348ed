"""
prescripta.reference
====================

Static reference tables (crime types, process stages) and the quick
single‑deadline calculator that consumes them.

The quick calculator ignores interruptions entirely: it adds the crime
type's prescription period to the crime date and reports how many days
remain.  It is a rough first look, the chained engine in
:pymod:`prescripta.prescription` is the real computation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Optional, Tuple

from .dates import add_years
from .settings import settings


@dataclass(frozen=True)
class CrimeType:
    id: str
    name: str
    prescription_years: int


@dataclass(frozen=True)
class ProcessStage:
    id: str
    name: str
    order: int


CRIME_TYPES: Tuple[CrimeType, ...] = (
    CrimeType("homicide", "Homicidio", 15),
    CrimeType("robbery", "Robo", 10),
    CrimeType("fraud", "Fraude", 8),
    CrimeType("assault", "Agresión", 5),
    CrimeType("threats", "Amenazas", 3),
)

PROCESS_STAGES: Tuple[ProcessStage, ...] = (
    ProcessStage("investigation", "Investigación Preliminar", 1),
    ProcessStage("instruction", "Instrucción", 2),
    ProcessStage("trial", "Juicio", 3),
    ProcessStage("recurse", "Etapa Recursiva", 4),
)

_CRIME_TYPES_BY_ID: Dict[str, CrimeType] = {c.id: c for c in CRIME_TYPES}


def crime_type(crime_type_id: str) -> CrimeType:
    """Look up a crime type (raise KeyError if not present)."""
    return _CRIME_TYPES_BY_ID[crime_type_id]


@dataclass(frozen=True)
class QuickPrescription:
    deadline: date
    days_remaining: int
    expired: bool
    warning: bool


def quick_prescription(
    crime_date: date,
    crime_type_id: str,
    today: Optional[date] = None,
) -> QuickPrescription:
    """
    Deadline of *crime_type_id* counted from *crime_date*.

    ``warning`` is raised once ``settings.warning_days`` (180 by default)
    or fewer remain, expired cases included.
    """
    today = today or date.today()
    deadline = add_years(crime_date, crime_type(crime_type_id).prescription_years)
    remaining = (deadline - today).days
    return QuickPrescription(
        deadline=deadline,
        days_remaining=remaining,
        expired=remaining < 0,
        warning=remaining <= settings.warning_days,
    )
