"""
prescripta.models
=================

Dataclasses and enums representing a case: its procedural events, its
configuration and the limitation windows derived from them.  These
objects are intentionally lightweight; they carry **no** external‑library
dependencies so that importing them stays fast.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Optional

MIN_PENALTY_YEARS = 2
MAX_PENALTY_YEARS = 12


class Stage(Enum):
    """Procedural phases an event can belong to."""
    INSTRUCTION = "instruction"
    TRIAL = "trial"
    RECURSE = "recurse"

    def __str__(self) -> str:        # nicer REPL display
        return self.value


class RecurseType(Enum):
    """Kind of appeal filed during the recurse stage."""
    APELACION = "apelacion"
    CASACION = "casacion"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProceduralEvent:
    """
    A named milestone of the procedure.

    Parameters
    ----------
    id : str
        Stable identifier, unique within an event set.
    name : str
        Display label (e.g., "Sentencia").
    stage : Stage
        Procedural phase the event belongs to.
    is_interruption : bool, default=False
        Whether the event restarts a limitation clock.
    date : datetime.date | None, default=None
        When the event happened; ``None`` means "not yet occurred".
    end_date : datetime.date | None, default=None
        Closing date of span events (e.g., an appeal).
    recurse_type : RecurseType | None, default=None
        Appeal kind, only meaningful for recurse‑stage events.
    tribunal : str | None, default=None
        Court hearing the appeal.
    """
    id: str
    name: str
    stage: Stage
    is_interruption: bool = False
    date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    recurse_type: Optional[RecurseType] = None
    tribunal: Optional[str] = None

    @property
    def is_dated(self) -> bool:
        return self.date is not None

    def __post_init__(self):
        if self.date is not None and self.end_date is not None and self.end_date < self.date:
            raise ValueError(f"{self.id}: end date cannot precede start date")


@dataclass(frozen=True)
class LimitationWindow:
    """
    One limitation‑clock segment between two procedural milestones.

    ``expired`` is true iff the window closed (``end_date``) after its
    ``deadline``.
    """
    label: str
    start_date: dt.date
    end_date: dt.date
    deadline: dt.date
    expired: bool

    @property
    def margin_days(self) -> int:
        """Days left between the window's end and its deadline (negative once expired)."""
        return (self.deadline - self.end_date).days


def clamp_penalty_years(years: int) -> int:
    """Force *years* into the statutory range [2, 12]."""
    return min(max(int(years), MIN_PENALTY_YEARS), MAX_PENALTY_YEARS)


@dataclass
class CaseConfiguration:
    """
    Case‑wide parameters.

    ``max_penalty_years`` is clamped to [2, 12] on every assignment,
    construction included, so out‑of‑range input never reaches the engine.
    """
    crime_date: Optional[dt.date] = None
    max_penalty_years: int = MIN_PENALTY_YEARS
    crime_type: str = ""

    def __setattr__(self, name, value):
        if name == "max_penalty_years":
            value = clamp_penalty_years(value)
        super().__setattr__(name, value)


@dataclass(frozen=True)
class StageDuration:
    """Elapsed time expressed with the fixed 30‑day month."""
    months: int
    days: int
    total_days: int

    def __str__(self) -> str:
        return f"{self.months} meses y {self.days} días"


@dataclass(frozen=True)
class TotalDuration:
    """Elapsed time expressed with 365‑day years and 30‑day months."""
    years: int
    months: int
    days: int
    total_days: int

    def __str__(self) -> str:
        return f"{self.years} años, {self.months} meses y {self.days} días"
