"""
prescripta.prescription
=======================

Limitation‑window engine.

The procedure is cut into a fixed chain of windows.  Each window's clock
starts on the date of its opener (the crime date for the first one, then
the terminating event of the previous window) and runs until its own
terminating event, or until *today* while that event is undated.  A
window only exists once its opener is dated, and each window restarts the
clock: the interruption events do not merely pause it.

The case is prescribed as soon as any window expired; timely action in a
later window never cures an earlier expiry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Sequence, Tuple

from .dates import add_years
from .events import ELEVATION_REQUEST, INDICTMENT, SENTENCE, EventStore
from .models import CaseConfiguration, LimitationWindow

logger = logging.getLogger(__name__)

CRIME_DATE = "crime_date"


@dataclass(frozen=True)
class WindowStep:
    """One link of the chain: which event closes the window and which opens it."""
    label: str
    terminating_event: str
    opened_by: str = CRIME_DATE


# ---------------------------------------------------------------------
# Ordered chain: each step is opened by the previous step's terminator
# ---------------------------------------------------------------------
WINDOW_CHAIN: Tuple[WindowStep, ...] = (
    WindowStep("Del hecho al primer llamado a indagatoria", INDICTMENT),
    WindowStep(
        "Del primer llamado a indagatoria al requerimiento de elevación",
        ELEVATION_REQUEST,
        opened_by=INDICTMENT,
    ),
    WindowStep(
        "Del requerimiento de elevación a la sentencia",
        SENTENCE,
        opened_by=ELEVATION_REQUEST,
    ),
)


def validate_chain(chain: Sequence[WindowStep]) -> None:
    """
    Raise :class:`ValueError` unless every step is opened by its
    predecessor's terminating event (the first by the crime date).
    """
    expected = CRIME_DATE
    for step in chain:
        if step.opened_by != expected:
            raise ValueError(
                f"window {step.label!r} opened by {step.opened_by!r}, expected {expected!r}"
            )
        expected = step.terminating_event


validate_chain(WINDOW_CHAIN)


@dataclass(frozen=True)
class MissingPrerequisite:
    """A window that could not be produced because *required* is undated."""
    label: str
    required: str


@dataclass(frozen=True)
class PrescriptionReport:
    """
    Result of one evaluation pass.

    Attributes
    ----------
    windows : tuple[LimitationWindow, ...]
        Produced windows, in chain order.
    missing : tuple[MissingPrerequisite, ...]
        Chain steps that were skipped for lack of a dated opener.
    evaluated_on : datetime.date
        The single "today" used for every open window of this pass.
    """
    windows: Tuple[LimitationWindow, ...]
    missing: Tuple[MissingPrerequisite, ...] = field(default_factory=tuple)
    evaluated_on: Optional[date] = None

    @property
    def prescribed(self) -> Optional[bool]:
        """``None`` without windows, else whether any window expired."""
        if not self.windows:
            return None
        return any(w.expired for w in self.windows)

    @property
    def expired_windows(self) -> List[LimitationWindow]:
        return [w for w in self.windows if w.expired]


def compute_windows(
    config: CaseConfiguration,
    events: EventStore,
    today: Optional[date] = None,
    chain: Sequence[WindowStep] = WINDOW_CHAIN,
) -> PrescriptionReport:
    """
    Derive the limitation windows of a case.

    *today* is sampled once (defaults to :pyfunc:`date.today`) so every
    open window of the pass closes on the same day.

    Examples
    --------
    >>> cfg = CaseConfiguration(crime_date=date(2020, 1, 10), max_penalty_years=5)
    >>> report = compute_windows(cfg, EventStore.default(), today=date(2026, 3, 1))
    >>> [(w.deadline, w.expired) for w in report.windows]
    [(datetime.date(2025, 1, 10), True)]
    """
    validate_chain(chain)
    today = today or date.today()
    windows: List[LimitationWindow] = []
    missing: List[MissingPrerequisite] = []

    start = config.crime_date
    for step in chain:
        if start is None:
            missing.append(MissingPrerequisite(step.label, step.opened_by))
            continue

        terminator = events.find(step.terminating_event)
        closed_on = terminator.date if terminator is not None else None
        end = closed_on or today
        deadline = add_years(start, config.max_penalty_years)
        window = LimitationWindow(
            label=step.label,
            start_date=start,
            end_date=end,
            deadline=deadline,
            expired=end > deadline,
        )
        logger.debug("window %r: %s → %s (deadline %s, expired=%s)",
                     step.label, start, end, deadline, window.expired)
        windows.append(window)
        start = closed_on

    return PrescriptionReport(tuple(windows), tuple(missing), today)
