"""
prescripta.durations
====================

Elapsed time between procedural events.

Durations use a fixed 30‑day month (and a 365‑day year for the case
total) rather than calendar months, so ``"2 meses y 5 días"`` always means
65 days.  Differences are signed and never clamped: a negative result
means the caller passed the events out of order.
"""

from __future__ import annotations

from typing import Optional

from .dates import days_between
from .events import EventStore
from .models import ProceduralEvent, Stage, StageDuration, TotalDuration

DAYS_PER_MONTH = 30
DAYS_PER_YEAR = 365


def split_days(total_days: int) -> StageDuration:
    """Decompose *total_days* into 30‑day months and remaining days."""
    months, days = divmod(total_days, DAYS_PER_MONTH)
    return StageDuration(months=months, days=days, total_days=total_days)


def duration_between(first: ProceduralEvent, second: ProceduralEvent) -> Optional[StageDuration]:
    """Duration from *first* to *second*, or ``None`` unless both are dated."""
    if first.date is None or second.date is None:
        return None
    return split_days(days_between(first.date, second.date))


def stage_duration(events: EventStore, stage: Stage) -> Optional[StageDuration]:
    """Span between the earliest and latest dated event of *stage*."""
    dated = sorted((e for e in events.events_in_stage(stage) if e.is_dated), key=lambda e: e.date)
    if len(dated) < 2:
        return None
    return duration_between(dated[0], dated[-1])


def total_duration(events: EventStore) -> Optional[TotalDuration]:
    """Span between the earliest and latest dated event across every stage."""
    dated = events.dated_events()
    if len(dated) < 2:
        return None

    total = days_between(dated[0].date, dated[-1].date)
    years, remainder = divmod(total, DAYS_PER_YEAR)
    months, days = divmod(remainder, DAYS_PER_MONTH)
    return TotalDuration(years=years, months=months, days=days, total_days=total)
