"""
prescripta.timeline
===================

Projects dated events onto a one‑dimensional axis for rendering.

Positions are linear in days since the crime date::

    position = days_since_crime * density * scale

with a base density of 10 units per day.  The axis is never shorter than
100 units so that a case with very little data still renders.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from .dates import days_between
from .durations import duration_between
from .errors import InsufficientData
from .events import EventStore
from .models import Stage, StageDuration
from .settings import settings

ZOOM_STEP = 1.5
MIN_SCALE = 0.5
MAX_SCALE = 4.0
MIN_AXIS_LENGTH = 100.0


def clamp_scale(scale: float) -> float:
    return min(max(scale, MIN_SCALE), MAX_SCALE)


@dataclass(frozen=True)
class TimelineMark:
    """A dated event placed on the axis."""
    event_id: str
    name: str
    stage: Stage
    date: date
    position: float
    is_interruption: bool = False
    end_position: Optional[float] = None
    gap_from_previous: Optional[StageDuration] = None


@dataclass(frozen=True)
class TimelineProjection:
    marks: Tuple[TimelineMark, ...]
    axis_length: float
    scale: float
    origin: date
    units_per_day: float

    def position_of(self, when: date) -> float:
        return days_between(self.origin, when) * self.units_per_day

    def centre_offset(self, viewport_width: float) -> float:
        """Scroll offset that centres the median‑indexed mark in the viewport."""
        middle = self.marks[len(self.marks) // 2]
        return max(0.0, middle.position - viewport_width / 2)


class TimelineProjector:
    """
    Holds the zoom state and turns an event set into a projection.

    Example
    -------
    >>> p = TimelineProjector()
    >>> p.zoom_in(); p.scale
    1.5
    """

    def __init__(self, scale: float = 1.0, density: Optional[float] = None) -> None:
        self.scale = clamp_scale(scale)
        self.density = density if density is not None else settings.timeline_density

    # ------------------------------------------------------------------
    # Zoom state
    # ------------------------------------------------------------------
    def zoom_in(self) -> float:
        self.scale = min(self.scale * ZOOM_STEP, MAX_SCALE)
        return self.scale

    def zoom_out(self) -> float:
        self.scale = max(self.scale / ZOOM_STEP, MIN_SCALE)
        return self.scale

    # ------------------------------------------------------------------
    # Projection
    # ------------------------------------------------------------------
    def position(self, crime_date: date, when: date) -> float:
        return days_between(crime_date, when) * self.density * self.scale

    def project(self, crime_date: Optional[date], events: EventStore) -> TimelineProjection:
        """
        Place every dated event on the axis.

        Raises :class:`~prescripta.errors.InsufficientData` without a crime
        date or without at least one dated event.
        """
        dated = events.dated_events()
        if crime_date is None or not dated:
            raise InsufficientData(
                "Ingrese la fecha del hecho y al menos un evento para visualizar la línea temporal"
            )

        marks = []
        previous = None
        for ev in dated:
            marks.append(TimelineMark(
                event_id=ev.id,
                name=ev.name,
                stage=ev.stage,
                date=ev.date,
                position=self.position(crime_date, ev.date),
                is_interruption=ev.is_interruption,
                end_position=self.position(crime_date, ev.end_date) if ev.end_date else None,
                gap_from_previous=duration_between(previous, ev) if previous else None,
            ))
            previous = ev

        axis_length = max(self.position(crime_date, dated[-1].date), MIN_AXIS_LENGTH)
        return TimelineProjection(
            tuple(marks), axis_length, self.scale,
            origin=crime_date, units_per_day=self.density * self.scale,
        )
