"""
prescripta.recompute
====================

The single pure pass that turns case state into everything a caller
renders.  It is invoked after every mutation; nothing is cached between
calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Optional

from .durations import stage_duration, total_duration
from .errors import InsufficientData
from .events import EventStore
from .models import CaseConfiguration, Stage, StageDuration, TotalDuration
from .prescription import PrescriptionReport, compute_windows
from .timeline import TimelineProjection, TimelineProjector


@dataclass(frozen=True)
class CaseState:
    config: CaseConfiguration
    events: EventStore


@dataclass(frozen=True)
class DerivedResults:
    report: PrescriptionReport
    stage_durations: Dict[Stage, Optional[StageDuration]]
    total_duration: Optional[TotalDuration]
    timeline: Optional[TimelineProjection]


def recompute(state: CaseState, today: Optional[date] = None, scale: float = 1.0) -> DerivedResults:
    """Derive windows, durations and the timeline projection from *state*."""
    today = today or date.today()
    report = compute_windows(state.config, state.events, today=today)

    try:
        timeline = TimelineProjector(scale=scale).project(state.config.crime_date, state.events)
    except InsufficientData:
        timeline = None

    return DerivedResults(
        report=report,
        stage_durations={stage: stage_duration(state.events, stage) for stage in Stage},
        total_duration=total_duration(state.events),
        timeline=timeline,
    )
