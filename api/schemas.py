"""
api.schemas
===========

Request / response models of the HTTP layer.  Dates travel as ISO
strings in responses; user input is ``DD/MM/YYYY`` text, exactly what the
desk form sends.
"""

from __future__ import annotations

import datetime as dt
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from prescripta.models import RecurseType, Stage
from prescripta.recompute import DerivedResults
from prescripta.store import CaseRecord
from prescripta.timeline import TimelineProjection


# ---------- requests ----------
class ConfigUpdate(BaseModel):
    crime_date: Optional[str] = Field(None, description="DD/MM/YYYY")
    max_penalty_years: Optional[int] = Field(None, description="clamped to 2-12")
    crime_type: Optional[str] = None


class EventUpdate(BaseModel):
    date: Optional[str] = Field(None, description="DD/MM/YYYY")
    end_date: Optional[str] = Field(None, description="DD/MM/YYYY")
    recurse_type: Optional[RecurseType] = None
    tribunal: Optional[str] = None


# ---------- responses ----------
class CaseUpdateResult(BaseModel):
    applied: bool
    case: CaseRecord


class WindowOut(BaseModel):
    label: str
    start_date: dt.date
    end_date: dt.date
    deadline: dt.date
    expired: bool
    margin_days: int


class MissingOut(BaseModel):
    label: str
    required: str


class ReportOut(BaseModel):
    prescribed: Optional[bool]
    evaluated_on: dt.date
    windows: List[WindowOut]
    missing: List[MissingOut]
    stage_durations: Dict[str, Optional[str]]
    total_duration: Optional[str]

    @classmethod
    def from_results(cls, results: DerivedResults) -> "ReportOut":
        report = results.report
        return cls(
            prescribed=report.prescribed,
            evaluated_on=report.evaluated_on,
            windows=[
                WindowOut(
                    label=w.label,
                    start_date=w.start_date,
                    end_date=w.end_date,
                    deadline=w.deadline,
                    expired=w.expired,
                    margin_days=w.margin_days,
                )
                for w in report.windows
            ],
            missing=[MissingOut(label=m.label, required=m.required) for m in report.missing],
            stage_durations={
                stage.value: str(d) if d is not None else None
                for stage, d in results.stage_durations.items()
            },
            total_duration=str(results.total_duration) if results.total_duration else None,
        )


class MarkOut(BaseModel):
    event_id: str
    name: str
    stage: Stage
    date: dt.date
    position: float
    is_interruption: bool
    end_position: Optional[float] = None
    gap_from_previous: Optional[str] = None


class TimelineOut(BaseModel):
    scale: float
    axis_length: float
    marks: List[MarkOut]

    @classmethod
    def from_projection(cls, projection: TimelineProjection) -> "TimelineOut":
        return cls(
            scale=projection.scale,
            axis_length=projection.axis_length,
            marks=[
                MarkOut(
                    event_id=m.event_id,
                    name=m.name,
                    stage=m.stage,
                    date=m.date,
                    position=m.position,
                    is_interruption=m.is_interruption,
                    end_position=m.end_position,
                    gap_from_previous=str(m.gap_from_previous) if m.gap_from_previous else None,
                )
                for m in projection.marks
            ],
        )


class QuickOut(BaseModel):
    crime_type: str
    deadline: dt.date
    days_remaining: int
    expired: bool
    warning: bool
