"""
api.case
========

Endpoints over the single editable case.

Mutations answer with ``applied`` plus the resulting case: invalid date
text is not an HTTP error, the state is simply left unchanged (the desk
form re‑sends on every keystroke).  Unknown event ids are a 404.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from prescripta.dates import parse_date
from prescripta.errors import InsufficientData, InvalidDate
from prescripta.session import CaseSession
from prescripta.store import CaseRecord, case_record
from prescripta.timeline import TimelineProjector
from .deps import get_session
from .schemas import CaseUpdateResult, ConfigUpdate, EventUpdate, ReportOut, TimelineOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/case", tags=["case"])


def _record(session: CaseSession) -> CaseRecord:
    return case_record(session.config, session.events)


def _as_of(today: Optional[str]):
    if today is None:
        return None
    try:
        return parse_date(today)
    except InvalidDate as exc:
        raise HTTPException(status_code=400, detail=str(exc))


# ---------- GET /case ----------
@router.get("", response_model=CaseRecord)
def get_case(session: CaseSession = Depends(get_session)):
    return _record(session)


# ---------- PUT /case/config ----------
@router.put("/config", response_model=CaseUpdateResult)
def update_config(body: ConfigUpdate, session: CaseSession = Depends(get_session)):
    applied = True
    if body.crime_date is not None:
        if body.crime_date == "":
            session.set_crime_date(None)
        else:
            applied = session.enter_crime_date(body.crime_date) and applied
    if body.max_penalty_years is not None:
        session.set_max_penalty_years(body.max_penalty_years)
    if body.crime_type is not None:
        session.set_crime_type(body.crime_type)
    return CaseUpdateResult(applied=applied, case=_record(session))


# ---------- PUT /case/events/{event_id} ----------
@router.put("/events/{event_id}", response_model=CaseUpdateResult)
def update_event(event_id: str, body: EventUpdate, session: CaseSession = Depends(get_session)):
    if event_id not in session.events:
        raise HTTPException(status_code=404, detail="Event not found")

    applied = True
    if body.date is not None or body.end_date is not None:
        applied = session.enter_event_dates(event_id, date_text=body.date, end_text=body.end_date)

    metadata = body.model_dump(include={"recurse_type", "tribunal"}, exclude_none=True)
    if metadata:
        session.update_event(event_id, **metadata)
    if not applied:
        logger.info("event %s: some fields were ignored", event_id)
    return CaseUpdateResult(applied=applied, case=_record(session))


# ---------- GET /case/report ----------
@router.get("/report", response_model=ReportOut)
def get_report(
    today: Optional[str] = Query(None, description="evaluate as of DD/MM/YYYY"),
    session: CaseSession = Depends(get_session),
):
    return ReportOut.from_results(session.results(today=_as_of(today)))


# ---------- GET /case/timeline ----------
@router.get("/timeline", response_model=TimelineOut)
def get_timeline(
    scale: float = Query(1.0, gt=0, description="zoom factor, clamped to 0.5-4"),
    session: CaseSession = Depends(get_session),
):
    try:
        projection = TimelineProjector(scale=scale).project(session.config.crime_date, session.events)
    except InsufficientData as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return TimelineOut.from_projection(projection)
