"""
api.reference
=============

Read‑only reference tables and the quick single‑deadline calculator.
"""

from dataclasses import asdict

from fastapi import APIRouter, HTTPException, Query

from prescripta.dates import parse_date
from prescripta.errors import InvalidDate
from prescripta.reference import CRIME_TYPES, PROCESS_STAGES, quick_prescription
from .schemas import QuickOut

router = APIRouter(prefix="/reference", tags=["reference"])


@router.get("/crime-types")
def crime_types():
    return [asdict(c) for c in CRIME_TYPES]


@router.get("/stages")
def process_stages():
    return [asdict(s) for s in sorted(PROCESS_STAGES, key=lambda s: s.order)]


@router.get("/quick", response_model=QuickOut)
def quick(
    crime_date: str = Query(..., description="DD/MM/YYYY"),
    crime_type: str = Query(..., description="id from /reference/crime-types"),
    today: str | None = Query(None, description="evaluate as of DD/MM/YYYY"),
):
    try:
        start = parse_date(crime_date)
        as_of = parse_date(today) if today else None
    except InvalidDate as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    try:
        result = quick_prescription(start, crime_type, today=as_of)
    except KeyError:
        raise HTTPException(status_code=404, detail="Unknown crime type")
    return QuickOut(crime_type=crime_type, **asdict(result))
