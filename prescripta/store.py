"""
prescripta.store
================

Key‑value persistence behind a two‑method interface::

    load(key) -> str | None
    save(key, blob) -> None

:class:`MemoryStore` keeps blobs in a dict (tests, throw‑away sessions);
:class:`SQLiteStore` wraps the CRUD helpers in :pymod:`prescripta.db` so
a session can switch to a persistent store without changing its calls.

Case state is serialized to JSON through pydantic records that mirror the
plain dataclasses in :pymod:`prescripta.models`.
"""

from __future__ import annotations

import datetime as dt
from typing import TYPE_CHECKING, Dict, List, Optional, Protocol, Tuple

from pydantic import BaseModel

from prescripta.events import EventStore
from prescripta.models import (
    CaseConfiguration,
    ProceduralEvent,
    RecurseType,
    Stage,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


class KeyValueStore(Protocol):
    def load(self, key: str) -> Optional[str]: ...

    def save(self, key: str, blob: str) -> None: ...


class MemoryStore:
    """Dict‑backed store."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def save(self, key: str, blob: str) -> None:
        self._data[key] = blob

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


class SQLiteStore:
    """
    Store backed by the ``stored_blob`` table.

    Tables are created on first use, so pointing it at a fresh file works.
    *sqlmodel* is only imported once a store is built.
    """

    def __init__(self, bind: Optional[Engine] = None) -> None:
        from prescripta import db

        self._db = db
        db.create_all(bind)
        self._session = db.SessionLocal(bind)

    def load(self, key: str) -> Optional[str]:
        return self._db.load_blob(self._session, key)

    def save(self, key: str, blob: str) -> None:
        self._db.save_blob(self._session, key, blob)

    def close(self) -> None:
        self._session.close()

    # ----------------------------------------------------- context manager
    def __enter__(self) -> "SQLiteStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


# ---------------------------------------------------------------------------
# Case (de)serialization
# ---------------------------------------------------------------------------
class EventRecord(BaseModel):
    id: str
    name: str
    stage: Stage
    is_interruption: bool = False
    date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    recurse_type: Optional[RecurseType] = None
    tribunal: Optional[str] = None

    @classmethod
    def from_event(cls, ev: ProceduralEvent) -> "EventRecord":
        return cls(
            id=ev.id,
            name=ev.name,
            stage=ev.stage,
            is_interruption=ev.is_interruption,
            date=ev.date,
            end_date=ev.end_date,
            recurse_type=ev.recurse_type,
            tribunal=ev.tribunal,
        )

    def to_event(self) -> ProceduralEvent:
        return ProceduralEvent(
            id=self.id,
            name=self.name,
            stage=self.stage,
            is_interruption=self.is_interruption,
            date=self.date,
            end_date=self.end_date,
            recurse_type=self.recurse_type,
            tribunal=self.tribunal,
        )


class CaseRecord(BaseModel):
    crime_date: Optional[dt.date] = None
    max_penalty_years: int = 2
    crime_type: str = ""
    events: List[EventRecord] = []


def case_record(config: CaseConfiguration, events: EventStore) -> CaseRecord:
    return CaseRecord(
        crime_date=config.crime_date,
        max_penalty_years=config.max_penalty_years,
        crime_type=config.crime_type,
        events=[EventRecord.from_event(ev) for ev in events],
    )


def dump_case(config: CaseConfiguration, events: EventStore) -> str:
    """Serialize a case to a JSON blob."""
    return case_record(config, events).model_dump_json()


def load_case(blob: str) -> Tuple[CaseConfiguration, EventStore]:
    """Inverse of :pyfunc:`dump_case`; penalty years are clamped on the way in."""
    record = CaseRecord.model_validate_json(blob)
    config = CaseConfiguration(
        crime_date=record.crime_date,
        max_penalty_years=record.max_penalty_years,
        crime_type=record.crime_type,
    )
    return config, EventStore(r.to_event() for r in record.events)
