"""
prescripta.events
=================

An ordered, immutable registry of :class:`prescripta.models.ProceduralEvent`
objects keyed by their id.

Updates are functional: :pymeth:`EventStore.update` returns a new store
and leaves the original untouched, so every derived result can be
recomputed from a consistent snapshot.  Only the standard library is used
so the store can be unit‑tested without a database.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Iterable, Iterator, List, Optional

from .errors import EventNotFound
from .models import ProceduralEvent, Stage

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------
# Well‑known events that open / close limitation windows
# ---------------------------------------------------------------------
INDICTMENT = "indictment"
ELEVATION_REQUEST = "instruction_end"
SENTENCE = "sentence"

DEFAULT_EVENTS = (
    # Etapa de Instrucción
    ProceduralEvent("instruction_start", "Inicio de Instrucción", Stage.INSTRUCTION),
    ProceduralEvent(INDICTMENT, "Primer llamado a indagatoria", Stage.INSTRUCTION, is_interruption=True),
    ProceduralEvent("declaration", "Declaración indagatoria", Stage.INSTRUCTION),
    ProceduralEvent("processing", "Procesamiento", Stage.INSTRUCTION),
    ProceduralEvent(ELEVATION_REQUEST, "Requerimiento de elevación a juicio", Stage.INSTRUCTION, is_interruption=True),
    # Etapa de Juicio
    ProceduralEvent("trial_citation", "Decreto de citación a juicio", Stage.TRIAL, is_interruption=True),
    ProceduralEvent(SENTENCE, "Sentencia", Stage.TRIAL),
    # Etapa Recursiva
    ProceduralEvent("recurse_start", "Inicio Etapa Recursiva", Stage.RECURSE),
)

# fields a user may rewrite; id and stage are fixed for the life of an event
_FROZEN_FIELDS = {"id", "stage"}


class EventStore:
    """
    Insertion‑ordered collection of procedural events.

    Example
    -------
    >>> from datetime import date
    >>> store = EventStore.default()
    >>> store = store.update("sentence", date=date(2024, 3, 1))
    >>> store.get("sentence").date
    datetime.date(2024, 3, 1)
    """

    def __init__(self, events: Iterable[ProceduralEvent] = ()) -> None:
        self._events: Dict[str, ProceduralEvent] = {}
        for ev in events:
            if ev.id in self._events:
                raise ValueError(f"duplicate event id {ev.id!r}")
            self._events[ev.id] = ev

    @classmethod
    def default(cls) -> "EventStore":
        """Starter list of instruction / trial / recurse events, all undated."""
        return cls(DEFAULT_EVENTS)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def get(self, event_id: str) -> ProceduralEvent:
        """Retrieve by id (raise EventNotFound if not present)."""
        try:
            return self._events[event_id]
        except KeyError:
            raise EventNotFound(event_id) from None

    def find(self, event_id: str) -> Optional[ProceduralEvent]:
        """Retrieve by id or return *None*."""
        return self._events.get(event_id)

    def events_in_stage(self, stage: Stage) -> List[ProceduralEvent]:
        """Events of *stage* in insertion order."""
        return [e for e in self._events.values() if e.stage == stage]

    def dated_events(self) -> List[ProceduralEvent]:
        """Dated events sorted by date; ties keep insertion order."""
        return sorted((e for e in self._events.values() if e.is_dated), key=lambda e: e.date)

    # ------------------------------------------------------------------
    # Functional update
    # ------------------------------------------------------------------
    def update(self, event_id: str, *, strict: bool = False, **fields) -> "EventStore":
        """
        Return a new store where *event_id* carries the given *fields*.

        Unknown ids are a no‑op (an equal store is returned) unless
        ``strict=True``, which raises :class:`EventNotFound`.  Rewriting
        ``id`` or ``stage`` raises ``ValueError``.
        """
        frozen = _FROZEN_FIELDS.intersection(fields)
        if frozen:
            raise ValueError(f"cannot rewrite {', '.join(sorted(frozen))} of an event")

        if event_id not in self._events:
            if strict:
                raise EventNotFound(event_id)
            logger.debug("update of unknown event %r ignored", event_id)
            return EventStore(self._events.values())

        return EventStore(
            dataclasses.replace(ev, **fields) if ev.id == event_id else ev
            for ev in self._events.values()
        )

    # ------------------------------------------------------------------
    # Dunder helpers for convenience
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[ProceduralEvent]:
        return iter(self._events.values())

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._events

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EventStore):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"EventStore({list(self._events)!r})"
