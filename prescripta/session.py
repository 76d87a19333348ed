"""
prescripta.session
==================

Single‑user editing session over one case.

The session owns the current :class:`~prescripta.models.CaseConfiguration`
and :class:`~prescripta.events.EventStore`, applies user input to them and
persists the new state after every mutation.  Derived results are never
stored: call :pymeth:`CaseSession.results` after a change to recompute
them from scratch.

Text input is forgiving: unparseable dates, unknown events and event
dates earlier than the crime date are ignored and the prior state is kept.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

from .dates import parse_date
from .errors import InvalidDate
from .events import EventStore
from .models import CaseConfiguration
from .recompute import CaseState, DerivedResults, recompute
from .settings import settings
from .store import KeyValueStore, MemoryStore, dump_case, load_case

logger = logging.getLogger(__name__)

CASE_KEY = "case"


class CaseSession:
    """
    Mutable holder for one case.

    Example
    -------
    >>> s = CaseSession()
    >>> s.enter_crime_date("10/01/2020")
    True
    >>> s.enter_event_date("indictment", "31/02/2023")   # impossible date, ignored
    False
    """

    def __init__(
        self,
        config: Optional[CaseConfiguration] = None,
        events: Optional[EventStore] = None,
        store: Optional[KeyValueStore] = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._config = config or CaseConfiguration(max_penalty_years=settings.default_penalty_years)
        self._events = events if events is not None else EventStore.default()
        self._store: KeyValueStore = store if store is not None else MemoryStore()
        self._clock = clock

    @classmethod
    def load(cls, store: KeyValueStore, clock: Callable[[], date] = date.today) -> "CaseSession":
        """Restore the case saved in *store*, or start a default one."""
        blob = store.load(CASE_KEY)
        if blob is None:
            logger.info("no saved case, starting with defaults")
            return cls(store=store, clock=clock)
        try:
            config, events = load_case(blob)
        except ValueError as exc:
            # pydantic ValidationError, or an invalid event set (duplicate ids, reversed span)
            logger.warning("saved case is unreadable, starting with defaults: %s", exc)
            return cls(store=store, clock=clock)
        return cls(config, events, store=store, clock=clock)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def config(self) -> CaseConfiguration:
        return self._config

    @property
    def events(self) -> EventStore:
        return self._events

    @property
    def state(self) -> CaseState:
        return CaseState(self._config, self._events)

    def results(self, today: Optional[date] = None, scale: float = 1.0) -> DerivedResults:
        return recompute(self.state, today=today or self._clock(), scale=scale)

    def _persist(self) -> None:
        self._store.save(CASE_KEY, dump_case(self._config, self._events))

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def set_crime_date(self, value: Optional[date]) -> None:
        self._config.crime_date = value
        self._persist()

    def enter_crime_date(self, text: str) -> bool:
        try:
            value = parse_date(text)
        except InvalidDate as exc:
            logger.debug("crime date ignored: %s", exc)
            return False
        self.set_crime_date(value)
        return True

    def set_max_penalty_years(self, years: int) -> int:
        """Store *years* (clamped to [2, 12]) and return the effective value."""
        self._config.max_penalty_years = years
        self._persist()
        return self._config.max_penalty_years

    def set_crime_type(self, crime_type: str) -> None:
        self._config.crime_type = crime_type
        self._persist()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def update_event(self, event_id: str, **fields) -> bool:
        """Rewrite fields of *event_id*; returns False when the id is unknown."""
        if event_id not in self._events:
            logger.debug("update of unknown event %r ignored", event_id)
            return False
        self._events = self._events.update(event_id, **fields)
        self._persist()
        return True

    def enter_event_date(self, event_id: str, text: str, end: bool = False) -> bool:
        """
        Set the date (or, with ``end=True``, the end date) of *event_id*
        from ``DD/MM/YYYY`` text.  Returns whether the state changed.
        """
        if end:
            return self.enter_event_dates(event_id, end_text=text)
        return self.enter_event_dates(event_id, date_text=text)

    def enter_event_dates(
        self,
        event_id: str,
        date_text: Optional[str] = None,
        end_text: Optional[str] = None,
    ) -> bool:
        """
        Set start and end date of *event_id* together, all or nothing.

        Both texts are checked against the crime date and against each
        other before a single update, so moving a span event never goes
        through a half‑written range.
        """
        crime_date = self._config.crime_date
        fields = {}
        for name, text in (("date", date_text), ("end_date", end_text)):
            if text is None:
                continue
            try:
                value = parse_date(text)
            except InvalidDate as exc:
                logger.debug("%s for %r ignored: %s", name, event_id, exc)
                return False
            if crime_date is not None and value < crime_date:
                logger.debug("%s %s for %r precedes the crime date, ignored", name, value, event_id)
                return False
            fields[name] = value

        if not fields:
            return False
        try:
            return self.update_event(event_id, **fields)
        except ValueError as exc:
            # end date before start date
            logger.debug("dates for %r rejected: %s", event_id, exc)
            return False
