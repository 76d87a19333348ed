"""
Prescripta
==========

A lightweight toolkit for tracking the procedural timeline of a criminal
case and computing its limitation ("prescripción") deadlines.

Import structure
----------------
`import prescripta` is intentionally cheap: no sub‑module is imported by
default.  Heavy dependencies such as *matplotlib* and *sqlmodel* are only
imported when you explicitly access :pymod:`prescripta.viz` or
:pymod:`prescripta.db` (a :class:`~prescripta.store.SQLiteStore` pulls in the
latter when it is built).

Sub‑modules
~~~~~~~~~~~
- :pymod:`prescripta.models`       – ``ProceduralEvent`` / ``CaseConfiguration`` dataclasses + :class:`~prescripta.models.Stage` enum
- :pymod:`prescripta.dates`        – ``DD/MM/YYYY`` parsing and year arithmetic
- :pymod:`prescripta.events`       – ``EventStore`` ordered event registry
- :pymod:`prescripta.prescription` – the chained limitation‑window engine
- :pymod:`prescripta.durations`    – stage and total duration calculator
- :pymod:`prescripta.timeline`     – linear axis projection (pan / zoom)
- :pymod:`prescripta.recompute`    – pure ``recompute(state)`` pass
- :pymod:`prescripta.session`      – single‑user case session
- :pymod:`prescripta.store`        – key‑value persistence
- :pymod:`prescripta.viz`          – plotting helpers

Quick start
-----------
>>> from datetime import date
>>> from prescripta.models import CaseConfiguration
>>> from prescripta.events import EventStore
>>> from prescripta.prescription import compute_windows
>>> cfg = CaseConfiguration(crime_date=date(2020, 1, 10), max_penalty_years=5)
>>> events = EventStore.default().update("indictment", date=date(2023, 6, 1))
>>> report = compute_windows(cfg, events, today=date(2024, 1, 1))
>>> report.prescribed
False
"""

__all__ = [
    "models",
    "dates",
    "events",
    "prescription",
    "durations",
    "timeline",
    "recompute",
    "session",
    "store",
    "viz",
]

__version__ = "0.1.0"
