"""
tests/test_session.py
=====================

Unit tests for prescripta.session.CaseSession: forgiving input handling,
recompute after every change and persistence through the store.
"""

from datetime import date

from prescripta.models import RecurseType, Stage
from prescripta.session import CASE_KEY, CaseSession
from prescripta.store import MemoryStore

TODAY = date(2026, 3, 1)


def _session(store=None):
    return CaseSession(store=store if store is not None else MemoryStore(), clock=lambda: TODAY)


def test_fresh_session_has_no_windows():
    results = _session().results()
    assert results.report.windows == ()
    assert results.report.prescribed is None
    assert results.timeline is None
    assert results.total_duration is None


def test_enter_dates_and_recompute():
    s = _session()
    assert s.enter_crime_date("10/01/2020")
    s.set_max_penalty_years(5)
    assert s.enter_event_date("indictment", "01/06/2023")

    report = s.results().report
    assert report.windows[0].deadline == date(2025, 1, 10)
    assert report.windows[0].expired is False
    # window 2 runs until today: 01/06/2023 + 5 years is still ahead
    assert report.windows[1].end_date == TODAY
    assert report.prescribed is False


def test_invalid_text_keeps_prior_state():
    s = _session()
    s.enter_crime_date("10/01/2020")
    assert not s.enter_crime_date("10/13/2020")
    assert s.config.crime_date == date(2020, 1, 10)

    s.enter_event_date("indictment", "01/06/2023")
    assert not s.enter_event_date("indictment", "not a date")
    assert s.events.get("indictment").date == date(2023, 6, 1)


def test_event_before_crime_date_is_ignored():
    s = _session()
    s.enter_crime_date("10/01/2020")
    assert not s.enter_event_date("indictment", "09/01/2020")
    assert s.events.get("indictment").date is None


def test_unknown_event_is_ignored():
    s = _session()
    assert not s.enter_event_date("nope", "01/06/2023")
    assert not s.update_event("nope", tribunal="X")


def test_end_date_before_start_is_ignored():
    s = _session()
    s.enter_event_date("recurse_start", "01/06/2024")
    assert not s.enter_event_date("recurse_start", "01/05/2024", end=True)
    assert s.enter_event_date("recurse_start", "01/07/2024", end=True)
    assert s.events.get("recurse_start").end_date == date(2024, 7, 1)


def test_span_moved_all_or_nothing():
    s = _session()
    assert s.enter_event_dates("recurse_start", "01/01/2021", "01/02/2021")
    assert s.enter_event_dates("recurse_start", "01/03/2021", "01/04/2021")
    ev = s.events.get("recurse_start")
    assert (ev.date, ev.end_date) == (date(2021, 3, 1), date(2021, 4, 1))

    assert not s.enter_event_dates("recurse_start", "01/05/2021", "garbage")
    assert not s.enter_event_dates("recurse_start", "01/05/2021", "01/04/2021")
    ev = s.events.get("recurse_start")
    assert (ev.date, ev.end_date) == (date(2021, 3, 1), date(2021, 4, 1))


def test_penalty_years_clamped():
    s = _session()
    assert s.set_max_penalty_years(30) == 12
    assert s.set_max_penalty_years(0) == 2


def test_results_include_durations():
    s = _session()
    s.enter_crime_date("01/01/2021")
    s.enter_event_date("indictment", "01/01/2021")
    s.enter_event_date("processing", "01/04/2021")
    s.enter_event_date("sentence", "15/04/2023")

    results = s.results()
    assert str(results.stage_durations[Stage.INSTRUCTION]) == "3 meses y 0 días"
    assert results.stage_durations[Stage.TRIAL] is None
    assert str(results.total_duration) == "2 años, 3 meses y 14 días"
    assert len(results.timeline.marks) == 3


def test_every_mutation_is_persisted():
    store = MemoryStore()
    s = _session(store)
    s.enter_crime_date("10/01/2020")
    s.set_crime_type("Robo")
    s.update_event("recurse_start", recurse_type=RecurseType.APELACION, tribunal="Cámara")
    assert CASE_KEY in store

    restored = CaseSession.load(store, clock=lambda: TODAY)
    assert restored.config.crime_date == date(2020, 1, 10)
    assert restored.config.crime_type == "Robo"
    ev = restored.events.get("recurse_start")
    assert ev.recurse_type is RecurseType.APELACION
    assert ev.tribunal == "Cámara"


def test_load_from_empty_store_uses_defaults():
    s = CaseSession.load(MemoryStore())
    assert len(s.events) == 8
    assert s.config.crime_date is None


def test_load_unreadable_case_uses_defaults():
    s = CaseSession.load(MemoryStore({CASE_KEY: "{not json"}))
    assert len(s.events) == 8
    assert s.config.crime_date is None


def test_rejected_input_does_not_write():
    store = MemoryStore()
    s = _session(store)
    s.enter_crime_date("garbage")
    assert len(store) == 0
