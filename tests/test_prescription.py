"""
tests/test_prescription.py
==========================

Unit tests for the chained limitation‑window engine.
"""

from datetime import date

import pytest

from prescripta.models import CaseConfiguration
from prescripta.prescription import (
    WINDOW_CHAIN,
    MissingPrerequisite,
    WindowStep,
    compute_windows,
    validate_chain,
)

TODAY = date(2026, 3, 1)


def test_no_crime_date_yields_no_windows(events):
    report = compute_windows(CaseConfiguration(max_penalty_years=5), events, today=TODAY)
    assert report.windows == ()
    assert report.prescribed is None
    assert report.missing[0] == MissingPrerequisite(WINDOW_CHAIN[0].label, "crime_date")
    assert len(report.missing) == 3


def test_first_window_in_time(config, events):
    """10/01/2020 + 5 years, first call on 01/06/2023 → not expired."""
    events = events.update("indictment", date=date(2023, 6, 1))
    report = compute_windows(config, events, today=TODAY)

    first = report.windows[0]
    assert first.start_date == date(2020, 1, 10)
    assert first.deadline == date(2025, 1, 10)
    assert first.end_date == date(2023, 6, 1)
    assert first.expired is False
    # window 2 starts exactly on the first call
    assert report.windows[1].start_date == date(2023, 6, 1)


def test_first_window_open_until_today(config, events):
    """First call undated: window 1 only, closed by today → expired."""
    report = compute_windows(config, events, today=TODAY)

    assert len(report.windows) == 1
    assert report.windows[0].end_date == TODAY
    assert report.windows[0].expired is True
    assert report.prescribed is True
    assert report.evaluated_on == TODAY
    assert [m.required for m in report.missing] == ["indictment", "instruction_end"]


def test_today_is_not_cached(config, events):
    early = compute_windows(config, events, today=date(2024, 1, 1))
    late = compute_windows(config, events, today=TODAY)
    assert early.windows[0].expired is False
    assert late.windows[0].expired is True


def test_today_defaults_to_current_date(config, events):
    report = compute_windows(config, events)
    assert report.evaluated_on == date.today()
    assert report.windows[0].end_date == date.today()


def test_deadline_on_the_day_is_not_expired(config, events):
    events = events.update("indictment", date=date(2025, 1, 10))
    assert compute_windows(config, events, today=TODAY).windows[0].expired is False
    events = events.update("indictment", date=date(2025, 1, 11))
    assert compute_windows(config, events, today=TODAY).windows[0].expired is True


def test_full_chain_restarts_clock_each_window(config, events):
    events = (
        events.update("indictment", date=date(2023, 6, 1))
        .update("instruction_end", date=date(2027, 6, 1))
        .update("sentence", date=date(2030, 1, 1))
    )
    report = compute_windows(config, events, today=date(2031, 1, 1))

    assert [w.start_date for w in report.windows] == [
        date(2020, 1, 10), date(2023, 6, 1), date(2027, 6, 1)
    ]
    assert [w.deadline for w in report.windows] == [
        date(2025, 1, 10), date(2028, 6, 1), date(2032, 6, 1)
    ]
    assert [w.expired for w in report.windows] == [False, False, False]
    assert report.prescribed is False
    assert report.missing == ()


def test_earlier_expiry_is_not_cured(config, events):
    events = (
        events.update("indictment", date=date(2025, 6, 1))       # late
        .update("instruction_end", date=date(2026, 1, 1))        # in time
        .update("sentence", date=date(2026, 2, 1))               # in time
    )
    report = compute_windows(config, events, today=TODAY)
    assert [w.expired for w in report.windows] == [True, False, False]
    assert report.prescribed is True
    assert report.expired_windows == [report.windows[0]]


def test_gap_in_chain_stops_later_windows(config, events):
    """A dated sentence without elevation request never produces window 3."""
    events = events.update("indictment", date=date(2023, 6, 1)).update("sentence", date=date(2024, 1, 1))
    report = compute_windows(config, events, today=TODAY)
    assert len(report.windows) == 2
    assert report.windows[1].end_date == TODAY
    assert report.missing[0].required == "instruction_end"


def test_windows_ordered_by_start(config, events):
    events = events.update("indictment", date=date(2021, 1, 1)).update("instruction_end", date=date(2022, 1, 1))
    starts = [w.start_date for w in compute_windows(config, events, today=TODAY).windows]
    assert starts == sorted(starts)


def test_penalty_years_change_deadline(events):
    cfg = CaseConfiguration(crime_date=date(2020, 2, 29), max_penalty_years=3)
    report = compute_windows(cfg, events, today=date(2021, 1, 1))
    assert report.windows[0].deadline == date(2023, 2, 28)


def test_broken_chain_is_rejected():
    with pytest.raises(ValueError):
        validate_chain([
            WindowStep("a", "indictment"),
            WindowStep("b", "sentence", opened_by="instruction_end"),
        ])


def test_default_chain_is_valid():
    validate_chain(WINDOW_CHAIN)
    assert [s.terminating_event for s in WINDOW_CHAIN] == ["indictment", "instruction_end", "sentence"]
