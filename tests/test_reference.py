"""
tests/test_reference.py
=======================

Unit tests for the reference tables and the quick calculator.
"""

from datetime import date

import pytest

from prescripta.reference import CRIME_TYPES, PROCESS_STAGES, crime_type, quick_prescription


def test_tables():
    assert crime_type("homicide").prescription_years == 15
    assert [s.order for s in PROCESS_STAGES] == [1, 2, 3, 4]
    assert len({c.id for c in CRIME_TYPES}) == len(CRIME_TYPES)


def test_quick_prescription_far_from_deadline():
    result = quick_prescription(date(2020, 1, 10), "robbery", today=date(2021, 1, 10))
    assert result.deadline == date(2030, 1, 10)
    assert result.expired is False
    assert result.warning is False


def test_quick_prescription_warning_window():
    result = quick_prescription(date(2020, 1, 10), "threats", today=date(2022, 12, 1))
    assert result.deadline == date(2023, 1, 10)
    assert result.days_remaining == 40
    assert result.warning is True
    assert result.expired is False


def test_quick_prescription_expired():
    result = quick_prescription(date(2020, 1, 10), "threats", today=date(2023, 1, 11))
    assert result.days_remaining == -1
    assert result.expired is True


def test_unknown_crime_type():
    with pytest.raises(KeyError):
        quick_prescription(date(2020, 1, 10), "piracy")
