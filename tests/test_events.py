"""
tests/test_events.py
====================

Unit tests for prescripta.events.EventStore
"""

from datetime import date

import pytest

from prescripta.errors import EventNotFound
from prescripta.events import DEFAULT_EVENTS, EventStore
from prescripta.models import ProceduralEvent, RecurseType, Stage


def test_default_events_are_undated_and_ordered():
    store = EventStore.default()
    assert len(store) == len(DEFAULT_EVENTS) == 8
    assert [e.id for e in store][:2] == ["instruction_start", "indictment"]
    assert all(e.date is None for e in store)


def test_get_and_find():
    store = EventStore.default()
    assert store.get("sentence").name == "Sentencia"
    assert store.find("nope") is None
    with pytest.raises(EventNotFound):
        store.get("nope")


def test_event_not_found_is_a_key_error():
    with pytest.raises(KeyError):
        EventStore.default().get("nope")


def test_duplicate_ids_rejected():
    ev = ProceduralEvent("a", "A", Stage.TRIAL)
    with pytest.raises(ValueError):
        EventStore([ev, ev])


def test_update_is_functional():
    original = EventStore.default()
    updated = original.update("sentence", date=date(2024, 3, 1))
    assert updated.get("sentence").date == date(2024, 3, 1)
    assert original.get("sentence").date is None
    assert [e.id for e in updated] == [e.id for e in original]
    # other events untouched
    assert updated.get("indictment") == original.get("indictment")


def test_update_preserves_unmatched_fields():
    store = EventStore.default().update(
        "recurse_start", recurse_type=RecurseType.CASACION, tribunal="Cámara Federal"
    )
    store = store.update("recurse_start", date=date(2024, 5, 1))
    ev = store.get("recurse_start")
    assert ev.tribunal == "Cámara Federal"
    assert ev.recurse_type is RecurseType.CASACION
    assert ev.stage is Stage.RECURSE


def test_update_unknown_event_is_noop():
    store = EventStore.default()
    assert store.update("nope", date=date(2024, 1, 1)) == store


def test_update_unknown_event_strict_raises():
    with pytest.raises(EventNotFound):
        EventStore.default().update("nope", strict=True, date=date(2024, 1, 1))


def test_update_cannot_rewrite_identity():
    with pytest.raises(ValueError):
        EventStore.default().update("sentence", stage=Stage.RECURSE)


def test_update_unknown_field_raises_type_error():
    with pytest.raises(TypeError):
        EventStore.default().update("sentence", colour="red")


def test_events_in_stage_keeps_insertion_order():
    trial = EventStore.default().events_in_stage(Stage.TRIAL)
    assert [e.id for e in trial] == ["trial_citation", "sentence"]


def test_dated_events_sorted_by_date():
    store = (
        EventStore.default()
        .update("sentence", date=date(2024, 3, 1))
        .update("indictment", date=date(2021, 5, 2))
    )
    assert [e.id for e in store.dated_events()] == ["indictment", "sentence"]
