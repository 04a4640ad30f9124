import threading

import pytest

from mylife_backend.app.services.validation.references import (
    ReferenceCheck,
    missing_items,
    names_valid,
    resolve_ids,
    run_lookups,
)

HIKING = {"id": "a1", "name": "Hiking"}
BIKING = {"id": "b2", "name": "Biking"}

def test_cardinality_rule():
    assert names_valid([HIKING], ["Hiking"])
    assert not names_valid([HIKING], ["Hiking", "Nope"])
    assert names_valid([], [])
    assert not names_valid(None, ["Hiking"])
    assert names_valid(None, None, optional=True)
    assert not names_valid(None, None)

def test_missing_items_reports_unknown_and_repeated_references():
    assert missing_items([HIKING], ["Hiking", "Nope"]) == ["Nope"]
    # a name and its own id point at one record
    assert missing_items([HIKING], ["Hiking", "a1"]) == ["a1"]
    assert missing_items([HIKING, BIKING], ["b2", "Hiking"]) == []

def test_resolve_ids_keeps_client_order():
    assert resolve_ids([HIKING, BIKING], ["Biking", "a1"]) == ["b2", "a1"]

def test_reference_check_message():
    check = ReferenceCheck("tag(s)", ["Hiking", "Nope", "Also"], [HIKING])
    assert not check.valid
    assert check.message() == "Invalid tag(s): 'Nope', 'Also'."
    ok = ReferenceCheck("type", ["Hiking"], [HIKING])
    assert ok.message() is None
    assert ok.ids() == ["a1"]

def test_people_checks_use_lookup_name_key():
    person = {"id": "p1", "lookupName": "Ada K. Lovelace"}
    check = ReferenceCheck("people", ["Ada K. Lovelace"], [person], key="lookupName")
    assert check.valid and check.ids() == ["p1"]

def test_run_lookups_fans_out_and_joins():
    barrier = threading.Barrier(3, timeout=5)

    def wait_then(value):
        def _fn():
            barrier.wait()       # only passes if all three run at once
            return value
        return _fn

    out = run_lookups({"a": wait_then(1), "b": wait_then(2), "c": wait_then(3)})
    assert out == {"a": 1, "b": 2, "c": 3}

def test_run_lookups_propagates_errors():
    def boom():
        raise RuntimeError("store down")

    with pytest.raises(RuntimeError, match="store down"):
        run_lookups({"ok": lambda: 1, "bad": boom})
    assert run_lookups({}) == {}

def test_shared_lookup_name_cannot_hide_a_missing_person():
    # two people share one derived name; the second identifier is unknown
    john_a = {"id": "p1", "lookupName": "John Smith Jones"}
    john_b = {"id": "p2", "lookupName": "John Smith Jones"}
    check = ReferenceCheck("people", ["John Smith Jones", "Nobody Here"], [john_a, john_b], key="lookupName", optional=True)
    assert names_valid(check.master, check.client)
    assert not check.valid
    assert check.message() == "Invalid people: 'Nobody Here'."

    alone = ReferenceCheck("people", ["John Smith Jones"], [john_a, john_b], key="lookupName", optional=True)
    assert alone.message() == "Invalid people: 'John Smith Jones'."
