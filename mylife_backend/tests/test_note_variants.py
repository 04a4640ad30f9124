from mylife_backend.app.models.notes import NoteKind
from mylife_backend.app.services.note_variants import VARIANTS, ResolvedRefs, build_note, variant_for
from mylife_backend.app.services.validation.field_validator import validate_note_fields

def _validated(note_type, **fields):
    body = {"type": note_type, "tags": ["x"], "date": "2021-04-01", "title": "T", "people": [], "place": "Home"}
    body.update(fields)
    return validate_note_fields(body)

REFS = ResolvedRefs(type_id="type-id", tag_ids=["tag-id"], people_ids=["p-id"])

def test_registry_covers_every_kind():
    assert set(VARIANTS) == set(NoteKind)
    assert variant_for("Bike Ride").kind is NoteKind.BIKE_RIDE
    assert variant_for("bike ride") is None

def test_envelope_uses_resolved_ids():
    variant, payload = _validated("Health")
    note = build_note(variant, payload, REFS)
    assert note["kind"] == "Health"
    assert (note["type"], note["tags"], note["people"]) == ("type-id", ["tag-id"], ["p-id"])
    assert note["date"] == "2021-04-01"
    assert note["createdAt"] == note["updatedAt"]
    assert len(note["id"]) == 32

def test_book_fields_copied():
    variant, payload = _validated("Book", authors=["A", "B"], format="eBook", status="Abandoned", rating=7)
    note = build_note(variant, payload, REFS)
    assert (note["authors"], note["format"], note["status"], note["rating"]) == (["A", "B"], "eBook", "Abandoned", 7)

def test_bike_ride_metrics_stored_without_empty_fields():
    variant, payload = _validated("Bike Ride", bike="MEC National 2018", metrics=[{"movingTime": "60", "route": {"pts": [1, 2]}}])
    note = build_note(variant, payload, REFS)
    assert note["metrics"] == [{"movingTime": 60, "route": {"pts": [1, 2]}}]

def test_workout_stores_workout_tag_id():
    variant, payload = _validated("Workout", workout="Weights", metrics=[{"property": "Reps", "value": 10}])
    refs = ResolvedRefs(type_id="t", workout_id="w-id")
    note = build_note(variant, payload, refs)
    assert note["workout"] == "w-id"
    assert note["metrics"] == [{"property": "Reps", "value": 10}]

def test_update_keeps_identity_and_may_change_kind():
    variant, payload = _validated("Life")
    first = build_note(variant, payload, REFS)
    variant2, payload2 = _validated("Hike", metrics=[{"dataSource": "watch"}])
    second = build_note(variant2, payload2, REFS, existing=first)
    assert second["id"] == first["id"]
    assert second["createdAt"] == first["createdAt"]
    assert second["updatedAt"] >= first["updatedAt"]
    assert second["kind"] == "Hike"
