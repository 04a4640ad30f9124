import pytest

from mylife_backend.app.services.errors import (
    ConsistencyError,
    RecordNotFoundError,
    ReferentialIntegrityError,
)
from mylife_backend.app.services.validation.integrity import (
    TagReferenceCounts,
    blocked_for_update,
    count_tag_references,
    guard_tag_delete,
    guard_tag_update,
)
from mylife_backend.app.services.validation.uniqueness import (
    require_single_target,
    unique_on_create,
    unique_on_update,
)

# --- uniqueness -----------------------------------------------------------------------
def test_create_needs_zero_matches():
    assert unique_on_create([], "dup") is None
    assert unique_on_create([{"id": "x"}], "dup") == "dup"

def test_update_allows_only_self_collision():
    assert unique_on_update([], "me", "dup", entity="note") is None
    assert unique_on_update([{"id": "me"}], "me", "dup", entity="note") is None
    assert unique_on_update([{"id": "other"}], "me", "dup", entity="note") == "dup"
    with pytest.raises(ConsistencyError):
        unique_on_update([{"id": "me"}, {"id": "other"}], "me", "dup", entity="note")

def test_update_target_must_exist_once():
    assert require_single_target([{"id": "t"}], "tag", "t") == {"id": "t"}
    with pytest.raises(RecordNotFoundError) as ei:
        require_single_target([], "tag", "x")
    assert ei.value.messages == ["A tag with ID 'x' does not exist."]
    with pytest.raises(ConsistencyError) as ei:
        require_single_target([{"id": "t"}, {"id": "t"}], "tag", "t")
    assert ei.value.status_code == 500

# --- referential integrity ---------------------------------------------------------------
@pytest.fixture
def seeded(db):
    tag = db.tags.insert({"name": "Multi", "isType": True, "isTag": True, "isWorkout": True, "isPerson": True})
    tid = tag["id"]
    for i in range(3):
        db.notes.insert({"kind": "Life", "type": tid, "tags": [], "title": f"n{i}"})
    db.notes.insert({"kind": "Life", "type": "other", "tags": [tid], "title": "tagged"})
    db.notes.insert({"kind": "Workout", "type": "other", "tags": [], "workout": tid, "title": "w"})
    db.people.insert({"firstName": "A", "tags": [tid]})
    db.people.insert({"firstName": "B", "tags": [tid, "x"]})
    return db, tid

def test_counts_every_reference_category(seeded):
    db, tid = seeded
    assert count_tag_references(db, tid) == TagReferenceCounts(noteTypes=3, noteTags=1, noteWorkouts=1, peopleTags=2)
    assert count_tag_references(db, "unused").total == 0

def test_delete_lists_all_nonzero_categories(seeded):
    db, tid = seeded
    with pytest.raises(ReferentialIntegrityError) as ei:
        guard_tag_delete(db, tid)
    assert ei.value.messages == [
        f"Cannot delete tag with ID '{tid}' without breaking referential integrity.  "
        "The tag is referenced in: 3 notes.type, 1 notes.tags, 1 notes.workout, 2 people.tags field(s)."
    ]

def test_update_blocks_only_cleared_flags_in_use():
    counts = TagReferenceCounts(noteTypes=0, peopleTags=2)
    assert blocked_for_update(counts, {"isType": False, "isPerson": True}) == []
    assert blocked_for_update(counts, {"isType": False, "isPerson": False}) == ["peopleTags"]

def test_update_guard(seeded):
    db, tid = seeded
    # setting flags is always allowed
    guard_tag_update(db, tid, {"isType": True, "isTag": True, "isWorkout": True, "isPerson": True})
    with pytest.raises(ReferentialIntegrityError) as ei:
        guard_tag_update(db, tid, {"isType": True, "isTag": True, "isWorkout": True, "isPerson": False})
    assert ei.value.messages[0].endswith("The tag is referenced in: 2 people.tags field(s).")
