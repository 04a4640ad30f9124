import json

import pytest

from mylife_backend.app.services.data_stores import ASCENDING, DESCENDING, DocumentStore
from mylife_backend.app.services.data_stores.document_store import matches
from mylife_backend.app.services.data_stores.people import find_people_by_identifiers
from mylife_backend.app.services.data_stores.tags import find_tags_by_identifiers
from mylife_backend.app.services.errors import StoreError

@pytest.fixture
def store(tmp_path):
    return DocumentStore("things", tmp_path / "things.json")

def test_insert_assigns_id_and_persists(store):
    rec = store.insert({"name": "a"})
    assert len(rec["id"]) == 32
    # a second store on the same file sees the write
    other = DocumentStore("things", store.path)
    assert other.find_one_by_id(rec["id"]) == rec
    assert json.loads(store.path.read_text(encoding="utf-8"))[rec["id"]]["name"] == "a"

def test_filters_exact_list_membership_in_and_or():
    rec = {"id": "1", "name": "x", "tags": ["t1", "t2"]}
    assert matches(rec, {"name": "x"})
    assert matches(rec, {"tags": "t2"})
    assert not matches(rec, {"tags": "t3"})
    assert matches(rec, {"name": {"$in": ["y", "x"]}})
    assert matches(rec, {"tags": {"$in": ["t9", "t1"]}})
    assert matches(rec, {"$or": [{"name": "nope"}, {"id": "1"}]})
    assert not matches(rec, {"$or": [{"name": "nope"}, {"id": "2"}]})

def test_find_sorts_case_insensitively(store):
    for n in ("beta", "Alpha", "gamma"):
        store.insert({"name": n})
    asc = [r["name"] for r in store.find(sort=[("name", ASCENDING)])]
    desc = [r["name"] for r in store.find(sort=[("name", DESCENDING)])]
    assert asc == ["Alpha", "beta", "gamma"]
    assert desc == ["gamma", "beta", "Alpha"]

def test_update_delete_and_counts(store):
    rec = store.insert({"name": "a", "n": 1})
    assert store.update_and_save({**rec, "n": 2})["n"] == 2
    assert store.update_and_save({"id": "missing", "n": 3}) is None
    assert store.count({"n": 2}) == 1
    assert store.estimated_count() == 1
    assert store.delete_by_id(rec["id"])["id"] == rec["id"]
    assert store.delete_by_id(rec["id"]) is None
    assert store.estimated_count() == 0

def test_returned_records_are_copies(store):
    rec = store.insert({"name": "a", "tags": ["x"]})
    got = store.find_one_by_id(rec["id"])
    got["tags"].append("y")
    assert store.find_one_by_id(rec["id"])["tags"] == ["x"]

def test_corrupt_file_raises_store_error(store):
    store.path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StoreError) as ei:
        store.find()
    assert ei.value.status_code == 500

def test_tag_lookup_by_name_or_id_respects_flag(tmp_path):
    tags = DocumentStore("tags", tmp_path / "tags.json")
    hiking = tags.insert({"name": "Hiking", "isTag": True})
    tags.insert({"name": "Book", "isTag": False})
    found = find_tags_by_identifiers(tags, ["Hiking", "Book", hiking["id"]], "isTag")
    assert [r["id"] for r in found] == [hiking["id"]]
    assert find_tags_by_identifiers(tags, None, "isTag") is None

def test_people_lookup_uses_derived_name(tmp_path):
    people = DocumentStore("people", tmp_path / "people.json")
    people.insert({"firstName": "Ada", "middleName": "K", "lastName": "Lovelace"})
    people.insert({"firstName": "Alan", "middleName": "", "lastName": "Turing"})
    found = find_people_by_identifiers(people, ["Ada K. Lovelace", "Alan Turing", "Ada Lovelace"])
    assert sorted(r["lookupName"] for r in found) == ["Ada K. Lovelace", "Alan Turing"]

def test_writes_under_rules_dir_are_refused(tmp_path, monkeypatch):
    monkeypatch.setenv("MYLIFE_RULES_DIR", str(tmp_path / "rules"))
    store = DocumentStore("rules", tmp_path / "rules" / "tags.json")
    with pytest.raises(StoreError):
        store.insert({"name": "x"})
