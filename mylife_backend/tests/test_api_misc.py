import logging

from fastapi.testclient import TestClient

from mylife_backend.app.utils.logging_setup import setup_logging
from mylife_backend.app.utils.strings import person_display_name, person_lookup_name

def test_index_and_health(client: TestClient):
    r = client.get("/api")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "messages": ["This is the /api/ route!"], "data": None}
    assert client.get("/health").json() == {"ok": True}

def test_summary_counts_each_collection(client: TestClient, type_tags, make_person, note_body):
    make_person("Ada", "Lovelace")
    client.post("/api/notes", json=note_body("Life"))
    r = client.get("/api/summary")
    assert r.status_code == 200
    # six type tags plus the person tag
    assert r.json()["data"] == {"notes": 1, "people": 1, "tags": 7}

def test_counts_start_at_zero(client: TestClient):
    for path in ("/api/notes/count", "/api/people/count", "/api/tags/count"):
        assert client.get(path).json() == {"status": "ok", "messages": [], "data": 0}

def test_person_names():
    assert person_lookup_name("Ada", "", "Lovelace") == "Ada Lovelace"
    assert person_lookup_name("Ada", "K", "Lovelace") == "Ada K. Lovelace"
    assert person_lookup_name("Ada", "King", "Lovelace") == "Ada King Lovelace"
    assert person_display_name("Ada", "", "", "") == "Ada"

def test_setup_logging_is_idempotent():
    logger = setup_logging("DEBUG")
    n = len(logger.handlers)
    setup_logging("INFO")
    assert len(logger.handlers) == n
    assert logger.level == logging.INFO

def test_singular_tag_alias_is_left_out_of_openapi(client: TestClient):
    assert client.get("/api/tag/count").status_code == 200
    paths = client.get("/openapi.json").json()["paths"]
    assert "/api/tags/count" in paths
    assert not [p for p in paths if p.startswith("/api/tag/") or p == "/api/tag"]
