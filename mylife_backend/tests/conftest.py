from __future__ import annotations
import pytest
from fastapi.testclient import TestClient

from mylife_backend.app.main import app
from mylife_backend.app.models.notes import NoteKind
from mylife_backend.app.services.data_stores import get_database, open_database

# --- Isolated store per test --------------------------------------------------
@pytest.fixture
def db(tmp_path):
    return open_database(tmp_path / "data", serialize=False)

@pytest.fixture
def client(db):
    app.dependency_overrides[get_database] = lambda: db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

# --- Seeding helpers ------------------------------------------------------------
@pytest.fixture
def make_tag(client):
    """
    make_tag("Hiking", isTag=True) -> stored tag record.
    Flags not given default to False.
    """
    def _make(name, *, description="", **flags):
        body = {
            "name": name,
            "description": description,
            "isType": flags.get("isType", False),
            "isTag": flags.get("isTag", False),
            "isWorkout": flags.get("isWorkout", False),
            "isPerson": flags.get("isPerson", False),
        }
        r = client.post("/api/tag", json=body)
        assert r.status_code == 201, r.json()
        return r.json()["data"]
    return _make

@pytest.fixture
def type_tags(make_tag):
    """One isType tag per note kind, keyed by kind name."""
    return {k.value: make_tag(k.value, isType=True) for k in NoteKind}

@pytest.fixture
def friend_tag(make_tag):
    return make_tag("Friend", isPerson=True)

@pytest.fixture
def make_person(client, friend_tag):
    def _make(first, last="", middle="", **extra):
        body = {"firstName": first, "middleName": middle, "lastName": last, "tags": ["Friend"], **extra}
        r = client.post("/api/people", json=body)
        assert r.status_code == 201, r.json()
        return r.json()["data"]
    return _make

@pytest.fixture
def note_body():
    """note_body("Book", authors=["A"], status="Completed") -> request dict."""
    def _body(note_type, **fields):
        body = {
            "type": note_type,
            "tags": [],
            "date": "2021-04-01",
            "title": "T",
            "description": "d",
            "people": [],
            "place": "",
        }
        body.update(fields)
        return body
    return _body

@pytest.fixture
def book_body(note_body):
    def _body(**fields):
        return note_body("Book", **{"authors": ["A"], "status": "Completed", **fields})
    return _body
