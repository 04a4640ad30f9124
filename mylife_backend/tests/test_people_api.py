from fastapi.testclient import TestClient

from mylife_backend.app.utils.clock import today_iso

def test_create_stores_tag_ids_and_read_populates(client: TestClient, friend_tag):
    r = client.post("/api/people", json={
        "firstName": " Ada ",
        "middleName": "K",
        "lastName": "Lovelace",
        "preferredName": "Countess",
        "birthdate": "1815-12-10",
        "tags": ["Friend"],
        "notes": [{"note": "Met at the analytical engine demo"}],
        "photos": [{"image": "data:image/png;base64,AAA"}],
    })
    assert r.status_code == 201
    created = r.json()["data"]
    assert created["firstName"] == "Ada"
    assert created["tags"] == [friend_tag["id"]]
    assert created["notes"][0]["date"] == today_iso()

    got = client.get(f"/api/people/{created['id']}").json()["data"]
    assert got["tags"] == [friend_tag]
    assert got["name"] == "Ada (Countess) K. Lovelace"
    assert got["birthdate"] == "1815-12-10"

def test_person_tags_must_be_person_tags(client: TestClient, friend_tag, make_tag):
    make_tag("Hiking", isTag=True)
    r = client.post("/api/people", json={"firstName": "Al", "tags": ["Friend", "Hiking", "Nobody"]})
    assert r.status_code == 422
    assert r.json()["messages"] == ["Invalid tag(s): 'Hiking', 'Nobody'."]
    assert r.json()["data"]["firstName"] == "Al"

def test_person_needs_a_tag(client: TestClient):
    r = client.post("/api/people", json={"firstName": "Al", "tags": []})
    assert r.status_code == 422
    assert r.json()["messages"][0]["msg"] == "The tag must contain at least one value."

def test_duplicate_natural_key(client: TestClient, make_person):
    make_person("Ada", "Lovelace")
    r = client.post("/api/people", json={"firstName": "Ada", "lastName": "Lovelace", "tags": ["Friend"]})
    assert r.status_code == 422
    assert r.json()["messages"] == [
        "A person with following first, middle and last names already exist: 'Ada', '', 'Lovelace'."
    ]
    # a different middle name is a different person
    r = client.post("/api/people", json={"firstName": "Ada", "middleName": "K", "lastName": "Lovelace", "tags": ["Friend"]})
    assert r.status_code == 201

def test_update_rules(client: TestClient, make_person):
    ada = make_person("Ada", "Lovelace")
    alan = make_person("Alan", "Turing")

    r = client.put(f"/api/people/{alan['id']}", json={"firstName": "Ada", "lastName": "Lovelace", "tags": ["Friend"]})
    assert r.status_code == 422
    assert r.json()["messages"] == ["A person called 'Ada Lovelace' already exists."]

    r = client.put(f"/api/people/{ada['id']}", json={"firstName": "Ada", "lastName": "Lovelace", "preferredName": "A", "tags": ["Friend"]})
    assert r.status_code == 200
    assert r.json()["data"]["id"] == ada["id"]
    assert r.json()["data"]["createdAt"] == ada["createdAt"]

    r = client.put("/api/people/missing", json={"firstName": "X", "tags": ["Friend"]})
    assert r.status_code == 404
    assert r.json()["messages"] == ["A person with ID 'missing' does not exist."]

def test_list_sorted_count_and_delete(client: TestClient, make_person):
    make_person("bob", "Smith")
    make_person("Alice", "Zed")
    alice2 = make_person("Alice", "Adams")
    names = [(p["firstName"], p["lastName"]) for p in client.get("/api/people").json()["data"]]
    assert names == [("Alice", "Adams"), ("Alice", "Zed"), ("bob", "Smith")]
    assert client.get("/api/people/count").json()["data"] == 3

    r = client.delete(f"/api/people/{alice2['id']}")
    assert r.status_code == 200
    assert r.json()["data"]["id"] == alice2["id"]
    assert client.delete(f"/api/people/{alice2['id']}").status_code == 404
    assert client.get(f"/api/people/{alice2['id']}").json()["messages"] == [
        f"Could not find a person with ID '{alice2['id']}'."
    ]
