from __future__ import annotations

from spicerack.organizer import SpiceOrganizer
from tests.integration.utils import auth_headers


def _payload(*names: str, shelves: int = 3) -> dict:
    organizer = SpiceOrganizer(num_shelves=shelves)
    for name in names:
        organizer.add_spice(name)
    return organizer.snapshot().model_dump(mode="json")


def test_load_unknown_user_returns_null_data(client):
    response = client.get("/inventory/nobody")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "data": None,
        "message": "No inventory found for this user",
    }


def test_save_then_load_snapshot(client):
    data = _payload("basil", "cumin", shelves=2)

    saved = client.post("/inventory/save", json={"user_id": "alice", "data": data}, headers=auth_headers())

    assert saved.status_code == 200
    assert saved.json()["success"] is True
    assert saved.json()["timestamp"]

    loaded = client.get("/inventory/alice").json()
    assert loaded["success"] is True
    assert [entry["name"] for entry in loaded["data"]["entries"]] == ["Basil", "Cumin"]
    assert loaded["data"]["shelf_count"] == 2


def test_save_accepts_legacy_keys_and_ignores_derived_counts(client):
    data = {
        "inventory": [
            {"id": "j1", "name": "Cinnamon", "category": "C", "addedAt": "2024-01-01T00:00:00Z"},
        ],
        "letterCounts": {"C": 40},
        "totalJars": 40,
        "numShelves": 2,
    }

    response = client.post("/inventory/save", json={"user_id": "legacy", "data": data}, headers=auth_headers())
    assert response.status_code == 200

    shelves = client.get("/inventory/legacy/shelves").json()
    assert sum(shelf["count"] for shelf in shelves) == 1
    assert len(shelves) == 2


def test_save_rejects_malformed_entries(client):
    data = {"entries": [{"id": "x", "name": "", "category": "C", "added_at": "2024-01-01T00:00:00Z"}]}

    response = client.post("/inventory/save", json={"user_id": "alice", "data": data}, headers=auth_headers())

    assert response.status_code == 422


def test_shelves_for_saved_inventory(client):
    data = _payload("basil", "bay leaves", "cinnamon", "cumin", "cardamom", "paprika")
    client.post("/inventory/save", json={"user_id": "alice", "data": data}, headers=auth_headers())

    response = client.get("/inventory/alice/shelves")

    assert response.status_code == 200
    assert response.json() == [
        {"range": "A-B", "count": 2},
        {"range": "C", "count": 3},
        {"range": "D-Z", "count": 1},
    ]


def test_shelves_query_overrides_saved_configuration(client):
    data = _payload("cinnamon", "cinnamon", "paprika")
    client.post("/inventory/save", json={"user_id": "alice", "data": data}, headers=auth_headers())

    single = client.get("/inventory/alice/shelves", params={"shelves": 0}).json()
    assert single == [{"range": "A-Z", "count": 3}]

    distinct = client.get("/inventory/alice/shelves", params={"ignore_duplicates": "true"}).json()
    assert sum(shelf["count"] for shelf in distinct) == 2


def test_shelves_for_unknown_user_are_empty(client):
    response = client.get("/inventory/nobody/shelves")

    assert response.json() == [
        {"range": "A-I", "count": 0},
        {"range": "J-R", "count": 0},
        {"range": "S-Z", "count": 0},
    ]


def test_delete_snapshot(client):
    client.post("/inventory/save", json={"user_id": "alice", "data": _payload("sage")}, headers=auth_headers())

    assert client.delete("/inventory/alice", headers=auth_headers()).status_code == 204
    assert client.get("/inventory/alice").json()["data"] is None
    assert client.delete("/inventory/alice", headers=auth_headers()).status_code == 404


def test_save_rejects_entry_without_a_shelf_letter(client):
    data = {
        "entries": [
            {"id": "a", "name": "123", "category": "1", "added_at": "2024-01-01T00:00:00Z"},
            {"id": "b", "name": "Basil", "category": "B", "added_at": "2024-01-01T00:00:00Z"},
        ]
    }

    response = client.post("/inventory/save", json={"user_id": "u1", "data": data}, headers=auth_headers())

    assert response.status_code == 422
    assert client.get("/inventory/u1").json()["data"] is None


def test_save_rejects_duplicate_entry_ids(client):
    entry = {"id": "j1", "name": "Cumin", "category": "C", "added_at": "2024-01-01T00:00:00Z"}

    response = client.post(
        "/inventory/save",
        json={"user_id": "u1", "data": {"entries": [entry, entry]}},
        headers=auth_headers(),
    )

    assert response.status_code == 422
    assert client.get("/inventory/u1").json()["data"] is None


def test_saved_totals_match_shelf_counts(client):
    data = {
        "entries": [
            {"id": "a", "name": "Épazote", "category": "?", "added_at": "2024-01-01T00:00:00Z"},
            {"id": "b", "name": "Basil", "category": "b", "added_at": "2024-01-01T00:00:00Z"},
        ]
    }
    client.post("/inventory/save", json={"user_id": "u1", "data": data}, headers=auth_headers())

    entries = client.get("/inventory/u1").json()["data"]["entries"]
    shelves = client.get("/inventory/u1/shelves").json()

    assert [entry["category"] for entry in entries] == ["E", "B"]
    assert sum(shelf["count"] for shelf in shelves) == len(entries)
