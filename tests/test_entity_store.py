from unittest.mock import MagicMock

from app.helper import member_to_wire, project_to_wire
from app.repositories.entity_store import FirestoreEntityStore, InMemoryEntityStore


def test_in_memory_store_roundtrip_and_call_counts():
    store = InMemoryEntityStore()
    doc = store.insert("users", {"name": "Ada", "email": "ada@example.com", "createdAt": 1})
    store.insert("users", {"name": "Alan", "email": "alan@example.com", "createdAt": 2})

    assert store.find_by_id("users", doc["id"])["name"] == "Ada"
    assert store.find_one("users", "email", "alan@example.com")["name"] == "Alan"
    assert store.find_one("users", "email", "nobody@example.com") is None
    assert [d["name"] for d in store.list_all("users")] == ["Alan", "Ada"]
    assert [d["name"] for d in store.find_by_ids("users", [doc["id"], "ghost"])] == ["Ada"]

    updated = store.update("users", doc["id"], {"status": "inactive"})
    assert updated["status"] == "inactive" and updated["name"] == "Ada"

    store.delete("users", doc["id"])
    assert store.find_by_id("users", doc["id"]) is None
    assert store.calls["insert"] == 2
    assert store.total_calls == 10


def test_in_memory_store_returns_copies():
    store = InMemoryEntityStore()
    doc = store.insert("projects", {"teamMembers": ["a"]})
    doc["teamMembers"].append("b")
    assert store.find_by_id("projects", doc["id"])["teamMembers"] == ["a"]


def test_firestore_store_find_by_id():
    snap = MagicMock(exists=True, id="m1")
    snap.to_dict.return_value = {"name": "Ada"}
    client = MagicMock()
    client.collection.return_value.document.return_value.get.return_value = snap

    store = FirestoreEntityStore(client)
    assert store.find_by_id("users", "m1") == {"id": "m1", "name": "Ada"}
    client.collection.assert_called_with("users")
    client.collection.return_value.document.assert_called_with("m1")


def test_firestore_store_find_by_ids_skips_missing():
    present = MagicMock(exists=True, id="a")
    present.to_dict.return_value = {"name": "A"}
    missing = MagicMock(exists=False, id="b")
    client = MagicMock()
    client.get_all.return_value = [present, missing]

    store = FirestoreEntityStore(client)
    assert store.find_by_ids("users", ["a", "b"]) == [{"id": "a", "name": "A"}]
    assert store.find_by_ids("users", []) == []


def test_member_shaper_strips_credentials():
    wire = member_to_wire(
        {
            "id": "m1",
            "name": "Ada",
            "email": "ada@example.com",
            "role": "admin",
            "passwordHash": "$2b$...",
            "password": "plain",
            "mustRotatePassword": True,
            "createdAt": "2024-01-01",
        }
    )
    assert wire == {
        "_id": "m1",
        "name": "Ada",
        "email": "ada@example.com",
        "role": "admin",
        "githubUsername": "",
        "assignedProjects": [],
        "status": "active",
        "joinedDate": "2024-01-01",
    }


def test_project_shaper_drops_unresolved_members():
    wire = project_to_wire(
        {"id": "p1", "projectName": "Atlas", "githubRepo": "r", "teamMembers": ["a", "gone"]},
        [{"id": "a", "name": "A", "email": "a@example.com", "passwordHash": "x"}],
    )
    assert wire["teamMembers"] == [
        {"_id": "a", "name": "A", "email": "a@example.com", "githubUsername": ""}
    ]
