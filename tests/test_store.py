from datetime import date, datetime, timezone

import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

import portfolio_store
from api.content import to_storable
from errors import ConflictError, StoreFailure
from portfolio_store import (
    USER_PROFILES,
    get_document,
    insert_document,
    save_profile,
    serialize_document,
    update_document,
)


def test_serialize_document_exposes_string_id_and_iso_dates():
    oid = ObjectId()
    created = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)

    payload = serialize_document({"_id": oid, "profileKey": "portfolio_profile", "createdAt": created, "name": "x"})

    assert payload == {"id": str(oid), "createdAt": "2024-05-01T12:30:00+00:00", "name": "x"}
    assert serialize_document(None) is None


def test_to_storable_converts_dates_and_drops_empty_values():
    stored = to_storable({"startDate": date(2020, 2, 29), "endDate": None, "title": "x"})

    assert stored == {"startDate": datetime(2020, 2, 29, tzinfo=timezone.utc), "title": "x"}


def test_insert_sets_timestamps():
    record = insert_document("skills", {"name": "Go"})

    assert record["createdAt"] == record["updatedAt"]
    assert get_document("skills", record["id"])["name"] == "Go"


def test_update_with_unset_removes_field():
    record = insert_document("experience", {"company": "Acme", "endDate": datetime(2020, 1, 1)})

    updated = update_document("experience", record["id"], {"current": True}, ("endDate",))

    assert updated["current"] is True
    assert "endDate" not in updated


def test_malformed_ids_resolve_to_nothing():
    assert get_document("skills", "nope") is None
    assert update_document("skills", "nope", {"name": "Go"}) is None
    assert portfolio_store.delete_document("skills", "nope") is False


def test_save_profile_upserts_one_record(db):
    first = save_profile({"name": "A"})
    second = save_profile({"name": "B", "profileKey": "something-else"})

    assert first["id"] == second["id"]
    assert db["profiles"].count_documents({}) == 1


def test_duplicate_username_is_a_conflict():
    insert_document(USER_PROFILES, {"userId": "u1", "username": "jane"})

    with pytest.raises(ConflictError):
        insert_document(USER_PROFILES, {"userId": "u2", "username": "jane"})


def test_driver_errors_become_store_failures(monkeypatch):
    class _Unreachable:
        def find(self, *args, **kwargs):
            raise ServerSelectionTimeoutError("no servers")

    monkeypatch.setattr(portfolio_store, "_get_collection", lambda name: _Unreachable())

    with pytest.raises(StoreFailure):
        portfolio_store.list_documents("skills", [("name", 1)])


def test_content_routes_hide_store_errors(client, monkeypatch):
    def _fail(*args, **kwargs):
        raise StoreFailure("Failed to list skills")

    monkeypatch.setattr("api.content.list_documents", _fail)

    response = client.get("/api/skills")

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to fetch skills"


def test_conflict_message_does_not_name_the_collection():
    insert_document(USER_PROFILES, {"userId": "u1", "username": "jane"})

    with pytest.raises(ConflictError) as excinfo:
        insert_document(USER_PROFILES, {"userId": "u2", "username": "jane"})

    assert USER_PROFILES not in str(excinfo.value)
