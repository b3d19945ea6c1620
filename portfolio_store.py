import logging
import os
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator

from bson import ObjectId
from bson.errors import InvalidId
from dotenv import load_dotenv
from pymongo import ASCENDING, MongoClient, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from errors import ConflictError, StoreFailure

logger = logging.getLogger(__name__)


_client: MongoClient | None = None
PROFILE_KEY = "portfolio_profile"

PROFILES = "profiles"
SKILLS = "skills"
EXPERIENCE = "experience"
EDUCATION = "education"
PROJECTS = "projects"
SOCIAL_LINKS = "social_links"
USER_PROFILES = "user_profiles"
USERS = "users"

SortSpec = list[tuple[str, int]]


def _get_client() -> MongoClient:
    global _client
    if _client is None:
        load_dotenv()
        mongo_uri = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
        _client = MongoClient(mongo_uri)
    return _client


def _get_collection(name: str):
    load_dotenv()
    db_name = os.getenv("MONGODB_DB", "portfolio")
    return _get_client()[db_name][name]


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _object_id(document_id: str) -> ObjectId | None:
    try:
        return ObjectId(document_id)
    except (InvalidId, TypeError):
        return None


@contextmanager
def _store_errors(action: str) -> Iterator[None]:
    try:
        yield
    except DuplicateKeyError as exc:
        logger.warning("Duplicate key while trying to %s: %s", action, exc)
        raise ConflictError("A record with the same key already exists") from exc
    except PyMongoError as exc:
        logger.exception("Document store failed to %s", action)
        raise StoreFailure(f"Failed to {action}") from exc


def serialize_document(doc: dict[str, Any] | None) -> dict[str, Any] | None:
    if not doc:
        return None

    payload = dict(doc)
    if "_id" in payload:
        payload["id"] = str(payload.pop("_id"))
    payload.pop("profileKey", None)
    for key, value in payload.items():
        if isinstance(value, datetime):
            payload[key] = value.isoformat()
    return payload


def ensure_indexes() -> None:
    with _store_errors("create indexes"):
        user_profiles = _get_collection(USER_PROFILES)
        user_profiles.create_index([("userId", ASCENDING)], unique=True)
        user_profiles.create_index([("username", ASCENDING)], unique=True)
        _get_collection(USERS).create_index([("email", ASCENDING)], unique=True)
        _get_collection(PROFILES).create_index([("profileKey", ASCENDING)], unique=True)


# Generic collection access


def list_documents(collection: str, sort: SortSpec) -> list[dict[str, Any]]:
    with _store_errors(f"list {collection}"):
        cursor = _get_collection(collection).find().sort(sort)
        return [serialize_document(doc) for doc in cursor]


def get_document(collection: str, document_id: str) -> dict[str, Any] | None:
    oid = _object_id(document_id)
    if oid is None:
        return None
    with _store_errors(f"load {collection}"):
        return serialize_document(_get_collection(collection).find_one({"_id": oid}))


def find_document(collection: str, query: dict[str, Any]) -> dict[str, Any] | None:
    with _store_errors(f"load {collection}"):
        return serialize_document(_get_collection(collection).find_one(query))


def insert_document(collection: str, payload: dict[str, Any]) -> dict[str, Any]:
    document = dict(payload)
    document["createdAt"] = _now()
    document["updatedAt"] = document["createdAt"]

    with _store_errors(f"create {collection}"):
        result = _get_collection(collection).insert_one(document)

    document["_id"] = result.inserted_id
    logger.info("Created %s document %s", collection, result.inserted_id)
    return serialize_document(document)


def update_document(
    collection: str,
    document_id: str,
    set_fields: dict[str, Any],
    unset_fields: tuple[str, ...] = (),
) -> dict[str, Any] | None:
    oid = _object_id(document_id)
    if oid is None:
        return None

    update: dict[str, Any] = {"$set": {**set_fields, "updatedAt": _now()}}
    if unset_fields:
        update["$unset"] = {field: "" for field in unset_fields}

    with _store_errors(f"update {collection}"):
        result = _get_collection(collection).find_one_and_update(
            {"_id": oid},
            update,
            return_document=ReturnDocument.AFTER,
        )
    if result:
        logger.info("Updated %s document %s", collection, document_id)
    return serialize_document(result)


def delete_document(collection: str, document_id: str) -> bool:
    oid = _object_id(document_id)
    if oid is None:
        return False
    with _store_errors(f"delete {collection}"):
        result = _get_collection(collection).delete_one({"_id": oid})
    if result.deleted_count:
        logger.info("Deleted %s document %s", collection, document_id)
    return result.deleted_count > 0


def upsert_document(
    collection: str,
    query: dict[str, Any],
    set_fields: dict[str, Any],
    set_on_insert: dict[str, Any] | None = None,
) -> dict[str, Any]:
    now = _now()
    update: dict[str, Any] = {
        "$set": {**set_fields, "updatedAt": now},
        "$setOnInsert": {**(set_on_insert or {}), "createdAt": now},
    }
    with _store_errors(f"save {collection}"):
        result = _get_collection(collection).find_one_and_update(
            query,
            update,
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
    return serialize_document(result)


# Singleton profile


def get_profile() -> dict[str, Any] | None:
    return find_document(PROFILES, {"profileKey": PROFILE_KEY})


def save_profile(profile_data: dict[str, Any]) -> dict[str, Any]:
    payload = dict(profile_data)
    payload.pop("profileKey", None)
    profile = upsert_document(PROFILES, {"profileKey": PROFILE_KEY}, payload)
    logger.info("Saved profile %s", profile["id"])
    return profile

