import logging
from datetime import date, datetime, time, timezone
from typing import Any

from api.common import CamelModel
from errors import NotFoundError
from portfolio_store import (
    SortSpec,
    delete_document,
    get_document,
    insert_document,
    list_documents,
    update_document,
)

logger = logging.getLogger(__name__)


def to_storable(document: dict[str, Any]) -> dict[str, Any]:
    """Convert plain dates to UTC datetimes, which is what BSON can hold.

    Empty values are left out; callers turn them into removals.
    """
    storable = {}
    for key, value in document.items():
        if value is None:
            continue
        if isinstance(value, date) and not isinstance(value, datetime):
            value = datetime.combine(value, time.min, tzinfo=timezone.utc)
        storable[key] = value
    return storable


class ContentService:
    """
    List/create/update/delete for one collection of portfolio content.

    Attributes:
        collection: Name of the backing collection.
        label: Human name used in error messages ("Skill").
        sort: Fixed ordering applied by ``list``.
    """

    def __init__(self, collection: str, label: str, sort: SortSpec) -> None:
        self.collection = collection
        self.label = label
        self.sort = sort

    def _not_found(self, document_id: str) -> NotFoundError:
        logger.info("%s %s not found", self.label, document_id)
        return NotFoundError(f"{self.label} not found")

    def prepare(
        self,
        document: dict[str, Any],
        existing: dict[str, Any] | None,
    ) -> tuple[dict[str, Any], tuple[str, ...]]:
        """Return the fields to write and the fields to remove."""
        return document, ()

    def list(self) -> list[dict[str, Any]]:
        return list_documents(self.collection, self.sort)

    def get(self, document_id: str) -> dict[str, Any]:
        document = get_document(self.collection, document_id)
        if document is None:
            raise self._not_found(document_id)
        return document

    def create(self, request: CamelModel) -> dict[str, Any]:
        document, _ = self.prepare(to_storable(request.to_document()), None)
        return insert_document(self.collection, document)

    def _changes(
        self,
        request: CamelModel,
        existing: dict[str, Any] | None,
    ) -> tuple[dict[str, Any], tuple[str, ...]]:
        submitted = request.to_document(partial=True)
        cleared = tuple(key for key, value in submitted.items() if value is None)
        fields, unset = self.prepare(to_storable(submitted), existing)
        return fields, tuple(dict.fromkeys(cleared + unset))

    def update(self, document_id: str, request: CamelModel) -> dict[str, Any]:
        fields, unset = self._changes(request, None)
        updated = update_document(self.collection, document_id, fields, unset)
        if updated is None:
            raise self._not_found(document_id)
        return updated

    def delete(self, document_id: str) -> None:
        if not delete_document(self.collection, document_id):
            raise self._not_found(document_id)


class DatedContentService(ContentService):
    """Content with a ``current`` flag: a current entry never keeps an ``endDate``."""

    def prepare(self, document, existing):
        current = document.get("current")
        if current is None and existing is not None:
            current = existing.get("current")
        if not current:
            return document, ()

        fields = {key: value for key, value in document.items() if key != "endDate"}
        return fields, ("endDate",)

    def update(self, document_id: str, request: CamelModel) -> dict[str, Any]:
        existing = self.get(document_id)
        fields, unset = self._changes(request, existing)
        updated = update_document(self.collection, document_id, fields, unset)
        if updated is None:
            raise self._not_found(document_id)
        return updated
