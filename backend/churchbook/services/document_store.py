"""Document store - collection/document CRUD on top of the `documents` table.

Every read returns plain dicts shaped like `{"id": <doc_id>, **fields}`.
Writes are flushed into the caller's session; the caller commits (or the
request dependency rolls back when something raises), so several writes
made through one store belong to one transaction.
"""
import logging
import uuid
from typing import Any, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from churchbook.database import get_db
from churchbook.models.collections import Collection
from churchbook.models.document import Document

logger = logging.getLogger(__name__)


def _as_dict(doc: Document) -> dict[str, Any]:
    return {"id": doc.doc_id, **(doc.data or {})}


class DocumentStore:
    """Bulk read, field-equality read, point read, create, field-level update, delete."""

    def __init__(self, db: Session):
        self.db = db

    def _row(self, collection: Collection, doc_id: str) -> Optional[Document]:
        return (
            self.db.query(Document)
            .filter(Document.collection == collection.value, Document.doc_id == doc_id)
            .first()
        )

    def all(self, collection: Collection) -> list[dict[str, Any]]:
        rows = (
            self.db.query(Document)
            .filter(Document.collection == collection.value)
            .order_by(Document.created_at, Document.doc_id)
            .all()
        )
        return [_as_dict(row) for row in rows]

    def where(self, collection: Collection, field: str, value: Any) -> list[dict[str, Any]]:
        # JSON comparison differs per dialect, so equality is evaluated here.
        return [doc for doc in self.all(collection) if doc.get(field) == value]

    def get(self, collection: Collection, doc_id: str) -> Optional[dict[str, Any]]:
        row = self._row(collection, doc_id)
        return _as_dict(row) if row else None

    def create(self, collection: Collection, data: dict[str, Any]) -> dict[str, Any]:
        fields = {k: v for k, v in data.items() if k != "id"}
        row = Document(collection=collection.value, doc_id=str(uuid.uuid4()), data=fields)
        self.db.add(row)
        self.db.flush()
        logger.debug("Created %s/%s", collection.value, row.doc_id)
        return _as_dict(row)

    def update(self, collection: Collection, doc_id: str, fields: dict[str, Any]) -> Optional[dict[str, Any]]:
        """Merge `fields` into the document; fields not named are left as they are."""
        row = self._row(collection, doc_id)
        if not row:
            return None
        # Reassign so the JSON column is marked dirty.
        row.data = {**(row.data or {}), **{k: v for k, v in fields.items() if k != "id"}}
        self.db.flush()
        logger.debug("Updated %s/%s fields=%s", collection.value, doc_id, sorted(fields))
        return _as_dict(row)

    def delete(self, collection: Collection, doc_id: str) -> bool:
        row = self._row(collection, doc_id)
        if not row:
            return False
        self.db.delete(row)
        self.db.flush()
        logger.debug("Deleted %s/%s", collection.value, doc_id)
        return True

    def count(self, collection: Collection) -> int:
        return self.db.query(Document).filter(Document.collection == collection.value).count()

    def commit(self) -> None:
        self.db.commit()


def get_store(db: Session = Depends(get_db)) -> DocumentStore:
    """FastAPI dependency - a store bound to the request's session."""
    return DocumentStore(db)
