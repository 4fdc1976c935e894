"""Firestore Document Store — async CRUD over the museum collections.

Invariants:
    - Listed and fetched records always carry their document id under "id"
    - insert lets Firestore assign the id and returns it
    - replace fails when the document does not exist (Firestore update semantics)
    - No transactions, no preconditions: callers may act on stale reads
    - google.api_core failures become DocumentStoreError (core/errors.py)
    - Document ids never contain "/": a slash would address a subcollection
      document outside the museum collections
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from firebase_admin import firestore_async
from google.api_core.exceptions import GoogleAPIError

from museum_api.core.domain_types import Collection, DocumentId
from museum_api.core.errors import DocumentStoreError
from museum_api.infrastructure.firebase import FirebaseHandle

logger = logging.getLogger(__name__)


class FirestoreDocumentStore:
    """Document store backed by the Firestore AsyncClient."""

    def __init__(self, db):
        self.db = db

    @classmethod
    def from_handle(cls, handle: FirebaseHandle) -> "FirestoreDocumentStore":
        return cls(firestore_async.client(app=handle.app))

    async def list(self, collection: Collection) -> list[dict[str, Any]]:
        async with self._store_errors("list", collection):
            return [
                {"id": snapshot.id, **(snapshot.to_dict() or {})}
                async for snapshot in self.db.collection(collection.value).stream()
            ]

    async def insert(
        self, collection: Collection, record: dict[str, Any],
    ) -> DocumentId:
        async with self._store_errors("insert", collection):
            _, ref = await self.db.collection(collection.value).add(record)
        logger.info(
            f"Inserted document into {collection.value}",
            extra={"collection": collection.value, "document_id": ref.id},
        )
        return DocumentId(ref.id)

    async def get(
        self, collection: Collection, document_id: str,
    ) -> dict[str, Any] | None:
        async with self._store_errors("get", collection, document_id):
            snapshot = await self._document(collection, document_id).get()
        if not snapshot.exists:
            return None
        return {"id": snapshot.id, **(snapshot.to_dict() or {})}

    async def replace(
        self, collection: Collection, document_id: str, record: dict[str, Any],
    ) -> None:
        async with self._store_errors("replace", collection, document_id):
            await self._document(collection, document_id).update(record)
        logger.info(
            f"Updated document in {collection.value}",
            extra={"collection": collection.value, "document_id": document_id},
        )

    async def delete(self, collection: Collection, document_id: str) -> None:
        async with self._store_errors("delete", collection, document_id):
            await self._document(collection, document_id).delete()
        logger.info(
            f"Deleted document from {collection.value}",
            extra={"collection": collection.value, "document_id": document_id},
        )

    def _document(self, collection: Collection, document_id: str):
        if "/" in document_id:
            raise ValueError(f"Invalid document id: {document_id!r}")
        return self.db.collection(collection.value).document(document_id)

    @asynccontextmanager
    async def _store_errors(
        self, operation: str, collection: Collection, document_id: str | None = None,
    ):
        """Map Firestore failures and rejected document ids to DocumentStoreError."""
        try:
            yield
        except (GoogleAPIError, ValueError) as e:
            logger.error(
                f"Firestore {operation} failed: {e}",
                extra={
                    "collection": collection.value,
                    "document_id": document_id,
                    "operation": operation,
                },
            )
            raise DocumentStoreError(str(e), operation, collection.value)
