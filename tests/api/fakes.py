"""In-memory collaborators for route tests.

Each fake records its calls so tests can assert that validation failures
never reach a collaborator.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any

from museum_api.core.domain_types import Collection, DocumentId
from museum_api.core.errors import (
    DocumentStoreError, IdentityProviderError, ObjectStoreError, QREncodeError,
)
from museum_api.infrastructure.qr_encoder import QRCodeEncoder


class SpyIdentityClient:
    """Identity provider double with scriptable failures."""

    def __init__(self):
        self.calls: list[tuple[str, tuple]] = []
        self.fail_with: dict[str, str] = {}

    def _record(self, operation: str, *args) -> None:
        self.calls.append((operation, args))
        if operation in self.fail_with:
            raise IdentityProviderError(self.fail_with[operation], operation)

    async def create_account(self, email, password):
        self._record("create_account", email, password)
        return {"uid": "uid-123"}

    async def sign_in(self, email, password):
        self._record("sign_in", email, password)
        return {
            "kind": "identitytoolkit#VerifyPasswordResponse",
            "localId": "uid-123",
            "email": email,
            "idToken": "id-token",
            "refreshToken": "refresh-token",
            "expiresIn": "3600",
            "registered": True,
        }

    async def refresh(self, refresh_token):
        self._record("refresh", refresh_token)
        return {
            "id_token": "new-id-token",
            "refresh_token": refresh_token,
            "expires_in": "3600",
            "user_id": "uid-123",
        }

    async def verify(self, id_token):
        self._record("verify", id_token)
        return {"uid": "uid-123"}


class InMemoryDocumentStore:
    """Dict-backed store mirroring Firestore semantics the routes rely on."""

    def __init__(self):
        self.collections: dict[Collection, dict[str, dict]] = {
            c: {} for c in Collection
        }
        self.calls: list[tuple[str, Collection]] = []
        self.fail_with: Exception | None = None

    def _record(self, operation: str, collection: Collection) -> None:
        self.calls.append((operation, collection))
        if self.fail_with is not None:
            raise self.fail_with

    async def list(self, collection):
        self._record("list", collection)
        return [
            {"id": doc_id, **data}
            for doc_id, data in self.collections[collection].items()
        ]

    async def insert(self, collection, record):
        self._record("insert", collection)
        doc_id = uuid.uuid4().hex[:20]
        self.collections[collection][doc_id] = dict(record)
        return DocumentId(doc_id)

    async def get(self, collection, document_id):
        self._record("get", collection)
        data = self.collections[collection].get(document_id)
        return None if data is None else {"id": document_id, **data}

    async def replace(self, collection, document_id, record):
        self._record("replace", collection)
        if document_id not in self.collections[collection]:
            raise DocumentStoreError(
                f"404 No document to update: {document_id}",
                "replace", collection.value,
            )
        self.collections[collection][document_id] = dict(record)

    async def delete(self, collection, document_id):
        self._record("delete", collection)
        self.collections[collection].pop(document_id, None)


class SpyObjectStore:
    def __init__(self):
        self.uploads: list[dict[str, Any]] = []
        self.fail_with: str | None = None

    async def upload(self, name, data, content_type=None):
        self.uploads.append(
            {"name": name, "data": data, "content_type": content_type},
        )
        if self.fail_with is not None:
            raise ObjectStoreError(self.fail_with, name)
        return f"https://storage.example.test/{name}?Signature=abc"


class SpyQREncoder:
    """Records payloads and delegates to the real python-qrcode encoder."""

    def __init__(self):
        self.payloads: list[dict] = []
        self.fail_with: str | None = None
        self._encoder = QRCodeEncoder()

    async def encode(self, payload):
        self.payloads.append(payload)
        if self.fail_with is not None:
            raise QREncodeError(self.fail_with)
        return await self._encoder.encode(payload)


@dataclass
class Fakes:
    identity: SpyIdentityClient = field(default_factory=SpyIdentityClient)
    documents: InMemoryDocumentStore = field(default_factory=InMemoryDocumentStore)
    objects: SpyObjectStore = field(default_factory=SpyObjectStore)
    qr: SpyQREncoder = field(default_factory=SpyQREncoder)

    def total_calls(self) -> int:
        return (
            len(self.identity.calls) + len(self.documents.calls)
            + len(self.objects.uploads) + len(self.qr.payloads)
        )
