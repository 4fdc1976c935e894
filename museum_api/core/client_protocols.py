"""Boundary Protocols — contracts between the routers and external collaborators.

Invariants:
    - Routers depend on these Protocols, never on SDK types
    - Every method is a single outbound call; no retries, no local state
    - Failures surface as MuseumAPIError subclasses (core/errors.py)

Design Decisions:
    - Protocol over ABC: structural subtyping lets tests inject plain fakes
"""

from typing import Any, Protocol

from museum_api.core.domain_types import Collection, DocumentId


class IdentityClient(Protocol):
    """Identity provider: account admin, sign-in and token endpoints."""
    async def create_account(self, email: str, password: str) -> dict[str, str]: ...
    async def sign_in(self, email: str, password: str) -> dict[str, Any]: ...
    async def refresh(self, refresh_token: str) -> dict[str, Any]: ...
    async def verify(self, id_token: str) -> dict[str, str]: ...


class DocumentStore(Protocol):
    """Document database over the museum collections."""
    async def list(self, collection: Collection) -> list[dict[str, Any]]: ...
    async def insert(
        self, collection: Collection, record: dict[str, Any],
    ) -> DocumentId: ...
    async def get(
        self, collection: Collection, document_id: str,
    ) -> dict[str, Any] | None: ...
    async def replace(
        self, collection: Collection, document_id: str, record: dict[str, Any],
    ) -> None: ...
    async def delete(self, collection: Collection, document_id: str) -> None: ...


class ObjectStore(Protocol):
    """Blob storage returning a signed retrieval URL per upload."""
    async def upload(
        self, name: str, data: bytes, content_type: str | None = None,
    ) -> str: ...


class QREncoder(Protocol):
    """Encodes a JSON payload into PNG bytes."""
    async def encode(self, payload: dict[str, Any]) -> bytes: ...
