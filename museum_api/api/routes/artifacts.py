"""Artifact Routes — CRUD over the obra collection.

Invariants:
    - POST and PATCH require id, name, autor, description, imageURL (in that order)
    - POST ignores the caller's id: the store assigns one, returned as "id"
    - PATCH replaces the four content fields of an existing document
    - GET without ?id lists; GET with ?id returns the record or 404
"""

from fastapi import APIRouter, Depends, Query

from museum_api.api.dependencies import get_document_store
from museum_api.api.validation import validated_values
from museum_api.core.client_protocols import DocumentStore
from museum_api.core.domain_types import ARTIFACT_FIELDS, Collection
from museum_api.core.enforce_fields import (
    ARTIFACT_WRITE_FIELDS, DOCUMENT_ID_FIELDS, check_required_fields, pick_fields,
)
from museum_api.core.errors import ErrorContext, ResourceNotFoundError
from museum_api.schemas.records import (
    ArtifactWrite, CreatedResponse, DocumentRef, MessageResponse,
)

router = APIRouter(prefix="/obra", tags=["artifacts"])


@router.get("")
async def list_or_get_artifacts(
    document_id: str | None = Query(None, alias="id"),
    store: DocumentStore = Depends(get_document_store),
):
    """List every artifact, or fetch one when ?id= is given."""
    if document_id is None:
        return await store.list(Collection.ARTIFACTS)
    check_required_fields({"id": document_id}, DOCUMENT_ID_FIELDS)
    record = await store.get(Collection.ARTIFACTS, document_id)
    if record is None:
        raise ResourceNotFoundError(
            "Artifact", document_id,
            ErrorContext(
                collection=Collection.ARTIFACTS.value,
                document_id=document_id,
                operation="get",
            ),
        )
    return record


@router.post("", response_model=CreatedResponse)
async def create_artifact(
    body: ArtifactWrite | None = None,
    store: DocumentStore = Depends(get_document_store),
):
    values = validated_values(body, ARTIFACT_WRITE_FIELDS)
    # values["id"] is required but unused: Firestore assigns the document id
    document_id = await store.insert(
        Collection.ARTIFACTS, pick_fields(values, ARTIFACT_FIELDS),
    )
    return CreatedResponse(message="Object added successfully.", id=document_id)


@router.patch("", response_model=MessageResponse)
async def update_artifact(
    body: ArtifactWrite | None = None,
    store: DocumentStore = Depends(get_document_store),
):
    values = validated_values(body, ARTIFACT_WRITE_FIELDS)
    await store.replace(
        Collection.ARTIFACTS, values["id"], pick_fields(values, ARTIFACT_FIELDS),
    )
    return MessageResponse(message="Object updated successfully.")


@router.delete("", response_model=MessageResponse)
async def delete_artifact(
    body: DocumentRef | None = None,
    store: DocumentStore = Depends(get_document_store),
):
    values = validated_values(body, DOCUMENT_ID_FIELDS)
    await store.delete(Collection.ARTIFACTS, values["id"])
    return MessageResponse(message="Object deleted successfully.")
