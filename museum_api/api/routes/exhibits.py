"""Exhibit Routes — list, create and delete documents in the expo collection."""

from fastapi import APIRouter, Depends

from museum_api.api.dependencies import get_document_store
from museum_api.api.validation import validated_values
from museum_api.core.client_protocols import DocumentStore
from museum_api.core.domain_types import EXHIBIT_FIELDS, Collection
from museum_api.core.enforce_fields import (
    DOCUMENT_ID_FIELDS, EXHIBIT_CREATE_FIELDS, pick_fields,
)
from museum_api.schemas.records import (
    CreatedResponse, DocumentRef, Exhibit, ExhibitCreate, MessageResponse,
)

router = APIRouter(prefix="/expo", tags=["exhibits"])


@router.get("", response_model=list[Exhibit])
async def list_exhibits(store: DocumentStore = Depends(get_document_store)):
    return await store.list(Collection.EXHIBITS)


@router.post("", response_model=CreatedResponse)
async def create_exhibit(
    body: ExhibitCreate | None = None,
    store: DocumentStore = Depends(get_document_store),
):
    values = validated_values(body, EXHIBIT_CREATE_FIELDS)
    document_id = await store.insert(
        Collection.EXHIBITS, pick_fields(values, EXHIBIT_FIELDS),
    )
    return CreatedResponse(message="Expo added successfully.", id=document_id)


@router.delete("", response_model=MessageResponse)
async def delete_exhibit(
    body: DocumentRef | None = None,
    store: DocumentStore = Depends(get_document_store),
):
    values = validated_values(body, DOCUMENT_ID_FIELDS)
    await store.delete(Collection.EXHIBITS, values["id"])
    return MessageResponse(message="Expo deleted successfully.")
