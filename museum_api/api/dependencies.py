"""FastAPI dependencies — hand each route its collaborator from the container.

Tests replace these through app.dependency_overrides.
"""

from museum_api.core.client_protocols import (
    DocumentStore, IdentityClient, ObjectStore, QREncoder,
)
from museum_api.infrastructure import services as services_module
from museum_api.infrastructure.services import ServiceContainer


def get_services() -> ServiceContainer:
    if not services_module.services:
        raise RuntimeError("Services not initialized")
    return services_module.services


def get_identity_client() -> IdentityClient:
    return get_services().identity


def get_document_store() -> DocumentStore:
    return get_services().documents


def get_object_store() -> ObjectStore:
    return get_services().objects


def get_qr_encoder() -> QREncoder:
    return get_services().qr
