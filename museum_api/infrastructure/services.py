"""Service Container — the collaborators shared by every request.

Invariants:
    - Built once on startup from the single FirebaseHandle; never rebuilt per request
    - Requests read the container, never mutate it
    - shutdown_services() closes the HTTP client and releases the Firebase app

Design Decisions:
    - Module-level singleton initialized on startup, same lifecycle as the
      FastAPI lifespan (no import-time side effects)
"""

import logging
from dataclasses import dataclass

import httpx

from museum_api.config import Settings
from museum_api.core.client_protocols import (
    DocumentStore, IdentityClient, ObjectStore, QREncoder,
)
from museum_api.core.errors import ConfigurationError
from museum_api.infrastructure.document_store import FirestoreDocumentStore
from museum_api.infrastructure.firebase import (
    FirebaseHandle, close_firebase, init_firebase,
)
from museum_api.infrastructure.identity_client import FirebaseIdentityClient
from museum_api.infrastructure.object_store import FirebaseObjectStore
from museum_api.infrastructure.qr_encoder import QRCodeEncoder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceContainer:
    identity: IdentityClient
    documents: DocumentStore
    objects: ObjectStore
    qr: QREncoder
    firebase: FirebaseHandle | None = None
    http: httpx.AsyncClient | None = None

    async def aclose(self) -> None:
        if self.http is not None:
            await self.http.aclose()
        if self.firebase is not None:
            close_firebase(self.firebase)


# Singleton (initialized on startup)
services: ServiceContainer | None = None


def build_services(settings: Settings) -> ServiceContainer:
    """Initialize Firebase and wire every collaborator to it."""
    if not settings.api_key:
        raise ConfigurationError("APIKEY is not set")
    handle = init_firebase(settings)
    http = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
    return ServiceContainer(
        identity=FirebaseIdentityClient(
            http,
            api_key=settings.api_key,
            identity_toolkit_url=settings.identity_toolkit_url,
            secure_token_url=settings.secure_token_url,
            app=handle.app,
        ),
        documents=FirestoreDocumentStore.from_handle(handle),
        objects=FirebaseObjectStore.from_handle(
            handle, settings.signed_url_expiration,
        ),
        qr=QRCodeEncoder(box_size=settings.qr_box_size, border=settings.qr_border),
        firebase=handle,
        http=http,
    )


def init_services(settings: Settings) -> ServiceContainer:
    global services
    services = build_services(settings)
    logger.info("Collaborators initialized")
    return services


async def shutdown_services() -> None:
    global services
    if services is not None:
        await services.aclose()
        services = None
