"""Firebase Bootstrap — builds the process-wide credentialed app handle.

Invariants:
    - Initialized exactly once per process, from the FIREBASE_SETTINGS JSON blob
    - The handle is immutable; every collaborator receives the same one
    - Any credential or initialization failure raises ConfigurationError (fatal)
"""

import json
import logging
from dataclasses import dataclass

import firebase_admin
from firebase_admin import credentials

from museum_api.config import Settings
from museum_api.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

APP_NAME = "museum-api"


@dataclass(frozen=True)
class FirebaseHandle:
    """Credentialed Firebase app plus the identifiers derived from it."""
    app: firebase_admin.App
    project_id: str
    bucket_name: str


def load_service_account(raw: str) -> dict:
    """Parse the service-account JSON blob from the environment."""
    if not raw:
        raise ConfigurationError("FIREBASE_SETTINGS is not set")
    try:
        info = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"FIREBASE_SETTINGS is not valid JSON: {e}")
    if not isinstance(info, dict) or not info.get("project_id"):
        raise ConfigurationError(
            "FIREBASE_SETTINGS must be a service-account object with a project_id",
        )
    return info


def resolve_bucket_name(settings: Settings, project_id: str) -> str:
    """Explicit bucket setting wins; otherwise the project's default bucket."""
    return settings.storage_bucket or f"{project_id}.appspot.com"


def init_firebase(settings: Settings) -> FirebaseHandle:
    """Initialize the Firebase app used by the identity, store and storage clients."""
    info = load_service_account(settings.firebase_settings)
    project_id = info["project_id"]
    bucket_name = resolve_bucket_name(settings, project_id)
    try:
        cred = credentials.Certificate(info)
        app = firebase_admin.initialize_app(
            cred,
            {"projectId": project_id, "storageBucket": bucket_name},
            name=APP_NAME,
        )
    except ValueError as e:
        raise ConfigurationError(f"Failed to initialize Firebase: {e}")
    logger.info(
        f"Firebase initialized for project {project_id}",
        extra={"operation": "init_firebase"},
    )
    return FirebaseHandle(app=app, project_id=project_id, bucket_name=bucket_name)


def close_firebase(handle: FirebaseHandle) -> None:
    firebase_admin.delete_app(handle.app)
