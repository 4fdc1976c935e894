"""Cloud Storage Object Store — uploads a blob and returns a signed read URL.

Invariants:
    - Upload and URL signing form one awaited operation: it either returns the
      URL or raises ObjectStoreError, never both
    - A failure after bytes started flowing is still reported as a failure;
      the partial object is not cleaned up
    - Expiry comes from configuration, not from the caller
"""

import logging
from datetime import datetime

import requests
from firebase_admin import storage
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from starlette.concurrency import run_in_threadpool

from museum_api.core.errors import ObjectStoreError
from museum_api.infrastructure.firebase import FirebaseHandle

logger = logging.getLogger(__name__)


class FirebaseObjectStore:
    """Object store backed by the project's storage bucket."""

    def __init__(self, bucket, expiration: datetime):
        self.bucket = bucket
        self.expiration = expiration

    @classmethod
    def from_handle(
        cls, handle: FirebaseHandle, expiration: datetime,
    ) -> "FirebaseObjectStore":
        return cls(storage.bucket(handle.bucket_name, app=handle.app), expiration)

    async def upload(
        self, name: str, data: bytes, content_type: str | None = None,
    ) -> str:
        try:
            url = await run_in_threadpool(
                self._upload_and_sign, name, data, content_type,
            )
        except (
            GoogleAPIError, GoogleAuthError, requests.RequestException, ValueError,
        ) as e:
            logger.error(
                f"Upload of {name} failed: {e}",
                extra={"blob_name": name, "operation": "upload"},
            )
            raise ObjectStoreError(str(e), name)
        logger.info(
            f"Uploaded {name}",
            extra={"blob_name": name, "size_bytes": len(data)},
        )
        return url

    def _upload_and_sign(
        self, name: str, data: bytes, content_type: str | None,
    ) -> str:
        blob = self.bucket.blob(name)
        blob.upload_from_string(data, content_type=content_type)
        # v2 signing: v4 caps expiry at seven days
        return blob.generate_signed_url(
            expiration=self.expiration, method="GET", version="v2",
        )
