"""Firebase Identity Client — account admin via the SDK, tokens via public REST.

Invariants:
    - sign_in and refresh call the public REST endpoints keyed by the Web API key
    - create_account and verify use the privileged admin SDK
    - Every provider or transport failure becomes IdentityProviderError carrying
      the provider's own message (e.g. INVALID_LOGIN_CREDENTIALS)
    - Session bundles are returned verbatim; nothing is cached

Design Decisions:
    - One shared httpx.AsyncClient, owned by the service container
    - Blocking admin SDK calls run in the threadpool so the event loop stays free
"""

import logging
from typing import Any

import httpx
import firebase_admin
from firebase_admin import auth
from firebase_admin.exceptions import FirebaseError
from starlette.concurrency import run_in_threadpool

from museum_api.core.errors import IdentityProviderError

logger = logging.getLogger(__name__)


def _provider_message(response: httpx.Response) -> str:
    """Extract error.message from a Google identity error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str):
        # securetoken sometimes answers with {"error": "invalid_grant", ...}
        return body.get("error_description") or error
    return f"HTTP {response.status_code}"


class FirebaseIdentityClient:
    """Identity provider calls for the auth routes."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        api_key: str,
        identity_toolkit_url: str,
        secure_token_url: str,
        app: firebase_admin.App | None = None,
    ):
        self.http = http
        self.api_key = api_key
        self.identity_toolkit_url = identity_toolkit_url.rstrip("/")
        self.secure_token_url = secure_token_url.rstrip("/")
        self.app = app

    async def create_account(self, email: str, password: str) -> dict[str, str]:
        try:
            record = await run_in_threadpool(
                auth.create_user,
                email=email, password=password, email_verified=False, app=self.app,
            )
        except (FirebaseError, ValueError) as e:
            logger.error(
                f"Account creation failed: {e}",
                extra={"operation": "create_account"},
            )
            raise IdentityProviderError(str(e), "create_account")
        logger.info("Account created", extra={"operation": "create_account"})
        return {"uid": record.uid}

    async def sign_in(self, email: str, password: str) -> dict[str, Any]:
        return await self._post(
            f"{self.identity_toolkit_url}/accounts:signInWithPassword",
            {"email": email, "password": password, "returnSecureToken": True},
            operation="sign_in",
        )

    async def refresh(self, refresh_token: str) -> dict[str, Any]:
        return await self._post(
            f"{self.secure_token_url}/token",
            {"grant_type": "refresh_token", "refresh_token": refresh_token},
            operation="refresh",
        )

    async def verify(self, id_token: str) -> dict[str, str]:
        try:
            decoded = await run_in_threadpool(
                auth.verify_id_token, id_token, app=self.app,
            )
        except (FirebaseError, ValueError) as e:
            logger.warning(
                f"Token verification failed: {e}", extra={"operation": "verify"},
            )
            raise IdentityProviderError(str(e), "verify")
        return {"uid": decoded["uid"]}

    async def _post(
        self, url: str, payload: dict[str, Any], *, operation: str,
    ) -> dict[str, Any]:
        """POST to a keyed REST endpoint and return the JSON body verbatim."""
        try:
            response = await self.http.post(
                url, params={"key": self.api_key}, json=payload,
            )
        except httpx.HTTPError as e:
            logger.error(
                f"Identity provider unreachable: {e}",
                extra={"operation": operation},
            )
            raise IdentityProviderError(str(e) or type(e).__name__, operation)

        if response.is_error:
            message = _provider_message(response)
            logger.warning(
                f"Identity provider rejected {operation}: {message}",
                extra={"operation": operation, "status_code": response.status_code},
            )
            raise IdentityProviderError(message, operation)

        try:
            return response.json()
        except ValueError:
            raise IdentityProviderError(
                "Identity provider returned a non-JSON response", operation,
            )
