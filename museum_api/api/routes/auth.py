"""Auth Routes — sign-up, login, token refresh and token verification.

Invariants:
    - Required fields are checked before the identity provider is called
    - Provider rejections are 400 with the provider's message; a failed
      sign-up is 500 (the account could not be created)
    - Session bundles from the provider are returned verbatim
"""

from fastapi import APIRouter, Depends, status

from museum_api.api.dependencies import get_identity_client
from museum_api.api.validation import validated_values
from museum_api.core.client_protocols import IdentityClient
from museum_api.core.enforce_fields import (
    CREDENTIAL_FIELDS, REFRESH_FIELDS, VERIFY_FIELDS,
)
from museum_api.core.errors import AccountCreationError, IdentityProviderError
from museum_api.schemas.auth import (
    CredentialRequest, RefreshRequest, SignupResponse,
    VerifyTokenRequest, VerifyTokenResponse,
)

router = APIRouter(tags=["auth"])


@router.post(
    "/signup", response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    body: CredentialRequest | None = None,
    identity: IdentityClient = Depends(get_identity_client),
):
    """Create an email/password account."""
    values = validated_values(body, CREDENTIAL_FIELDS)
    try:
        account = await identity.create_account(values["email"], values["password"])
    except IdentityProviderError as e:
        raise AccountCreationError(e.message) from e
    return SignupResponse(message="User created successfully", uid=account["uid"])


@router.post("/login")
async def login(
    body: CredentialRequest | None = None,
    identity: IdentityClient = Depends(get_identity_client),
):
    """Exchange email/password for a session (idToken, refreshToken, ...)."""
    values = validated_values(body, CREDENTIAL_FIELDS)
    return await identity.sign_in(values["email"], values["password"])


@router.post("/refresh")
async def refresh(
    body: RefreshRequest | None = None,
    identity: IdentityClient = Depends(get_identity_client),
):
    """Exchange a refresh token for a fresh session."""
    values = validated_values(body, REFRESH_FIELDS)
    return await identity.refresh(values["refresh_token"])


@router.post("/verifyToken", response_model=VerifyTokenResponse)
async def verify_token(
    body: VerifyTokenRequest | None = None,
    identity: IdentityClient = Depends(get_identity_client),
):
    values = validated_values(body, VERIFY_FIELDS)
    decoded = await identity.verify(values["idToken"])
    return VerifyTokenResponse(uid=decoded["uid"])
