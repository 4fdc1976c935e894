"""Auth Schemas — credential and token request bodies."""

from pydantic import BaseModel


class CredentialRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class RefreshRequest(BaseModel):
    refresh_token: str | None = None


class VerifyTokenRequest(BaseModel):
    idToken: str | None = None


class SignupResponse(BaseModel):
    message: str
    uid: str


class VerifyTokenResponse(BaseModel):
    uid: str

