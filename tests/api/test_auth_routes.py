"""Auth routes — signup, login, refresh and token verification.

Tests cover:
    - Successful calls return the provider's data (session bundles verbatim)
    - Provider rejections surface the provider's own message
    - Sign-up failures are 500, other auth failures are 400
    - Wrongly typed fields are rejected before the provider is called
"""


async def test_signup_creates_account(client, fakes):
    res = await client.post(
        "/signup", json={"email": "ana@example.com", "password": "secret1"},
    )
    assert res.status_code == 201
    assert res.json() == {"message": "User created successfully", "uid": "uid-123"}
    assert fakes.identity.calls == [
        ("create_account", ("ana@example.com", "secret1")),
    ]


async def test_signup_provider_error_is_500_with_provider_message(client, fakes):
    fakes.identity.fail_with["create_account"] = (
        "The user with the provided email already exists (EMAIL_EXISTS)."
    )
    res = await client.post(
        "/signup", json={"email": "ana@example.com", "password": "secret1"},
    )
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "ACCOUNT_CREATION_FAILED"
    assert "EMAIL_EXISTS" in error["message"]


async def test_login_returns_session_verbatim(client, fakes):
    res = await client.post(
        "/login", json={"email": "ana@example.com", "password": "secret1"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["idToken"] == "id-token"
    assert body["refreshToken"] == "refresh-token"
    assert body["localId"] == "uid-123"
    assert body["kind"] == "identitytoolkit#VerifyPasswordResponse"


async def test_login_wrong_credentials_uses_provider_message(client, fakes):
    fakes.identity.fail_with["sign_in"] = "INVALID_LOGIN_CREDENTIALS"
    res = await client.post(
        "/login", json={"email": "ana@example.com", "password": "wrong"},
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["message"] == "INVALID_LOGIN_CREDENTIALS"
    assert error["code"] == "IDENTITY_PROVIDER_ERROR"


async def test_refresh_returns_new_session(client, fakes):
    res = await client.post("/refresh", json={"refresh_token": "rt-1"})
    assert res.status_code == 200
    assert res.json()["id_token"] == "new-id-token"
    assert fakes.identity.calls == [("refresh", ("rt-1",))]


async def test_refresh_invalid_token_is_400(client, fakes):
    fakes.identity.fail_with["refresh"] = "INVALID_REFRESH_TOKEN"
    res = await client.post("/refresh", json={"refresh_token": "stale"})
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "INVALID_REFRESH_TOKEN"


async def test_verify_token_returns_uid(client, fakes):
    res = await client.post("/verifyToken", json={"idToken": "id-token"})
    assert res.status_code == 200
    assert res.json() == {"uid": "uid-123"}


async def test_verify_expired_token_is_400(client, fakes):
    fakes.identity.fail_with["verify"] = "Token expired, 1700000000 < 1700003600"
    res = await client.post("/verifyToken", json={"idToken": "old"})
    assert res.status_code == 400
    assert res.json()["error"]["message"].startswith("Token expired")


async def test_non_string_email_is_rejected_without_provider_call(client, fakes):
    res = await client.post("/login", json={"email": 42, "password": "secret1"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["field"].endswith("email") for d in error["details"])
    assert fakes.identity.calls == []
