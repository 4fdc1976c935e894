"""Required field enforcement across every route.

Tests cover:
    - Omitting any single required field yields 400 naming that field
    - Empty strings count as missing
    - A request with no body reports the first required field
    - No collaborator is called when validation fails
"""

import pytest

ARTIFACT = {
    "id": "caller-id",
    "name": "Abaporu",
    "autor": "Tarsila do Amaral",
    "description": "Oil on canvas, 1928",
    "imageURL": "https://img.example.test/abaporu.jpg",
}

# (method, path, complete body, {field: message})
JSON_ROUTES = [
    ("POST", "/signup", {"email": "a@b.c", "password": "pw"},
     {"email": "Email is required.", "password": "Password is required."}),
    ("POST", "/login", {"email": "a@b.c", "password": "pw"},
     {"email": "Email is required.", "password": "Password is required."}),
    ("POST", "/refresh", {"refresh_token": "rt"},
     {"refresh_token": "Refresh token is required."}),
    ("POST", "/verifyToken", {"idToken": "it"},
     {"idToken": "ID token is required."}),
    ("POST", "/expo", {"name": "Modernismo"},
     {"name": "Name is required."}),
    ("DELETE", "/expo", {"id": "doc-1"},
     {"id": "ID is required."}),
    ("POST", "/obra", ARTIFACT, {
        "id": "ID is required.", "name": "Name is required.",
        "autor": "Autor is required.", "description": "Description is required.",
        "imageURL": "ImageURL is required.",
    }),
    ("PATCH", "/obra", ARTIFACT, {
        "id": "ID is required.", "name": "Name is required.",
        "autor": "Autor is required.", "description": "Description is required.",
        "imageURL": "ImageURL is required.",
    }),
    ("DELETE", "/obra", {"id": "doc-1"},
     {"id": "ID is required."}),
]

OMISSION_CASES = [
    pytest.param(method, path, body, field, message, id=f"{method} {path} -{field}")
    for method, path, body, messages in JSON_ROUTES
    for field, message in messages.items()
]


@pytest.mark.parametrize("method,path,body,field,message", OMISSION_CASES)
async def test_omitting_field_is_400_and_calls_nothing(
    client, fakes, method, path, body, field, message,
):
    partial = {k: v for k, v in body.items() if k != field}
    res = await client.request(method, path, json=partial)
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["field"] == field
    assert error["message"] == message
    assert fakes.total_calls() == 0


@pytest.mark.parametrize("method,path,body,field,message", OMISSION_CASES)
async def test_empty_string_counts_as_missing(
    client, fakes, method, path, body, field, message,
):
    res = await client.request(method, path, json={**body, field: ""})
    assert res.status_code == 400
    assert res.json()["error"]["field"] == field
    assert fakes.total_calls() == 0


async def test_artifact_fields_checked_in_declared_order(client, fakes):
    res = await client.post("/obra", json={"description": "only this"})
    assert res.json()["error"]["field"] == "id"

    res = await client.post("/obra", json={"id": "x", "autor": "someone"})
    assert res.json()["error"]["field"] == "name"


@pytest.mark.parametrize("path", ["/signup", "/login"])
async def test_missing_body_reports_first_field(client, fakes, path):
    res = await client.post(path)
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Email is required."
    assert fakes.total_calls() == 0


async def test_qrcode_without_id_is_400(client, fakes):
    res = await client.get("/qrcode")
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "ID is required."
    assert fakes.qr.payloads == []


async def test_get_obra_with_empty_id_is_400(client, fakes):
    res = await client.get("/obra", params={"id": ""})
    assert res.status_code == 400
    assert res.json()["error"]["field"] == "id"
    assert fakes.documents.calls == []
