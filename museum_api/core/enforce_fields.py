"""Required Field Enforcement — presence checks for every route's inputs.

Invariants:
    - A field is missing when absent, None, or the empty string
    - Fields are checked in the declared order; the first missing one raises
    - No coercion: present values are returned untouched

Design Decisions:
    - Pure functions over Pydantic required fields: the error must name the
      first missing field with the route's own message, and no collaborator
      may run before every field is present
"""

from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple

from museum_api.core.errors import MissingFieldError


class RequiredField(NamedTuple):
    """A field name paired with the message reported when it is missing."""
    name: str
    message: str


EMAIL = RequiredField("email", "Email is required.")
PASSWORD = RequiredField("password", "Password is required.")
REFRESH_TOKEN = RequiredField("refresh_token", "Refresh token is required.")
ID_TOKEN = RequiredField("idToken", "ID token is required.")
DOCUMENT_ID = RequiredField("id", "ID is required.")
NAME = RequiredField("name", "Name is required.")
AUTOR = RequiredField("autor", "Autor is required.")
DESCRIPTION = RequiredField("description", "Description is required.")
IMAGE_URL = RequiredField("imageURL", "ImageURL is required.")
AUDIO_FILE = RequiredField("audio", "No file uploaded.")

# Per-route requirement tables, in evaluation order
CREDENTIAL_FIELDS = (EMAIL, PASSWORD)
REFRESH_FIELDS = (REFRESH_TOKEN,)
VERIFY_FIELDS = (ID_TOKEN,)
EXHIBIT_CREATE_FIELDS = (NAME,)
DOCUMENT_ID_FIELDS = (DOCUMENT_ID,)
ARTIFACT_WRITE_FIELDS = (DOCUMENT_ID, NAME, AUTOR, DESCRIPTION, IMAGE_URL)


def is_missing(value: Any) -> bool:
    """True when a value counts as not supplied."""
    return value is None or value == ""


def find_missing_field(
    values: Mapping[str, Any], required: Sequence[RequiredField],
) -> RequiredField | None:
    """Return the first required field without a value, or None."""
    for field in required:
        if is_missing(values.get(field.name)):
            return field
    return None


def check_required_fields(
    values: Mapping[str, Any], required: Sequence[RequiredField],
) -> None:
    """Raise MissingFieldError naming the first missing field."""
    missing = find_missing_field(values, required)
    if missing is not None:
        raise MissingFieldError(missing.name, missing.message)


def pick_fields(values: Mapping[str, Any], names: Sequence[str]) -> dict[str, Any]:
    """Project a validated body onto the fields persisted for a record."""
    return {name: values[name] for name in names}
