"""Request body → validated field values."""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel

from museum_api.core.enforce_fields import RequiredField, check_required_fields


def validated_values(
    body: BaseModel | None, required: Sequence[RequiredField],
) -> dict[str, Any]:
    """Dump an optional body and enforce its required fields in order.

    A request without a body is treated as an empty object, so the first
    required field is reported missing.
    """
    values = body.model_dump() if body is not None else {}
    check_required_fields(values, required)
    return values
