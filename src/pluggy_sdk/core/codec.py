"""JSON <-> resource model conversion with SDK error mapping."""

from __future__ import annotations

from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel

from pluggy_sdk.core.exceptions import DecodeError

M = TypeVar("M", bound=BaseModel)


def decode(model: type[M], content: bytes | str) -> M:
    """Validate a raw JSON body into *model*.

    Args:
        model: The resource model (or parametrised ``PageResponse[...]``).
        content: Raw response body.

    Returns:
        The decoded, immutable model instance.

    Raises:
        DecodeError: If the body is not JSON, a required field is missing, an
            enum value is outside its closed set, or a value has the wrong
            JSON type (no lax coercion such as ``"2"`` to ``2``).
    """
    try:
        return model.model_validate_json(content, strict=True)
    except pydantic.ValidationError as exc:
        raise DecodeError(
            f"Could not decode {model.__name__}: {exc.error_count()} error(s)",
            code="DECODE_ERROR",
            details={"errors": exc.errors(include_url=False)},
        ) from exc


def encode(model: BaseModel) -> dict[str, Any]:
    """Serialize a write model to its camelCase JSON object, omitting unset fields."""
    result: dict[str, Any] = model.model_dump(
        mode="json", by_alias=True, exclude_none=True
    )
    return result
