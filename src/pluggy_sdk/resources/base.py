"""Shared base for every wire model exchanged with the Pluggy API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ResourceModel(BaseModel):
    """Immutable model decoded from (and encoded to) camelCase JSON.

    Attribute names are snake_case; the JSON names are generated with
    :func:`pydantic.alias_generators.to_camel` unless a field declares an
    explicit alias.  Unknown keys sent by the API are ignored so that new
    server-side fields do not break decoding, while enum-valued fields stay
    closed.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
