"""Request DTOs for handlers."""

from typing import Any

from pydantic import BaseModel, Field


class HandlerRequest(BaseModel):
    """Transport-neutral request descriptor.

    The HTTP boundary builds one per request; handlers read only from it.
    """

    params: dict[str, str] = Field(
        default_factory=dict,
        description="Path parameters (e.g. the resource id)",
    )
    query: dict[str, str] = Field(
        default_factory=dict,
        description="Query string parameters, last value per key",
    )
    body: Any = Field(None, description="Decoded JSON body, passed through unvalidated")
