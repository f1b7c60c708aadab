"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
Resource bodies themselves are opaque JSON and pass through unmodelled.

Internal domain logic should use entities from the entities package.
"""

from .requests import HandlerRequest
from .responses import ErrorResponse, HealthCheckResponse

__all__ = [
    "HandlerRequest",
    "ErrorResponse",
    "HealthCheckResponse",
]
