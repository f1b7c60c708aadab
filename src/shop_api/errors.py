"""Domain errors raised by the collaborators.

The HTTP mapping lives in ``shop_api.api.errors``; nothing here knows
about status codes.
"""


class ShopError(Exception):
    """Base class for all shop domain errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidQueryError(ShopError):
    """Raised when listing options (offset, limit) are unusable."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"Invalid value for '{field}': {value!r}")
        self.field = field
        self.value = value


class InvalidPayloadError(ShopError):
    """Raised when a create/edit payload is not a JSON object or has an unusable id."""


class ResourceNotFoundError(ShopError):
    """Raised when an edit targets a document that does not exist."""

    def __init__(self, resource: str, resource_id: str) -> None:
        super().__init__(f"{resource} '{resource_id}' not found")
        self.resource = resource
        self.resource_id = resource_id


class MalformedBodyError(ShopError):
    """Raised when a request body is present but is not valid JSON."""
