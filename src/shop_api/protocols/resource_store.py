"""Resource collaborator protocol.

The request handlers talk to products and orders only through this
interface. What a collaborator does with offset/limit and payloads
(validation included) is its own business.
"""

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from shop_api.entities import Document


@runtime_checkable
class ResourceStore(Protocol):
    """Protocol for the products/orders collaborators."""

    async def get(self, resource_id: str) -> Document | None:
        """Fetch one resource, or None if absent."""
        ...

    async def create(self, payload: Any) -> Document:
        """Create a resource from a request payload."""
        ...

    async def edit(self, resource_id: str, change: Any) -> Document:
        """Apply a change to an existing resource and return it."""
        ...

    async def destroy(self, resource_id: str) -> dict[str, Any]:
        """Remove a resource and return a result object."""
        ...

    async def list(self, *, offset: Any, limit: Any, **filters: Any) -> Sequence[Document]:
        """List resources.

        Args:
            offset: Number of matching resources to skip
            limit: Maximum number of resources to return
            **filters: Resource-specific filters; None means "no filter"

        Returns:
            The matching resources, oldest first
        """
        ...
