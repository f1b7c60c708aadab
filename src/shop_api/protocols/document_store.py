"""Document storage protocol.

Defines the interface for any backend that can persist JSON documents
by id and return them in insertion order.

Implementations can include:
- Redis (default)
- An in-memory dict (tests)
- Any key-value or document database
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from shop_api.entities import Document


@runtime_checkable
class DocumentStore(Protocol):
    """Protocol for document storage backends."""

    async def save(self, doc_id: str, document: Document) -> None:
        """Insert or replace a document.

        Args:
            doc_id: The document id
            document: The JSON object to store
        """
        ...

    async def load(self, doc_id: str) -> Document | None:
        """Load a document by id.

        Returns:
            The document, or None if absent
        """
        ...

    async def load_all(self) -> Sequence[Document]:
        """Load every document, oldest first."""
        ...

    async def delete(self, doc_id: str) -> bool:
        """Delete a document by id.

        Returns:
            True if a document was deleted, False otherwise
        """
        ...

    async def health_check(self) -> bool:
        """Check if the backend is reachable."""
        ...
