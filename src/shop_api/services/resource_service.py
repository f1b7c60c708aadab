"""Base service for document-backed resources.

This service owns everything the request handlers deliberately leave
alone: validating listing options and payloads, assigning ids, and
filtering/paging documents from the repository.
"""

import logging
import uuid
from collections.abc import Sequence
from typing import Any

from shop_api.entities import Document
from shop_api.errors import InvalidPayloadError, InvalidQueryError, ResourceNotFoundError
from shop_api.protocols import DocumentStore

logger = logging.getLogger(__name__)

ID_FIELD = "_id"


def _as_index(field: str, value: Any, minimum: int) -> int:
    """Accept an integral number >= minimum, reject everything else (NaN included)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidQueryError(field, value)
    if isinstance(value, float) and not value.is_integer():
        raise InvalidQueryError(field, value)
    if value < minimum:
        raise InvalidQueryError(field, value)
    return int(value)


class ResourceService:
    """CRUD orchestration over a DocumentStore.

    Subclasses set ``resource_name`` and override ``apply_defaults`` and
    ``matches`` for resource-specific behavior. Instances satisfy the
    ResourceStore protocol.
    """

    resource_name = "Resource"

    def __init__(self, repository: DocumentStore) -> None:
        """Initialize the service.

        Args:
            repository: Document storage backend (required).
        """
        self._repository = repository

    @classmethod
    def create_service(cls, repository: DocumentStore) -> "ResourceService":
        """Factory method, kept separate from the ``create`` operation."""
        return cls(repository=repository)

    def apply_defaults(self, document: Document) -> Document:
        """Fill resource-specific defaults into a new document."""
        return document

    def matches(self, document: Document, filters: dict[str, Any]) -> bool:
        """Return True if the document passes every active filter."""
        return True

    @staticmethod
    def _require_object(payload: Any) -> Document:
        if not isinstance(payload, dict):
            raise InvalidPayloadError(
                f"Expected a JSON object, got {type(payload).__name__}"
            )
        return payload

    async def get(self, resource_id: str) -> Document | None:
        """Fetch a document by id.

        Returns:
            The document, or None if it does not exist
        """
        return await self._repository.load(resource_id)

    async def create(self, payload: Any) -> Document:
        """Store a new document built from the payload.

        Business logic:
        1. Require a JSON object
        2. Assign an id when the payload has none
        3. Apply resource defaults
        4. Persist and return the stored document

        Raises:
            InvalidPayloadError: If the payload is not an object or its id is not a string
        """
        document = dict(self._require_object(payload))
        document.setdefault(ID_FIELD, uuid.uuid4().hex)
        doc_id = document[ID_FIELD]
        if not isinstance(doc_id, str) or not doc_id:
            raise InvalidPayloadError(f"'{ID_FIELD}' must be a non-empty string, got {doc_id!r}")
        document = self.apply_defaults(document)

        await self._repository.save(doc_id, document)
        logger.info("Created %s %s", self.resource_name.lower(), document[ID_FIELD])
        return document

    async def edit(self, resource_id: str, change: Any) -> Document:
        """Shallow-merge a change into an existing document.

        The id is never changed, even if the change carries one.

        Raises:
            InvalidPayloadError: If the change is not an object
            ResourceNotFoundError: If no document has this id
        """
        change = self._require_object(change)
        current = await self._repository.load(resource_id)
        if current is None:
            raise ResourceNotFoundError(self.resource_name, resource_id)

        updated = {**current, **change, ID_FIELD: current.get(ID_FIELD, resource_id)}
        await self._repository.save(resource_id, updated)
        logger.info("Edited %s %s", self.resource_name.lower(), resource_id)
        return updated

    async def destroy(self, resource_id: str) -> dict[str, Any]:
        """Delete a document. Deleting a missing id still succeeds."""
        deleted = await self._repository.delete(resource_id)
        if deleted:
            logger.info("Deleted %s %s", self.resource_name.lower(), resource_id)
        return {"success": True}

    async def list(self, *, offset: Any, limit: Any, **filters: Any) -> Sequence[Document]:
        """List matching documents, oldest first.

        Args:
            offset: Number of matches to skip; an integer >= 0
            limit: Maximum number of matches; an integer >= 1
            **filters: Resource filters; None values are ignored

        Raises:
            InvalidQueryError: If offset or limit is not usable
        """
        start = _as_index("offset", offset, 0)
        count = _as_index("limit", limit, 1)
        active = {name: value for name, value in filters.items() if value is not None}

        documents = await self._repository.load_all()
        matching = [doc for doc in documents if self.matches(doc, active)]
        return matching[start : start + count]

    @property
    def repository(self) -> DocumentStore:
        """Get the underlying repository (for testing)."""
        return self._repository
