"""Redis implementation of DocumentStore.

Each document is a JSON string under its own key. A sorted set per
namespace keeps insertion order so listings are stable.
"""

import json
import logging
import time
from collections.abc import Sequence

import redis.asyncio as redis
from redis.exceptions import RedisError

from shop_api.config import get_redis_client, settings
from shop_api.entities import Document

logger = logging.getLogger(__name__)


class RedisDocumentRepository:
    """Redis implementation of the DocumentStore protocol.

    This class satisfies the DocumentStore protocol through structural
    typing - no explicit inheritance needed.

    Key layout for namespace ``products`` and prefix ``shop``:
    - ``shop:products:doc:<id>``: the document as JSON
    - ``shop:products:index``: sorted set of ids scored by creation time
    """

    def __init__(
        self,
        namespace: str,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis document repository.

        Args:
            namespace: Resource namespace, e.g. "products" or "orders".
            redis_client: Redis client instance. If None, creates default.
            key_prefix: Prefix for every key. Defaults to settings.
        """
        self._client = redis_client or get_redis_client()
        self._namespace = namespace
        self._prefix = f"{key_prefix or settings.redis_key_prefix}:{namespace}"

    @classmethod
    def create(
        cls,
        namespace: str,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> "RedisDocumentRepository":
        """Factory method to create RedisDocumentRepository with defaults.

        Args:
            namespace: Resource namespace.
            redis_client: Shared client. If None, one is created from settings.
            key_prefix: Key prefix. If None, uses settings.

        Returns:
            Configured RedisDocumentRepository
        """
        return cls(namespace=namespace, redis_client=redis_client, key_prefix=key_prefix)

    def _key(self, doc_id: str) -> str:
        return f"{self._prefix}:doc:{doc_id}"

    @property
    def _index_key(self) -> str:
        return f"{self._prefix}:index"

    async def save(self, doc_id: str, document: Document) -> None:
        """Store a document, keeping its original position in the index.

        Args:
            doc_id: The document id
            document: The JSON object to store
        """
        async with self._client.pipeline(transaction=True) as pipe:
            pipe.set(self._key(doc_id), json.dumps(document))
            pipe.zadd(self._index_key, {doc_id: time.time()}, nx=True)
            await pipe.execute()

    async def load(self, doc_id: str) -> Document | None:
        """Load a document by id.

        Args:
            doc_id: The document id

        Returns:
            The decoded document, or None if absent
        """
        raw = await self._client.get(self._key(doc_id))
        if raw is None:
            return None
        return json.loads(raw)

    async def load_all(self) -> Sequence[Document]:
        """Load every document in insertion order.

        Ids left in the index after their document expired or was removed
        out of band are skipped.
        """
        ids = await self._client.zrange(self._index_key, 0, -1)
        if not ids:
            return []

        raws = await self._client.mget([self._key(doc_id) for doc_id in ids])
        documents = []
        for doc_id, raw in zip(ids, raws):
            if raw is None:
                logger.debug("Skipping dangling index entry %s:%s", self._namespace, doc_id)
                continue
            documents.append(json.loads(raw))
        return documents

    async def delete(self, doc_id: str) -> bool:
        """Delete a document and its index entry.

        Args:
            doc_id: The document id

        Returns:
            True if the document existed, False otherwise
        """
        async with self._client.pipeline(transaction=True) as pipe:
            pipe.delete(self._key(doc_id))
            pipe.zrem(self._index_key, doc_id)
            deleted, _ = await pipe.execute()
        return deleted > 0

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except RedisError as e:
            logger.warning("Redis health check failed: %s", e)
            return False
