"""Repository layer for data access.

This layer hides the storage backend behind the DocumentStore protocol.
The repositories are protocol-based (structural typing), not
inheritance-based: any class implementing the required methods will
satisfy the protocol.
"""

from shop_api.protocols import DocumentStore

from .redis_repository import RedisDocumentRepository

__all__ = [
    "DocumentStore",
    "RedisDocumentRepository",
]
