"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis -> PostgreSQL, etc.)
- Unit testing with in-memory or mock implementations
- Clear separation of concerns

Usage:
    ```python
    from shop_api.protocols import DocumentStore, ResourceStore

    repo: DocumentStore = RedisDocumentRepository.create("products", redis_client=client)
    products: ResourceStore = ProductService.create_service(repo)
    ```
"""

from .document_store import DocumentStore
from .resource_store import ResourceStore

__all__ = [
    "DocumentStore",
    "ResourceStore",
]
