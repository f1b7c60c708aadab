"""Shop API - products and orders over HTTP.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (ResourceStore, DocumentStore)
    - repositories: Data access implementations (Redis)
    - services: Products and orders collaborators
    - handlers: Request handlers and the error-forwarding adapter
    - dto: Data transfer objects (API contracts)
    - entities: Outcomes and documents (internal)

Usage:
    ```python
    from shop_api.handlers import build_handler_table
    from shop_api.services import OrderService, ProductService
    ```

For HTTP API:
    ```python
    from shop_api.api.app import app
    ```
"""

from shop_api.config import get_redis_client, settings
from shop_api.dto import HandlerRequest
from shop_api.entities import Err, NotFound, Ok, Outcome, StaticDocument
from shop_api.handlers import StoreHandler, auto_catch, build_handler_table
from shop_api.protocols import DocumentStore, ResourceStore
from shop_api.repositories import RedisDocumentRepository
from shop_api.services import OrderService, ProductService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "DocumentStore",
    "ResourceStore",
    # Services (collaborators)
    "ProductService",
    "OrderService",
    # Handlers
    "StoreHandler",
    "auto_catch",
    "build_handler_table",
    # Repositories (data access)
    "RedisDocumentRepository",
    # Entities
    "Ok",
    "NotFound",
    "Err",
    "Outcome",
    "StaticDocument",
    # DTOs
    "HandlerRequest",
]
