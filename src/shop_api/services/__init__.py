"""Service layer for business logic.

These are the products and orders collaborators the request handlers
delegate to. Services depend on the DocumentStore protocol, not on
Redis directly.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from shop_api.repositories import RedisDocumentRepository
    from shop_api.services import ProductService

    products = ProductService.create_service(RedisDocumentRepository.create("products"))
    ```
"""

from .order_service import OrderService
from .product_service import ProductService
from .resource_service import ResourceService

__all__ = [
    "ResourceService",
    "ProductService",
    "OrderService",
]
