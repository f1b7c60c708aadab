"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services and the wrapped handler table built once in lifespan
    - Dependency functions retrieve them from request.app.state
    - No global mutable state after startup
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from shop_api.config import get_redis_client, settings
from shop_api.entities import StaticDocument
from shop_api.handlers import build_handler_table
from shop_api.handlers.auto_catch import Handler
from shop_api.logging import configure_logging
from shop_api.protocols import DocumentStore
from shop_api.repositories import RedisDocumentRepository
from shop_api.services import OrderService, ProductService

logger = logging.getLogger(__name__)

HandlerTable = dict[str, Handler]


def get_handlers(request: Request) -> HandlerTable:
    """Dependency injection for the wrapped handler table from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The handler table from app.state

    Raises:
        RuntimeError: If the table is not initialized
    """
    handlers = getattr(request.app.state, "handlers", None)
    if handlers is None:
        raise RuntimeError("Handler table not initialized. Check lifespan setup.")
    return handlers


def get_storage(request: Request) -> DocumentStore:
    """Dependency injection for a document store used by health checks.

    Raises:
        RuntimeError: If storage is not initialized
    """
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise RuntimeError("Storage not initialized. Check lifespan setup.")
    return storage


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repositories (data access), one per resource, sharing a client
    2. Services (collaborators) for products and orders
    3. Wrapped handler table - stored in app.state.handlers

    Cleanup:
        Removes everything from app.state and closes the Redis client
    """
    configure_logging(settings.log_level)

    client = get_redis_client()
    product_repository = RedisDocumentRepository.create("products", redis_client=client)
    order_repository = RedisDocumentRepository.create("orders", redis_client=client)

    products = ProductService.create_service(product_repository)
    orders = OrderService.create_service(order_repository)
    index = StaticDocument.from_path(settings.index_path)

    app.state.handlers = build_handler_table(products=products, orders=orders, index=index)
    app.state.storage = product_repository

    logger.info("Shop API initialized")
    logger.info("Redis: %s (prefix %s)", settings.redis_url, settings.redis_key_prefix)
    logger.info("Storage healthy: %s", await product_repository.health_check())

    yield

    del app.state.handlers
    del app.state.storage
    await client.aclose()
    logger.info("Shop API shut down")


# Type aliases for cleaner dependency injection
HandlersDep = Annotated[HandlerTable, Depends(get_handlers)]
StorageDep = Annotated[DocumentStore, Depends(get_storage)]
