"""
Shared fixtures for the shop API tests.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from shop_api.api.app import app
from shop_api.api.dependencies import get_handlers, get_storage
from shop_api.entities import Document, StaticDocument
from shop_api.handlers import StoreHandler, build_handler_table
from shop_api.services import OrderService, ProductService


class InMemoryDocumentStore:
    """DocumentStore backed by a dict; insertion order is listing order."""

    def __init__(self) -> None:
        self.documents: dict[str, Document] = {}
        self.healthy = True

    async def save(self, doc_id: str, document: Document) -> None:
        self.documents[doc_id] = document

    async def load(self, doc_id: str) -> Document | None:
        return self.documents.get(doc_id)

    async def load_all(self) -> list[Document]:
        return list(self.documents.values())

    async def delete(self, doc_id: str) -> bool:
        return self.documents.pop(doc_id, None) is not None

    async def health_check(self) -> bool:
        return self.healthy


@pytest.fixture
def memory_store():
    return InMemoryDocumentStore()


@pytest.fixture
def product_service(memory_store):
    return ProductService.create_service(memory_store)


@pytest.fixture
def order_service():
    return OrderService.create_service(InMemoryDocumentStore())


@pytest.fixture
def index_document():
    return StaticDocument(content=b"<h1>Shop</h1>", media_type="text/html")


@pytest.fixture
def mock_products():
    """Products collaborator double; every method is an AsyncMock."""
    return AsyncMock()


@pytest.fixture
def mock_orders():
    """Orders collaborator double; every method is an AsyncMock."""
    return AsyncMock()


@pytest.fixture
def store_handler(mock_products, mock_orders, index_document):
    return StoreHandler(products=mock_products, orders=mock_orders, index=index_document)


@pytest.fixture
def handler_table(mock_products, mock_orders, index_document):
    return build_handler_table(products=mock_products, orders=mock_orders, index=index_document)


@pytest.fixture
def client(handler_table, memory_store):
    """Create a test client wired to mocked collaborators."""
    app.dependency_overrides[get_handlers] = lambda: handler_table
    app.dependency_overrides[get_storage] = lambda: memory_store
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
