"""Products collaborator."""

from typing import Any

from shop_api.entities import Document

from .resource_service import ResourceService


class ProductService(ResourceService):
    """Products backed by a DocumentStore.

    Supported filters:
    - ``tag``: the product's ``tags`` list contains this value
    """

    resource_name = "Product"

    def matches(self, document: Document, filters: dict[str, Any]) -> bool:
        tag = filters.get("tag")
        if tag is not None:
            tags = document.get("tags") or []
            return isinstance(tags, list) and tag in tags
        return True
