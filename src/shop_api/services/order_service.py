"""Orders collaborator."""

from typing import Any

from shop_api.entities import Document

from .resource_service import ResourceService

DEFAULT_STATUS = "CREATED"


class OrderService(ResourceService):
    """Orders backed by a DocumentStore.

    New orders get ``status="CREATED"`` unless the payload sets one.

    Supported filters:
    - ``product_id``: equals the order's ``productId`` or is in its ``products`` list
    - ``status``: equals the order's ``status``
    """

    resource_name = "Order"

    def apply_defaults(self, document: Document) -> Document:
        document.setdefault("status", DEFAULT_STATUS)
        return document

    def matches(self, document: Document, filters: dict[str, Any]) -> bool:
        product_id = filters.get("product_id")
        if product_id is not None:
            products = document.get("products") or []
            if document.get("productId") != product_id and product_id not in products:
                return False

        status = filters.get("status")
        if status is not None and document.get("status") != status:
            return False

        return True
