"""Request handlers for products and orders.

Handlers turn a request descriptor into one collaborator call and wrap
the result in an Outcome. They never build HTTP responses, never emit
status codes, and never validate input beyond numeric coercion of
offset/limit.
"""

import math
import re
from typing import Any

from shop_api.config import settings
from shop_api.dto import HandlerRequest
from shop_api.entities import NotFound, Ok, Outcome, StaticDocument
from shop_api.protocols import ResourceStore

from .auto_catch import Handler, auto_catch


_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_INFINITY = re.compile(r"([+-]?)Infinity")
_RADIX = re.compile(r"0(?:([xX])([0-9a-fA-F]+)|([bB])([01]+)|([oO])([0-7]+))")


def to_number(value: str | None, default: int) -> int | float:
    """Coerce query text to a number the way JavaScript's ``Number()`` does.

    - None (parameter omitted) gives ``default``
    - empty or blank text gives 0
    - ASCII integer text gives an int, other decimal or exponent text a float
    - ``0x``/``0b``/``0o`` literals give an int, ``Infinity`` gives inf
    - anything else gives NaN, left for the collaborator to reject
    """
    if value is None:
        return default

    text = value.strip()
    if not text:
        return 0

    if _INTEGER.fullmatch(text):
        return int(text)
    if _DECIMAL.fullmatch(text):
        return float(text)

    infinity = _INFINITY.fullmatch(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf

    radix = _RADIX.fullmatch(text)
    if radix:
        if radix.group(2):
            return int(radix.group(2), 16)
        if radix.group(4):
            return int(radix.group(4), 2)
        return int(radix.group(6), 8)

    return math.nan


class StoreHandler:
    """Request handlers for the products and orders resources.

    Each operation takes a HandlerRequest and returns Ok, NotFound or,
    once wrapped by ``auto_catch``, Err.

    Example:
        ```python
        handler = StoreHandler(products=products, orders=orders, index=index)
        table = auto_catch(handler.as_mapping())
        outcome = await table["list_products"](HandlerRequest(query={"tag": "shoes"}))
        ```
    """

    def __init__(
        self,
        products: ResourceStore,
        orders: ResourceStore,
        index: StaticDocument,
    ) -> None:
        """Initialize the handler.

        Args:
            products: Products collaborator (required).
            orders: Orders collaborator (required).
            index: Document served for the root route.
        """
        self._products = products
        self._orders = orders
        self._index = index

    def _paging(self, request: HandlerRequest) -> dict[str, Any]:
        return {
            "offset": to_number(request.query.get("offset"), settings.default_offset),
            "limit": to_number(request.query.get("limit"), settings.default_limit),
        }

    def handle_root(self, request: HandlerRequest) -> Outcome:
        """Handle GET / by returning the static index document."""
        return Ok(self._index)

    async def list_products(self, request: HandlerRequest) -> Outcome:
        """Handle GET /products with offset, limit and tag."""
        products = await self._products.list(
            **self._paging(request),
            tag=request.query.get("tag"),
        )
        return Ok(products)

    async def get_product(self, request: HandlerRequest) -> Outcome:
        """Handle GET /products/{id}; an absent product defers as NotFound."""
        product = await self._products.get(request.params["id"])
        if not product:
            return NotFound()
        return Ok(product)

    async def create_product(self, request: HandlerRequest) -> Outcome:
        """Handle POST /products."""
        return Ok(await self._products.create(request.body))

    async def edit_product(self, request: HandlerRequest) -> Outcome:
        """Handle PUT /products/{id}."""
        return Ok(await self._products.edit(request.params["id"], request.body))

    async def delete_product(self, request: HandlerRequest) -> Outcome:
        """Handle DELETE /products/{id}."""
        return Ok(await self._products.destroy(request.params["id"]))

    async def list_orders(self, request: HandlerRequest) -> Outcome:
        """Handle GET /orders with offset, limit, productId and status."""
        orders = await self._orders.list(
            **self._paging(request),
            product_id=request.query.get("productId"),
            status=request.query.get("status"),
        )
        return Ok(orders)

    async def get_order(self, request: HandlerRequest) -> Outcome:
        """Handle GET /orders/{id}; an absent order defers as NotFound."""
        order = await self._orders.get(request.params["id"])
        if not order:
            return NotFound()
        return Ok(order)

    async def create_order(self, request: HandlerRequest) -> Outcome:
        """Handle POST /orders."""
        return Ok(await self._orders.create(request.body))

    async def edit_order(self, request: HandlerRequest) -> Outcome:
        """Handle PUT /orders/{id}."""
        return Ok(await self._orders.edit(request.params["id"], request.body))

    async def delete_order(self, request: HandlerRequest) -> Outcome:
        """Handle DELETE /orders/{id}."""
        return Ok(await self._orders.destroy(request.params["id"]))

    def as_mapping(self) -> dict[str, Handler]:
        """Return every operation keyed by its name."""
        return {
            "handle_root": self.handle_root,
            "list_products": self.list_products,
            "get_product": self.get_product,
            "create_product": self.create_product,
            "edit_product": self.edit_product,
            "delete_product": self.delete_product,
            "list_orders": self.list_orders,
            "get_order": self.get_order,
            "create_order": self.create_order,
            "edit_order": self.edit_order,
            "delete_order": self.delete_order,
        }


def build_handler_table(
    products: ResourceStore,
    orders: ResourceStore,
    index: StaticDocument,
) -> dict[str, Handler]:
    """Build the wrapped handler table once, at startup."""
    handler = StoreHandler(products=products, orders=orders, index=index)
    return auto_catch(handler.as_mapping())
