#!/usr/bin/env python3
"""
Demo script for the shop API collaborators.

Seeds a few products and orders into Redis through the services, then
runs the same handler table the HTTP app uses.
"""

import asyncio

from shop_api.config import get_redis_client, settings
from shop_api.dto import HandlerRequest
from shop_api.entities import StaticDocument
from shop_api.handlers import build_handler_table
from shop_api.repositories import RedisDocumentRepository
from shop_api.services import OrderService, ProductService


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def main() -> None:
    """Seed data and exercise the handlers."""
    client = get_redis_client()
    products = ProductService.create_service(
        RedisDocumentRepository.create("products", redis_client=client)
    )
    orders = OrderService.create_service(
        RedisDocumentRepository.create("orders", redis_client=client)
    )
    handlers = build_handler_table(
        products=products,
        orders=orders,
        index=StaticDocument.from_path(settings.index_path),
    )

    try:
        print_section("Seeding products")
        shoes = await products.create({"description": "Running shoes", "tags": ["shoes", "sport"]})
        mug = await products.create({"description": "Coffee mug", "tags": ["kitchen"]})
        for product in (shoes, mug):
            print(f"  + {product['_id']}  {product['description']}")

        print_section("Seeding orders")
        order = await orders.create({"buyerEmail": "demo@example.com", "products": [shoes["_id"]]})
        print(f"  + {order['_id']}  status={order['status']}")

        print_section("Handlers")
        outcome = await handlers["list_products"](HandlerRequest(query={"tag": "shoes"}))
        print(f"  list_products?tag=shoes -> {outcome}")
        outcome = await handlers["get_order"](HandlerRequest(params={"id": "missing"}))
        print(f"  get_order(missing)       -> {outcome}")
        outcome = await handlers["list_orders"](HandlerRequest(query={"limit": "abc"}))
        print(f"  list_orders?limit=abc    -> {outcome}")

    except Exception as e:
        print(f"\n❌ Error: {e}")
        print("\nMake sure Redis is running:")
        print("  docker compose up -d")
        print("\nOr set REDIS_URL to your Redis instance.")
    finally:
        await client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
