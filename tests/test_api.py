"""
Tests for the shop HTTP API.

The handler table is real; collaborators are AsyncMocks.
"""

from redis.exceptions import ConnectionError as RedisConnectionError

from shop_api.errors import InvalidQueryError, ResourceNotFoundError


def test_root(client, index_document):
    """Test root endpoint serves the index document."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.content == index_document.content
    assert response.headers["content-type"].startswith("text/html")


def test_health(client, memory_store):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "storage_healthy": True}

    memory_store.healthy = False
    response = client.get("/health")
    assert response.status_code == 503
    assert response.json()["storage_healthy"] is False


def test_list_products_with_tag_and_limit(client, mock_products):
    products = [{"_id": "1", "tags": ["shoes"]}]
    mock_products.list.return_value = products

    response = client.get("/products?tag=shoes&limit=10")

    assert response.status_code == 200
    assert response.json() == products
    mock_products.list.assert_awaited_once_with(offset=0, limit=10, tag="shoes")


def test_get_product_missing_is_404(client, mock_products):
    mock_products.get.return_value = None

    response = client.get("/products/42")

    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}
    mock_products.get.assert_awaited_once_with("42")


def test_get_product_found(client, mock_products):
    product = {"_id": "42", "description": "Shoes", "price": 10.5}
    mock_products.get.return_value = product

    response = client.get("/products/42")

    assert response.status_code == 200
    assert response.json() == product


def test_create_order(client, mock_orders):
    created = {"_id": "o1", "productId": "42", "qty": 3, "status": "CREATED"}
    mock_orders.create.return_value = created

    response = client.post("/orders", json={"productId": "42", "qty": 3})

    assert response.status_code == 200
    assert response.json() == created
    mock_orders.create.assert_awaited_once_with({"productId": "42", "qty": 3})


def test_delete_product(client, mock_products):
    mock_products.destroy.return_value = {"success": True}

    response = client.delete("/products/7")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    mock_products.destroy.assert_awaited_once_with("7")


def test_edit_product(client, mock_products):
    mock_products.edit.return_value = {"_id": "7", "description": "New"}

    response = client.put("/products/7", json={"description": "New"})

    assert response.status_code == 200
    assert response.json() == {"_id": "7", "description": "New"}
    mock_products.edit.assert_awaited_once_with("7", {"description": "New"})


def test_list_orders_filters(client, mock_orders):
    mock_orders.list.return_value = []

    response = client.get("/orders?productId=42&status=PENDING&offset=5")

    assert response.status_code == 200
    assert response.json() == []
    mock_orders.list.assert_awaited_once_with(
        offset=5, limit=25, product_id="42", status="PENDING"
    )


def test_get_order_missing_is_404(client, mock_orders):
    mock_orders.get.return_value = None

    assert client.get("/orders/9").status_code == 404


def test_invalid_query_is_400(client, mock_products):
    mock_products.list.side_effect = InvalidQueryError("limit", float("nan"))

    response = client.get("/products?limit=lots")

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid query"


def test_edit_missing_is_404(client, mock_orders):
    mock_orders.edit.side_effect = ResourceNotFoundError("Order", "9")

    response = client.put("/orders/9", json={"status": "COMPLETED"})

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found", "detail": "Order '9' not found"}


def test_storage_outage_is_503(client, mock_products):
    mock_products.list.side_effect = RedisConnectionError("refused")

    response = client.get("/products")

    assert response.status_code == 503
    assert response.json()["error"] == "Storage unavailable"


def test_unexpected_error_is_500_without_internals(client, mock_orders):
    mock_orders.destroy.side_effect = RuntimeError("secret internals")

    response = client.delete("/orders/1")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error", "detail": None}
    assert mock_orders.destroy.await_count == 1


def test_malformed_json_is_400(client, mock_products):
    response = client.post(
        "/products",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {
        "error": "Malformed body",
        "detail": "Request body is not valid JSON",
    }
    mock_products.create.assert_not_awaited()


def test_unknown_route_is_404(client):
    assert client.get("/customers").status_code == 404
