import time

from product_service.bootstrap import SEED_PRODUCTS


def _create(client, **overrides):
    payload = {"name": "X", "category": "Y", "quantity": 1, "price": 1}
    payload.update(overrides)
    r = client.post("/api/products", json=payload)
    assert r.status_code == 200, r.text
    return r.json()["id"]


def test_startup_seeds_sample_products(client):
    r = client.get("/api/products")
    assert r.status_code == 200

    data = r.json()
    assert len(data) == len(SEED_PRODUCTS) == 5
    assert {p["name"] for p in data} == {p["name"] for p in SEED_PRODUCTS}

    laptop = next(p for p in data if p["name"] == "Laptop Pro")
    assert laptop["category"] == "Electronics"
    assert laptop["quantity"] == 15
    assert laptop["price"] == 1299.99
    assert laptop["description"] == "High-performance laptop"


def test_create_then_get_round_trip(client):
    r = client.post("/api/products", json={"name": "X", "category": "Y", "quantity": 1, "price": 1})
    assert r.status_code == 200
    body = r.json()
    assert isinstance(body["id"], int)
    assert body["message"] == "Product created successfully"

    r = client.get(f"/api/products/{body['id']}")
    assert r.status_code == 200
    product = r.json()
    assert product["name"] == "X"
    assert product["category"] == "Y"
    assert product["quantity"] == 1
    assert product["price"] == 1
    assert product["description"] is None
    assert product["created_at"] and product["updated_at"]


def test_created_product_is_listed_first(client):
    product_id = _create(client, name="Standing Desk", price=349.5, description="Adjustable")

    data = client.get("/api/products").json()
    assert len(data) == 6
    assert data[0]["id"] == product_id
    assert data[0]["price"] == 349.5
    assert data[0]["description"] == "Adjustable"


def test_create_accepts_zero_quantity_and_price(client):
    product_id = _create(client, quantity=0, price=0)

    product = client.get(f"/api/products/{product_id}").json()
    assert product["quantity"] == 0
    assert product["price"] == 0


def test_create_without_name_returns_400_and_creates_nothing(client):
    r = client.post("/api/products", json={"category": "Y", "quantity": 1, "price": 1})
    assert r.status_code == 400
    assert r.json()["detail"] == "Missing required fields"

    assert len(client.get("/api/products").json()) == 5


def test_create_with_empty_name_returns_400(client):
    r = client.post("/api/products", json={"name": "", "category": "Y", "quantity": 1, "price": 1})
    assert r.status_code == 400
    assert r.json()["detail"] == "Missing required fields"


def test_create_without_price_returns_400(client):
    r = client.post("/api/products", json={"name": "X", "category": "Y", "quantity": 1})
    assert r.status_code == 400


def test_create_with_invalid_quantity_returns_400(client):
    r = client.post("/api/products", json={"name": "X", "category": "Y", "quantity": "many", "price": 1})
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid request"


def test_get_unknown_product_returns_404(client):
    r = client.get("/api/products/999999")
    assert r.status_code == 404
    assert r.json()["detail"] == "Product not found"


def test_get_with_non_integer_id_returns_400(client):
    r = client.get("/api/products/abc")
    assert r.status_code == 400


def test_update_replaces_all_fields(client):
    product_id = _create(client, description="old")

    r = client.put(
        f"/api/products/{product_id}",
        json={"name": "Renamed", "category": "Tools", "quantity": 7, "price": 19.95, "description": "new"},
    )
    assert r.status_code == 200
    assert r.json() == {"message": "Product updated successfully"}

    product = client.get(f"/api/products/{product_id}").json()
    assert product["name"] == "Renamed"
    assert product["category"] == "Tools"
    assert product["quantity"] == 7
    assert product["price"] == 19.95
    assert product["description"] == "new"
    assert product["updated_at"] >= product["created_at"]


def test_update_clears_omitted_description(client):
    product_id = _create(client, description="to be cleared")

    r = client.put(
        f"/api/products/{product_id}",
        json={"name": "X", "category": "Y", "quantity": 1, "price": 1},
    )
    assert r.status_code == 200
    assert client.get(f"/api/products/{product_id}").json()["description"] is None


def test_update_unknown_product_returns_404_without_mutation(client):
    before = client.get("/api/products").json()

    r = client.put(
        "/api/products/999999",
        json={"name": "Ghost", "category": "None", "quantity": 1, "price": 1},
    )
    assert r.status_code == 404
    assert r.json()["detail"] == "Product not found"
    assert client.get("/api/products").json() == before


def test_update_missing_required_column_returns_500(client):
    product_id = _create(client)

    r = client.put(f"/api/products/{product_id}", json={"category": "Y", "quantity": 1, "price": 1})
    assert r.status_code == 500
    body = r.json()
    assert body["detail"] == "Internal server error"
    assert body["error"]


def test_delete_removes_product(client):
    product_id = _create(client)

    r = client.delete(f"/api/products/{product_id}")
    assert r.status_code == 200
    assert r.json() == {"message": "Product deleted successfully"}

    assert client.get(f"/api/products/{product_id}").status_code == 404
    assert product_id not in [p["id"] for p in client.get("/api/products").json()]


def test_delete_unknown_product_returns_404(client):
    r = client.delete("/api/products/999999")
    assert r.status_code == 404


def test_put_after_delete_returns_404(client):
    product_id = _create(client)
    assert client.delete(f"/api/products/{product_id}").status_code == 200

    r = client.put(
        f"/api/products/{product_id}",
        json={"name": "X", "category": "Y", "quantity": 1, "price": 1},
    )
    assert r.status_code == 404


def test_cors_allows_any_origin(client):
    r = client.get("/api/products", headers={"Origin": "http://example.com"})
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


def test_update_refreshes_updated_at_and_keeps_created_at(client):
    product_id = _create(client)
    before = client.get(f"/api/products/{product_id}").json()

    # SQLite CURRENT_TIMESTAMP has one-second resolution
    time.sleep(1.1)
    r = client.put(
        f"/api/products/{product_id}",
        json={"name": "X2", "category": "Y", "quantity": 2, "price": 2},
    )
    assert r.status_code == 200

    after = client.get(f"/api/products/{product_id}").json()
    assert after["created_at"] == before["created_at"]
    assert after["updated_at"] > before["updated_at"]


def test_update_with_invalid_quantity_returns_400(client):
    product_id = _create(client)

    r = client.put(
        f"/api/products/{product_id}",
        json={"name": "X", "category": "Y", "quantity": "many", "price": 1},
    )
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid request"
    assert client.get(f"/api/products/{product_id}").json()["quantity"] == 1
