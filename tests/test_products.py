"""
Tests for the /products endpoints.
"""
from fastapi.testclient import TestClient


class TestCreateProduct:
    def test_create_returns_201_with_category(self, client: TestClient, category):
        response = client.post(
            "/products",
            json={"name": "Go Guide", "price": 29.99, "category_id": category["id"]},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["name"] == "Go Guide"
        assert data["description"] == ""
        assert data["price"] == 29.99
        assert data["category_id"] == category["id"]
        assert data["category"]["id"] == category["id"]
        assert data["category"]["name"] == "Books"
        assert data["created_at"] == data["updated_at"]

    def test_create_with_unknown_category_is_404(self, client: TestClient):
        response = client.post(
            "/products",
            json={"name": "Orphan", "price": 1.0, "category_id": 99},
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Category not found"
        assert client.get("/products").json() == []

    def test_create_without_name_uses_defaults(self, client: TestClient, category):
        response = client.post(
            "/products", json={"price": 1.0, "category_id": category["id"]}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == ""
        assert data["description"] == ""
        assert data["price"] == 1.0

    def test_unknown_keys_are_ignored(self, client: TestClient, category):
        response = client.post(
            "/products",
            json={
                "id": 40,
                "name": "Go Guide",
                "price": 29.99,
                "category_id": category["id"],
                "category": {"id": 7, "name": "Ignored"},
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["category"]["name"] == "Books"

    def test_create_without_category_is_malformed(self, client: TestClient):
        response = client.post("/products", json={"name": "No category"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Malformed request"

    def test_negative_price_is_rejected(self, client: TestClient, category):
        response = client.post(
            "/products",
            json={"name": "Bad", "price": -1, "category_id": category["id"]},
        )

        assert response.status_code == 400


class TestGetProduct:
    def test_get_returns_created_fields(self, client: TestClient, product):
        response = client.get(f"/products/{product['id']}")

        assert response.status_code == 200
        assert response.json() == product

    def test_missing_product_is_404(self, client: TestClient):
        response = client.get("/products/42")

        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found"

    def test_non_integer_id_is_malformed(self, client: TestClient):
        response = client.get("/products/abc")

        assert response.status_code == 400


class TestListProducts:
    def test_empty_list(self, client: TestClient):
        response = client.get("/products")

        assert response.status_code == 200
        assert response.json() == []

    def test_lists_all_with_category(self, client: TestClient, category):
        for name in ("A", "B", "C"):
            client.post(
                "/products",
                json={"name": name, "price": 1.5, "category_id": category["id"]},
            )

        data = client.get("/products").json()

        assert [p["name"] for p in data] == ["A", "B", "C"]
        assert all(p["category"]["name"] == "Books" for p in data)


class TestUpdateProduct:
    def test_overlay_keeps_unset_fields(self, client: TestClient, product):
        response = client.put(f"/products/{product['id']}", json={"price": 19.5})

        assert response.status_code == 200
        data = response.json()
        assert data["price"] == 19.5
        assert data["name"] == product["name"]
        assert data["description"] == product["description"]
        assert data["category_id"] == product["category_id"]
        assert data["created_at"] == product["created_at"]
        assert data["updated_at"] >= product["updated_at"]

    def test_fetched_record_can_be_put_back(self, client: TestClient, product):
        record = client.get(f"/products/{product['id']}").json()
        record["name"] = "Go Guide, 2nd ed."

        response = client.put(f"/products/{product['id']}", json=record)

        assert response.status_code == 200
        assert response.json()["name"] == "Go Guide, 2nd ed."
        assert response.json()["id"] == product["id"]

    def test_move_to_another_category(self, client: TestClient, product):
        other = client.post("/categories", json={"name": "Games"}).json()

        response = client.put(
            f"/products/{product['id']}", json={"category_id": other["id"]}
        )

        assert response.status_code == 200
        assert response.json()["category"]["name"] == "Games"

    def test_move_to_unknown_category_is_404(self, client: TestClient, product):
        response = client.put(f"/products/{product['id']}", json={"category_id": 77})

        assert response.status_code == 404
        assert client.get(f"/products/{product['id']}").json() == product

    def test_missing_product_is_404_and_creates_nothing(self, client: TestClient, category):
        response = client.put(
            "/products/5", json={"name": "Ghost", "category_id": category["id"]}
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found"
        assert client.get("/products").json() == []


class TestDeleteProduct:
    def test_delete_existing(self, client: TestClient, product):
        response = client.delete(f"/products/{product['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/products/{product['id']}").status_code == 404

    def test_delete_missing_is_still_204(self, client: TestClient):
        response = client.delete("/products/123")

        assert response.status_code == 204
        assert client.get("/products/123").status_code == 404

    def test_delete_drops_cart_membership(self, client: TestClient, product, cart):
        client.post(f"/carts/{cart['id']}/products", json={"product_id": product["id"]})

        client.delete(f"/products/{product['id']}")

        assert client.get(f"/carts/{cart['id']}").json()["products"] == []

    def test_category_survives_product_delete(self, client: TestClient, product):
        client.delete(f"/products/{product['id']}")

        response = client.get(f"/categories/{product['category_id']}")

        assert response.status_code == 200
        assert response.json()["products"] == []
