"""Tests for /api/cart."""

import pytest


@pytest.fixture
def products(storage, chew_toy, fish_feeder):
    return chew_toy, fish_feeder


class TestCartAccess:

    def test_cart_requires_login(self, client):
        assert client.get("/api/cart").status_code == 401
        assert client.post("/api/cart", json={"productId": 1}).status_code == 401
        assert client.delete("/api/cart").status_code == 401


class TestCartFlow:

    def test_add_twice_merges(self, logged_in_client, products):
        chew_toy, _ = products
        first = logged_in_client.post("/api/cart", json={"productId": chew_toy.id, "quantity": 2})
        second = logged_in_client.post("/api/cart", json={"productId": chew_toy.id, "quantity": 3})

        assert first.status_code == second.status_code == 201
        assert first.get_json()["id"] == second.get_json()["id"]

        cart = logged_in_client.get("/api/cart").get_json()
        assert len(cart) == 1
        assert cart[0]["quantity"] == 5
        assert cart[0]["product"]["name"] == "Chew Toy"

    def test_user_id_in_body_is_ignored(self, logged_in_client, products, registered_user):
        chew_toy, _ = products

        response = logged_in_client.post("/api/cart", json={"productId": chew_toy.id, "userId": 999})

        assert response.get_json()["userId"] == registered_user["id"]

    def test_unknown_product(self, logged_in_client):
        response = logged_in_client.post("/api/cart", json={"productId": 404, "quantity": 1})

        assert response.status_code == 400
        assert response.get_json()["message"] == "Product not found: 404"

    def test_invalid_quantity(self, logged_in_client, products):
        chew_toy, _ = products

        response = logged_in_client.post("/api/cart", json={"productId": chew_toy.id, "quantity": 0})

        assert response.status_code == 400

    def test_summary(self, logged_in_client, products):
        chew_toy, fish_feeder = products
        logged_in_client.post("/api/cart", json={"productId": chew_toy.id, "quantity": 2})
        logged_in_client.post("/api/cart", json={"productId": fish_feeder.id, "quantity": 1})

        summary = logged_in_client.get("/api/cart/summary").get_json()

        assert summary["itemCount"] == 3
        assert summary["total"] == pytest.approx(41.97)

    def test_update_quantity(self, logged_in_client, products):
        chew_toy, _ = products
        row = logged_in_client.post("/api/cart", json={"productId": chew_toy.id}).get_json()

        response = logged_in_client.put(f"/api/cart/{row['id']}", json={"quantity": 4})

        assert response.status_code == 200
        assert response.get_json()["quantity"] == 4

    @pytest.mark.parametrize("quantity", [0, -2, "3", None, True])
    def test_update_rejects_bad_quantity(self, logged_in_client, products, quantity):
        chew_toy, _ = products
        row = logged_in_client.post("/api/cart", json={"productId": chew_toy.id}).get_json()

        response = logged_in_client.put(f"/api/cart/{row['id']}", json={"quantity": quantity})

        assert response.status_code == 400

    def test_update_missing_row(self, logged_in_client):
        response = logged_in_client.put("/api/cart/99", json={"quantity": 2})

        assert response.status_code == 404

    def test_remove_row(self, logged_in_client, products):
        chew_toy, _ = products
        row = logged_in_client.post("/api/cart", json={"productId": chew_toy.id}).get_json()

        assert logged_in_client.delete(f"/api/cart/{row['id']}").status_code == 204
        assert logged_in_client.delete(f"/api/cart/{row['id']}").status_code == 404
        assert logged_in_client.get("/api/cart").get_json() == []

    def test_clear(self, logged_in_client, products):
        chew_toy, fish_feeder = products
        logged_in_client.post("/api/cart", json={"productId": chew_toy.id})
        logged_in_client.post("/api/cart", json={"productId": fish_feeder.id})

        assert logged_in_client.delete("/api/cart").status_code == 204
        assert logged_in_client.get("/api/cart").get_json() == []
        assert logged_in_client.delete("/api/cart").status_code == 204

    def test_dangling_product_is_a_server_error(self, logged_in_client, products, storage):
        chew_toy, _ = products
        logged_in_client.post("/api/cart", json={"productId": chew_toy.id})
        storage.delete_product(chew_toy.id)

        response = logged_in_client.get("/api/cart")

        assert response.status_code == 500
        assert response.get_json() == {"message": "Server error"}


class TestCartOwnership:

    def test_cannot_touch_another_users_row(self, logged_in_client, other_client, products):
        chew_toy, _ = products
        row = other_client.post("/api/cart", json={"productId": chew_toy.id}).get_json()

        assert logged_in_client.put(f"/api/cart/{row['id']}", json={"quantity": 9}).status_code == 404
        assert logged_in_client.delete(f"/api/cart/{row['id']}").status_code == 404
        assert other_client.get("/api/cart").get_json()[0]["quantity"] == 1
