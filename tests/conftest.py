"""Pytest configuration for petsphere tests."""

import pytest

from petsphere import create_app
from petsphere.config import TestConfig
from petsphere.storage import MemStorage


@pytest.fixture
def storage():
    """A fresh, empty store."""
    return MemStorage()


@pytest.fixture
def chew_toy(storage):
    """The first product in the store (id=1)."""
    return storage.create_product({
        "name": "Chew Toy",
        "price": 12.99,
        "stock": 10,
        "category": "dog",
    })


@pytest.fixture
def fish_feeder(storage):
    """A product on sale."""
    return storage.create_product({
        "name": "Automatic Fish Feeder",
        "description": "Programmable feeding times for fish tanks.",
        "price": 19.99,
        "category": "fish",
        "subCategory": "accessory",
        "isFeatured": True,
        "isOnSale": True,
        "salePrice": 15.99,
        "stock": 25,
    })


@pytest.fixture
def app(storage):
    """Application bound to the test's store."""
    return create_app(TestConfig, storage=storage)


@pytest.fixture
def client(app):
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture
def registered_user(client):
    """Register a customer account and log the client back out."""
    response = client.post("/api/register", json={
        "username": "buddy",
        "password": "woof123",
        "email": "buddy@example.com",
        "firstName": "Buddy",
    })
    assert response.status_code == 201
    client.post("/api/logout")
    return response.get_json()


@pytest.fixture
def logged_in_client(client, registered_user):
    """Client holding an authenticated session for ``registered_user``."""
    response = client.post("/api/login", json={"username": "buddy", "password": "woof123"})
    assert response.status_code == 200
    return client


@pytest.fixture
def other_client(app):
    """A second client logged in as a different user."""
    other = app.test_client()
    response = other.post("/api/register", json={
        "username": "whiskers",
        "password": "meow456",
        "email": "whiskers@example.com",
    })
    assert response.status_code == 201
    return other


ORDER_PAYLOAD = {
    "total": 25.98,
    "paymentMethod": "card",
    "shippingAddress": "1 Bark Street",
    "billingAddress": "1 Bark Street",
    "shippingMethod": "standard",
}


@pytest.fixture
def order_payload():
    return dict(ORDER_PAYLOAD)
