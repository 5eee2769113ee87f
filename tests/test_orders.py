"""Tests for the order endpoints."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from shop_common import messages
from shop_common.infra import Database

pytestmark = pytest.mark.unit


def _order_count(database: Database) -> int:
    return len(asyncio.run(database.orders.find()))


def test_create_order(client: TestClient, database: Database, add_user, add_product) -> None:
    user = add_user()
    product = add_product()

    response = client.post("/create-order", json={"userId": user["id"], "productId": product["id"]})

    assert response.status_code == 201
    assert response.json() == {"message": messages.ORDER_CREATED}
    [order] = asyncio.run(database.orders.find())
    assert order["userId"] == user["id"]
    assert order["productId"] == product["id"]
    assert order["createdAt"] == order["updatedAt"]


def test_create_order_unknown_user(client: TestClient, database: Database, add_product) -> None:
    product = add_product()

    response = client.post("/create-order", json={"userId": "missing", "productId": product["id"]})

    assert response.status_code == 400
    assert response.json() == {"message": messages.USER_NOT_FOUND}
    assert _order_count(database) == 0


def test_create_order_unknown_product(client: TestClient, database: Database, add_user) -> None:
    user = add_user()

    response = client.post("/create-order", json={"userId": user["id"], "productId": "missing"})

    assert response.status_code == 400
    assert response.json() == {"message": messages.PRODUCT_NOT_FOUND}
    assert _order_count(database) == 0


def test_create_order_requires_both_references(client: TestClient) -> None:
    response = client.post("/create-order", json={"userId": "someone"})

    assert response.status_code == 422


def test_order_details_join(client: TestClient, database: Database, add_user, add_product) -> None:
    user = add_user(password="hunter2")
    product = add_product()
    client.post("/create-order", json={"userId": user["id"], "productId": product["id"]})
    [order] = asyncio.run(database.orders.find())

    response = client.get(f"/order-details/{order['id']}")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == order["id"]
    assert data["userId"] == user["id"]
    assert data["productId"] == product["id"]
    assert "createdAt" in data and "updatedAt" in data
    assert "password" not in data["userDetails"]
    assert data["userDetails"] == {
        "id": user["id"],
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane.doe@example.com",
    }
    assert data["productDetails"] == product


def test_order_details_unknown_order(client: TestClient) -> None:
    response = client.get("/order-details/missing")

    assert response.status_code == 404
    assert response.json() == {"message": messages.ORDER_NOT_FOUND}


def test_order_details_after_product_deleted(client: TestClient, database: Database, add_user, add_product) -> None:
    user = add_user()
    product = add_product()
    client.post("/create-order", json={"userId": user["id"], "productId": product["id"]})
    [order] = asyncio.run(database.orders.find())

    client.delete(f"/products/{product['id']}")

    assert _order_count(database) == 1
    assert client.get(f"/order-details/{order['id']}").status_code == 404


def test_order_details_with_unvalidated_stored_email(
    client: TestClient, database: Database, add_user, add_product
) -> None:
    user = add_user(email="not-an-email")
    product = add_product()
    client.post("/create-order", json={"userId": user["id"], "productId": product["id"]})
    [order] = asyncio.run(database.orders.find())

    response = client.get(f"/order-details/{order['id']}")

    assert response.status_code == 200
    assert response.json()["userDetails"]["email"] == "not-an-email"
