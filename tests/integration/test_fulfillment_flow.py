"""End-to-end fulfillment through the assembled application.

Requests go through the real app, so the domain-context middleware and the
error handlers are part of what is tested.
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client():
    from app import app

    return TestClient(app)


def _seed(client, sku, price, available, threshold):
    response = client.post("/orders/catalogue/products", json={"sku": sku, "name": sku.title(), "price": price})
    assert response.status_code == 201
    response = client.post("/inventory", json={"sku": sku, "available": available, "threshold": threshold})
    assert response.status_code == 201


def _order(client, *items):
    response = client.post("/orders", json={"items": [{"sku": sku, "quantity": qty} for sku, qty in items]})
    assert response.status_code == 201
    return response.json()["id"]


class TestHealth:
    def test_health_lists_domains(self, client):
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert set(body["domains"]) == {"ordering", "payments", "inventory"}


class TestFulfillmentFlow:
    def test_paid_order_deducts_stock(self, client):
        _seed(client, "SKU-001", 29.99, available=100, threshold=10)
        order_id = _order(client, ("SKU-001", 2))

        order = client.post(f"/orders/{order_id}/pay").json()

        assert order["status"] == "Paid"
        assert client.get("/inventory/SKU-001").json()["available"] == 98
        payments = client.get(f"/payments/order/{order_id}").json()
        assert [payment["status"] for payment in payments] == ["Success"]
        assert payments[0]["id"] == order["payment_id"]
        assert client.get("/inventory/alerts/count").json() == {"count": 0}

    def test_shortfall_cancels_and_records_alerts(self, client):
        _seed(client, "SKU-001", 29.99, available=1, threshold=0)
        _seed(client, "SKU-002", 10.00, available=6, threshold=5)
        order_id = _order(client, ("SKU-002", 1), ("SKU-001", 2))

        order = client.post(f"/orders/{order_id}/pay").json()

        assert order["status"] == "Cancelled"
        assert order["cancellation_reason"] == "Insufficient inventory to fulfill order"
        assert client.get("/inventory/SKU-002").json()["available"] == 5
        assert client.get("/inventory/SKU-001").json()["available"] == 1
        assert [alert["sku"] for alert in client.get("/inventory/alerts").json()] == ["SKU-002"]
        assert client.get(f"/payments/order/{order_id}").json()[0]["status"] == "Success"

    def test_declined_order_leaves_stock(self, client):
        _seed(client, "SKU-001", 29.99, available=100, threshold=10)
        order_id = _order(client, ("SKU-001", 1))

        order = client.post(f"/orders/{order_id}/pay").json()

        assert order["status"] == "Created"
        assert order["cancellation_reason"] == "Payment failed"
        assert client.get("/inventory/SKU-001").json()["available"] == 100
