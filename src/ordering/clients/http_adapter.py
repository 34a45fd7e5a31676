"""HTTP adapters for the catalogue, payments and inventory services.

Built on ``httpx.Client``. Callers may pass their own client (tests use
``httpx.MockTransport``); otherwise one is created for the base URL.
"""

import httpx

from ordering.clients.port import (
    CataloguePort,
    DeductionOutcome,
    InventoryPort,
    PaymentReceipt,
    PaymentsPort,
    Product,
)
from ordering.clients.retry import RetryPolicy
from shared.errors import OrchestrationError

DEFAULT_TIMEOUT = 5.0


class _HttpCollaborator:
    name = "collaborator"

    def __init__(self, base_url: str, client: httpx.Client | None = None, retry: RetryPolicy | None = None) -> None:
        self.client = client or httpx.Client(base_url=base_url, timeout=DEFAULT_TIMEOUT)
        self.retry = retry or RetryPolicy()

    def _unexpected(self, response: httpx.Response) -> OrchestrationError:
        return OrchestrationError(
            f"{self.name} returned unexpected status {response.status_code}",
            collaborator=self.name,
            status_code=response.status_code,
        )

    def close(self) -> None:
        self.client.close()


class HttpCatalogue(_HttpCollaborator, CataloguePort):
    name = "catalogue"

    def get_by_sku(self, sku: str) -> Product | None:
        response = self.retry.call(self.name, lambda: self.client.get(f"/products/sku/{sku}"))
        if response.status_code == 404:
            return None
        if response.status_code != 200:
            raise self._unexpected(response)

        body = response.json()
        return Product(sku=body.get("sku", sku), name=body.get("name", ""), price=float(body["price"]))


class HttpPayments(_HttpCollaborator, PaymentsPort):
    name = "payments"

    def charge(self, order_id: str, amount: float, method: str) -> PaymentReceipt:
        payload = {"order_id": order_id, "amount": amount, "method": method}
        response = self.retry.call(self.name, lambda: self.client.post("/payments/process", json=payload))
        if response.status_code not in (200, 201):
            raise self._unexpected(response)

        body = response.json()
        status = body.get("status")
        return PaymentReceipt(
            payment_id=str(body["id"]) if body.get("id") is not None else None,
            success=str(status).lower() == "success",
            status=status,
        )


class HttpInventory(_HttpCollaborator, InventoryPort):
    name = "inventory"

    def deduct(self, sku: str, quantity: int) -> DeductionOutcome:
        payload = {"quantity": quantity}
        response = self.retry.call(self.name, lambda: self.client.post(f"/inventory/{sku}/deduct", json=payload))
        if response.status_code == 200:
            return DeductionOutcome.DEDUCTED
        if response.status_code == 404:
            return DeductionOutcome.SKU_NOT_FOUND
        if response.status_code == 409:
            return DeductionOutcome.INSUFFICIENT_STOCK
        raise self._unexpected(response)
