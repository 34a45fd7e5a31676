"""Collaborator ports (abstract interfaces).

The fulfillment saga talks to the product catalogue, the payments context
and the inventory context only through these contracts. Adapters decide
whether a call stays in-process or goes over HTTP.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Product:
    """Catalogue entry as seen by ordering."""

    sku: str
    name: str
    price: float


@dataclass(frozen=True)
class PaymentReceipt:
    """Reference and outcome of one charge."""

    payment_id: str | None
    success: bool
    status: str | None = None


class DeductionOutcome(Enum):
    DEDUCTED = "Deducted"
    INSUFFICIENT_STOCK = "Insufficient_Stock"
    SKU_NOT_FOUND = "Sku_Not_Found"


class CataloguePort(ABC):
    @abstractmethod
    def get_by_sku(self, sku: str) -> Product | None:
        """Return the product for `sku`, or None when the catalogue has no such SKU."""
        ...


class PaymentsPort(ABC):
    @abstractmethod
    def charge(self, order_id: str, amount: float, method: str) -> PaymentReceipt:
        """Charge `amount` for an order. A decline is a receipt, not an error."""
        ...


class InventoryPort(ABC):
    @abstractmethod
    def deduct(self, sku: str, quantity: int) -> DeductionOutcome:
        """Deduct stock. Shortfalls and unknown SKUs are outcomes, not errors."""
        ...
