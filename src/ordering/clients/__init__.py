"""Collaborator factory.

Provides get_*() / set_*() to swap implementations:
- FakeCatalogue or HttpCatalogue, chosen by CATALOGUE_ADAPTER (fake|http)
- LocalPayments / LocalInventory or their HTTP counterparts, chosen by
  COLLABORATOR_ADAPTER (local|http)

Base URLs for the HTTP adapters come from CATALOGUE_SERVICE_URL,
PAYMENTS_SERVICE_URL and INVENTORY_SERVICE_URL. They default to the
service names http://product-service, http://payment-service and
http://inventory-service, never to this application.
"""

import os

from ordering.clients.fake_catalogue import FakeCatalogue
from ordering.clients.http_adapter import HttpCatalogue, HttpInventory, HttpPayments
from ordering.clients.local_adapter import LocalInventory, LocalPayments
from ordering.clients.port import CataloguePort, InventoryPort, PaymentsPort

_catalogue: CataloguePort | None = None
_payments: PaymentsPort | None = None
_inventory: InventoryPort | None = None


def _service_url(name: str, default: str) -> str:
    return os.environ.get(name, default)


def _use_http_collaborators() -> bool:
    return os.environ.get("COLLABORATOR_ADAPTER", "local").lower() == "http"


def get_catalogue() -> CataloguePort:
    """Return the active catalogue. Defaults to an empty FakeCatalogue."""
    global _catalogue
    if _catalogue is None:
        if os.environ.get("CATALOGUE_ADAPTER", "fake").lower() == "http":
            _catalogue = HttpCatalogue(_service_url("CATALOGUE_SERVICE_URL", "http://product-service"))
        else:
            _catalogue = FakeCatalogue()
    return _catalogue


def get_payments() -> PaymentsPort:
    global _payments
    if _payments is None:
        if _use_http_collaborators():
            _payments = HttpPayments(_service_url("PAYMENTS_SERVICE_URL", "http://payment-service"))
        else:
            _payments = LocalPayments()
    return _payments


def get_inventory() -> InventoryPort:
    global _inventory
    if _inventory is None:
        if _use_http_collaborators():
            _inventory = HttpInventory(_service_url("INVENTORY_SERVICE_URL", "http://inventory-service"))
        else:
            _inventory = LocalInventory()
    return _inventory


def set_catalogue(catalogue: CataloguePort) -> None:
    """Override the active catalogue (useful for tests)."""
    global _catalogue
    _catalogue = catalogue


def set_payments(adapter: PaymentsPort) -> None:
    global _payments
    _payments = adapter


def set_inventory(adapter: InventoryPort) -> None:
    global _inventory
    _inventory = adapter


def reset_collaborators() -> None:
    """Reset every collaborator to its environment default."""
    global _catalogue, _payments, _inventory
    _catalogue = None
    _payments = None
    _inventory = None
