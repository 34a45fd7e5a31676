"""Tests for the HTTP collaborator adapters using httpx.MockTransport."""

import inspect
import json

import httpx
import pytest
from ordering.api.routes import create_order, pay
from ordering.clients import get_catalogue, get_inventory, get_payments, reset_collaborators
from ordering.clients.http_adapter import HttpCatalogue, HttpInventory, HttpPayments
from ordering.clients.port import DeductionOutcome
from ordering.clients.retry import RetryPolicy
from shared.errors import CollaboratorUnavailable, OrchestrationError


def _client(handler, base_url="http://collaborator"):
    return httpx.Client(transport=httpx.MockTransport(handler), base_url=base_url)


def _no_sleep_retry():
    return RetryPolicy(sleep=lambda _: None)


class TestHttpCatalogue:
    def test_found(self):
        def handler(request):
            assert request.method == "GET"
            assert request.url.path == "/products/sku/SKU-001"
            return httpx.Response(200, json={"sku": "SKU-001", "name": "Widget", "price": 29.99})

        catalogue = HttpCatalogue("http://catalogue", client=_client(handler), retry=_no_sleep_retry())
        product = catalogue.get_by_sku("SKU-001")
        assert product.name == "Widget"
        assert product.price == 29.99

    def test_not_found_is_none(self):
        catalogue = HttpCatalogue(
            "http://catalogue",
            client=_client(lambda request: httpx.Response(404)),
            retry=_no_sleep_retry(),
        )
        assert catalogue.get_by_sku("MISSING") is None

    def test_server_error_is_orchestration_error(self):
        catalogue = HttpCatalogue(
            "http://catalogue",
            client=_client(lambda request: httpx.Response(500)),
            retry=_no_sleep_retry(),
        )
        with pytest.raises(OrchestrationError):
            catalogue.get_by_sku("SKU-001")


class TestHttpPayments:
    def test_charge_success(self):
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"id": "pay-1", "status": "Success"})

        adapter = HttpPayments("http://payments", client=_client(handler), retry=_no_sleep_retry())
        receipt = adapter.charge("ord-1", 59.98, "CREDIT_CARD")

        assert seen["path"] == "/payments/process"
        assert seen["body"] == {"order_id": "ord-1", "amount": 59.98, "method": "CREDIT_CARD"}
        assert receipt.payment_id == "pay-1"
        assert receipt.success is True

    def test_charge_declined(self):
        adapter = HttpPayments(
            "http://payments",
            client=_client(lambda request: httpx.Response(201, json={"id": "pay-2", "status": "Failed"})),
            retry=_no_sleep_retry(),
        )
        receipt = adapter.charge("ord-1", 59.99, "CREDIT_CARD")
        assert receipt.payment_id == "pay-2"
        assert receipt.success is False

    def test_retries_503_then_succeeds(self):
        responses = iter(
            [
                httpx.Response(503),
                httpx.Response(201, json={"id": "pay-3", "status": "Success"}),
            ]
        )
        adapter = HttpPayments(
            "http://payments",
            client=_client(lambda request: next(responses)),
            retry=_no_sleep_retry(),
        )
        assert adapter.charge("ord-1", 1.0, "CREDIT_CARD").payment_id == "pay-3"

    def test_exhausted_retries_raise(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503)

        adapter = HttpPayments("http://payments", client=_client(handler), retry=_no_sleep_retry())
        with pytest.raises(CollaboratorUnavailable) as exc:
            adapter.charge("ord-1", 1.0, "CREDIT_CARD")
        assert exc.value.collaborator == "payments"
        assert len(calls) == 3

    def test_connection_errors_raise_after_retries(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        adapter = HttpPayments("http://payments", client=_client(handler), retry=_no_sleep_retry())
        with pytest.raises(CollaboratorUnavailable):
            adapter.charge("ord-1", 1.0, "CREDIT_CARD")


class TestHttpInventory:
    @pytest.mark.parametrize(
        ("status_code", "outcome"),
        [
            (200, DeductionOutcome.DEDUCTED),
            (404, DeductionOutcome.SKU_NOT_FOUND),
            (409, DeductionOutcome.INSUFFICIENT_STOCK),
        ],
    )
    def test_status_mapping(self, status_code, outcome):
        def handler(request):
            assert request.url.path == "/inventory/SKU-001/deduct"
            assert json.loads(request.content) == {"quantity": 2}
            return httpx.Response(status_code, json={})

        adapter = HttpInventory("http://inventory", client=_client(handler), retry=_no_sleep_retry())
        assert adapter.deduct("SKU-001", 2) == outcome

    def test_bad_request_is_orchestration_error(self):
        adapter = HttpInventory(
            "http://inventory",
            client=_client(lambda request: httpx.Response(400, json={})),
            retry=_no_sleep_retry(),
        )
        with pytest.raises(OrchestrationError):
            adapter.deduct("SKU-001", 2)


class TestAdapterSelection:
    @pytest.fixture(autouse=True)
    def http_collaborators(self, monkeypatch):
        monkeypatch.setenv("CATALOGUE_ADAPTER", "http")
        monkeypatch.setenv("COLLABORATOR_ADAPTER", "http")
        for name in ("CATALOGUE_SERVICE_URL", "PAYMENTS_SERVICE_URL", "INVENTORY_SERVICE_URL"):
            monkeypatch.delenv(name, raising=False)
        reset_collaborators()

    def test_defaults_point_at_collaborator_services(self):
        assert isinstance(get_payments(), HttpPayments)
        assert isinstance(get_inventory(), HttpInventory)
        assert isinstance(get_catalogue(), HttpCatalogue)

        assert get_payments().client.base_url.host == "payment-service"
        assert get_inventory().client.base_url.host == "inventory-service"
        assert get_catalogue().client.base_url.host == "product-service"

    def test_service_urls_from_environment(self, monkeypatch):
        monkeypatch.setenv("PAYMENTS_SERVICE_URL", "http://payments.internal:9000")
        reset_collaborators()

        url = get_payments().client.base_url
        assert (url.host, url.port) == ("payments.internal", 9000)


class TestBlockingRoutesRunInThreadpool:
    def test_create_order_is_a_plain_function(self):
        assert not inspect.iscoroutinefunction(create_order)

    def test_pay_is_a_plain_function(self):
        assert not inspect.iscoroutinefunction(pay)
