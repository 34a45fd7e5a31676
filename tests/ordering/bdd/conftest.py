"""Shared BDD fixtures and step definitions for order fulfillment."""

import json

import pytest
from inventory.alerts.queries import list_alerts_for_sku
from inventory.domain import inventory
from inventory.stock.ledger import CreateInventoryItem
from inventory.stock.queries import get_inventory_item
from ordering.clients import set_catalogue
from ordering.clients.fake_catalogue import FakeCatalogue
from ordering.fulfillment.saga import pay_order
from ordering.order.creation import CreateOrder
from payments.domain import payments
from payments.payment.queries import list_payments_for_order
from protean import current_domain
from pytest_bdd import given, parsers, then
from shared.errors import InvalidState


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def fake_catalogue():
    catalogue = FakeCatalogue()
    set_catalogue(catalogue)
    return catalogue


@pytest.fixture()
def order_lines():
    """Lines collected by the Given steps before the order is placed."""
    return []


@pytest.fixture()
def error():
    """Container for the exception raised by a When step."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps: catalogue and stock
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the catalogue lists "{sku}" "{name}" at {price:f}'))
def catalogue_lists(fake_catalogue, sku, name, price):
    fake_catalogue.add_product(sku, name, price)


@given(parsers.cfparse('inventory holds {available:d} of "{sku}" with threshold {threshold:d}'))
def inventory_holds(sku, available, threshold):
    with inventory.domain_context():
        inventory.process(
            CreateInventoryItem(sku=sku, available=available, threshold=threshold),
            asynchronous=False,
        )


# ---------------------------------------------------------------------------
# Given steps: orders
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the customer orders {quantity:d} of "{sku}"'))
def customer_orders(order_lines, sku, quantity):
    order_lines.append({"sku": sku, "quantity": quantity})


@given("the order is placed", target_fixture="order_id")
def order_is_placed(order_lines):
    return current_domain.process(CreateOrder(items=json.dumps(order_lines)), asynchronous=False)


@given("the order was paid", target_fixture="order")
def order_was_paid(order_id):
    return pay_order(order_id)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order, status):
    assert order.status == status


@then(parsers.cfparse('the order reason is "{reason}"'))
def order_reason_is(order, reason):
    assert order.cancellation_reason == reason


@then(parsers.cfparse('"{sku}" has {available:d} units left'))
def units_left(sku, available):
    with inventory.domain_context():
        assert get_inventory_item(sku).available == available


@then(parsers.cfparse('{count:d} payment is recorded for the order with status "{status}"'))
def payments_recorded(order_id, count, status):
    with payments.domain_context():
        recorded = list_payments_for_order(order_id)
    assert len(recorded) == count
    assert all(payment.status == status for payment in recorded)


@then(parsers.cfparse('{count:d} low-stock alert is recorded for "{sku}"'))
def alerts_recorded(sku, count):
    with inventory.domain_context():
        assert len(list_alerts_for_sku(sku)) == count


@then("the payment attempt is rejected as an invalid state")
def rejected_as_invalid_state(error):
    assert isinstance(error["exc"], InvalidState)
