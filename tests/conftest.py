import os
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Selects the config overlay every domain is initialized with.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        # Get the test file path relative to the tests directory
        test_path = Path(item.fspath)

        # Mark tests based on their directory
        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


# ---------------------------------------------------------------------------
# Domain beds
# ---------------------------------------------------------------------------
# The fulfillment saga calls into payments and inventory in-process, so all
# three domains are initialized once per session whichever folder runs.
@pytest.fixture(scope="session")
def inventory_bed():
    from inventory.domain import inventory

    bed = DomainFixture(inventory)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(scope="session")
def payments_bed():
    from payments.domain import payments

    bed = DomainFixture(payments)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(scope="session", autouse=True)
def setup_db(inventory_bed, payments_bed, ordering_bed):
    from inventory.domain import inventory
    from ordering.domain import ordering
    from payments.domain import payments
    from shared.db import drop_db, setup_db

    domains = (inventory, payments, ordering)
    for domain in domains:
        setup_db(domain)

    yield

    for domain in domains:
        drop_db(domain)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to automatically cleanup infrastructure after every test"""
    yield

    from inventory.alerts.event_log import reset_event_log
    from inventory.domain import inventory
    from ordering.clients import reset_collaborators
    from ordering.domain import ordering
    from payments.domain import payments
    from payments.gateway import reset_gateway

    for domain in (inventory, payments, ordering):
        with domain.domain_context():
            # Clear all databases
            for _, provider in domain.providers.items():
                provider._data_reset()

            # Drain event stores
            domain.event_store.store._data_reset()

    reset_event_log()
    reset_gateway()
    reset_collaborators()
