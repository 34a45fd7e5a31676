import pytest
from ordering.clients import set_catalogue
from ordering.clients.fake_catalogue import FakeCatalogue


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture()
def catalogue():
    """FakeCatalogue seeded with a few products and installed as the active catalogue."""
    fake = FakeCatalogue()
    fake.add_product("SKU-001", "Widget", 29.99)
    fake.add_product("SKU-002", "Gadget", 10.00)
    fake.add_product("SKU-003", "Gizmo", 5.00)
    set_catalogue(fake)
    return fake
