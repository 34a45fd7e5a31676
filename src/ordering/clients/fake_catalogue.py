"""In-memory product catalogue for development and testing.

Seeded with ``add_product``; an unknown SKU resolves to None just like a
404 from the real catalogue service.
"""

from ordering.clients.port import CataloguePort, Product


class FakeCatalogue(CataloguePort):
    def __init__(self) -> None:
        self.products: dict[str, Product] = {}
        self.lookups: list[str] = []

    def add_product(self, sku: str, name: str, price: float) -> Product:
        product = Product(sku=sku, name=name, price=price)
        self.products[sku] = product
        return product

    def get_by_sku(self, sku: str) -> Product | None:
        self.lookups.append(sku)
        return self.products.get(sku)
