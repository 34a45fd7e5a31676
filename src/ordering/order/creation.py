"""Order creation — command and handler.

Every SKU is resolved through the catalogue before anything is written. A
single unknown SKU rejects the whole request. A unit price supplied by the
caller wins over the catalogue price. Stock is not checked here.
"""

import json

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Text
from protean.utils.globals import current_domain

from ordering.clients import get_catalogue
from ordering.domain import ordering
from ordering.order.order import Order
from shared.errors import ProductNotFound

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class CreateOrder:
    items = Text(required=True)  # JSON: list of {sku, quantity, unit_price?}


@ordering.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        items_data = json.loads(command.items) if isinstance(command.items, str) else command.items
        if not items_data:
            raise ValidationError({"items": ["Order must contain at least one item"]})

        catalogue = get_catalogue()
        resolved = []
        for item in items_data:
            sku = item.get("sku")
            if not sku:
                raise ValidationError({"items": ["Every item needs a sku"]})

            product = catalogue.get_by_sku(sku)
            if product is None:
                raise ProductNotFound(sku)

            unit_price = item.get("unit_price")
            resolved.append(
                {
                    "sku": product.sku,
                    "product_name": product.name,
                    "quantity": item.get("quantity"),
                    "unit_price": product.price if unit_price is None else unit_price,
                }
            )

        order = Order.create(items_data=resolved)
        current_domain.repository_for(Order).add(order)
        logger.info(
            "Order created",
            order_id=str(order.id),
            items=len(resolved),
            total_amount=str(order.total_amount()),
        )
        return str(order.id)
