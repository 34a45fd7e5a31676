"""Read side of the ordering domain."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.order.order import Order
from shared.errors import OrderNotFound


def get_order(order_id):
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise OrderNotFound(order_id)


def list_orders():
    orders = current_domain.repository_for(Order)._dao.query.limit(None).all().items
    return sorted(orders, key=lambda order: order.created_at)
