"""Error taxonomy shared by the ordering, payments and inventory contexts.

Structural failures are exceptions and reach the caller. Domain outcomes
(a declined payment, a stock shortfall during fulfillment) are not: the
fulfillment saga translates them into order state.

Field-level validation keeps using ``protean.exceptions.ValidationError``.
"""


class FulfillmentError(Exception):
    """Base class for every error raised by the fulfillment core."""

    def __init__(self, message: str, **details) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        return {"error": type(self).__name__, "message": self.message, **self.details}


# ---------------------------------------------------------------------------
# Not found
# ---------------------------------------------------------------------------
class NotFound(FulfillmentError):
    pass


class OrderNotFound(NotFound):
    def __init__(self, order_id: str) -> None:
        super().__init__(f"Order not found: {order_id}", order_id=str(order_id))


class PaymentNotFound(NotFound):
    def __init__(self, payment_id: str) -> None:
        super().__init__(f"Payment not found: {payment_id}", payment_id=str(payment_id))


class SkuNotFound(NotFound):
    def __init__(self, sku: str) -> None:
        super().__init__(f"Inventory item not found for SKU: {sku}", sku=sku)


class ProductNotFound(NotFound):
    def __init__(self, sku: str) -> None:
        super().__init__(f"Product not found: {sku}", sku=sku)


# ---------------------------------------------------------------------------
# Conflicts and state
# ---------------------------------------------------------------------------
class Conflict(FulfillmentError):
    pass


class DuplicateSku(Conflict):
    def __init__(self, sku: str) -> None:
        super().__init__(f"Inventory item with SKU {sku} already exists", sku=sku)


class InvalidState(FulfillmentError):
    def __init__(self, message: str, current_status: str | None = None) -> None:
        super().__init__(message, current_status=current_status)
        self.current_status = current_status


class InsufficientStock(FulfillmentError):
    def __init__(self, sku: str, available: int, requested: int) -> None:
        super().__init__(
            f"Insufficient stock for SKU: {sku}. Available: {available}, Requested: {requested}",
            sku=sku,
            available=available,
            requested=requested,
        )
        self.sku = sku
        self.available = available
        self.requested = requested


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------
class OrchestrationError(FulfillmentError):
    """A collaborator call failed for a reason that is not a domain outcome."""


class CollaboratorUnavailable(OrchestrationError):
    """A remote collaborator stayed unreachable after bounded retries."""

    def __init__(self, collaborator: str, reason: str, attempts: int = 1) -> None:
        super().__init__(
            f"{collaborator} unavailable after {attempts} attempt(s): {reason}",
            collaborator=collaborator,
            attempts=attempts,
        )
        self.collaborator = collaborator
        self.attempts = attempts
