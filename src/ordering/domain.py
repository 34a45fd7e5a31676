"""Ordering bounded context — Orders and the Fulfillment Saga.

Owns the order lifecycle and coordinates payment and inventory deduction
for an order through collaborator ports, settling each order into exactly
one resolved state.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
