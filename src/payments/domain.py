"""Payments bounded context — Payment Decisions.

Charges orders through a pluggable gateway and keeps one payment record per
charge attempt. The default gateway decides deterministically, so every
branch of order fulfillment can be exercised without a payment network.
"""

import structlog
from protean.domain import Domain

payments = Domain(name="payments")

logger = structlog.get_logger(__name__)
