"""Payment gateway factory.

Provides get_gateway() / set_gateway() to swap implementations:
- ParityGateway, the deterministic even/odd-cents rule (default)
- FakeGateway for tests that need a fixed outcome
"""

from payments.gateway.parity_adapter import ParityGateway
from payments.gateway.port import PaymentGateway

_current_gateway: PaymentGateway | None = None


def get_gateway() -> PaymentGateway:
    """Return the current payment gateway. Defaults to ParityGateway."""
    global _current_gateway
    if _current_gateway is None:
        _current_gateway = ParityGateway()
    return _current_gateway


def set_gateway(gateway: PaymentGateway) -> None:
    """Override the active payment gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to default gateway."""
    global _current_gateway
    _current_gateway = None
