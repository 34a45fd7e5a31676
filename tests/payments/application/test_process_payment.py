"""Application tests for payment processing and payment reads."""

import pytest
from payments.gateway import get_gateway, set_gateway
from payments.gateway.fake_adapter import FakeGateway
from payments.gateway.parity_adapter import ParityGateway
from payments.payment.payment import Payment, PaymentStatus
from payments.payment.processing import ProcessPayment
from payments.payment.queries import get_payment, list_payments, list_payments_for_order
from protean import current_domain
from shared.errors import PaymentNotFound


def _process(order_id="ord-001", amount=59.98, method="CREDIT_CARD"):
    return current_domain.process(
        ProcessPayment(order_id=order_id, amount=amount, method=method),
        asynchronous=False,
    )


class TestProcessPayment:
    def test_default_gateway_is_parity(self):
        assert isinstance(get_gateway(), ParityGateway)

    def test_even_cents_succeed(self):
        payment = get_payment(_process(amount=59.98))
        assert payment.status == PaymentStatus.SUCCESS.value
        assert payment.gateway_name == "ParityGateway"
        assert payment.method == "CREDIT_CARD"

    def test_odd_cents_fail(self):
        payment = get_payment(_process(amount=29.99))
        assert payment.status == PaymentStatus.FAILED.value
        assert payment.failure_reason

    def test_persisted_payment_is_never_pending(self):
        _process(amount=1.0)
        _process(amount=1.01)
        statuses = {payment.status for payment in list_payments()}
        assert PaymentStatus.PENDING.value not in statuses

    def test_fake_gateway_overrides_decision(self):
        gateway = FakeGateway()
        gateway.configure(should_succeed=False, failure_reason="Card declined")
        set_gateway(gateway)

        payment = get_payment(_process(amount=100.0))

        assert payment.status == PaymentStatus.FAILED.value
        assert payment.failure_reason == "Card declined"
        assert gateway.calls == [{"method": "CREDIT_CARD", "amount": 100.0}]

    def test_payment_persists_in_repository(self):
        payment_id = _process()
        payment = current_domain.repository_for(Payment).get(payment_id)
        assert str(payment.order_id) == "ord-001"


class TestPaymentQueries:
    def test_get_unknown_payment(self):
        with pytest.raises(PaymentNotFound):
            get_payment("missing-payment")

    def test_list_payments(self):
        _process(order_id="ord-001")
        _process(order_id="ord-002")
        assert len(list_payments()) == 2

    def test_list_payments_for_order(self):
        first = _process(order_id="ord-001", amount=0.01)
        second = _process(order_id="ord-001", amount=0.02)
        _process(order_id="ord-002")

        payments = list_payments_for_order("ord-001")

        assert [str(payment.id) for payment in payments] == [first, second]
        assert [payment.status for payment in payments] == [
            PaymentStatus.FAILED.value,
            PaymentStatus.SUCCESS.value,
        ]

    def test_list_reads_return_more_than_a_default_page(self):
        for _ in range(105):
            _process(order_id="ord-001", amount=0.02)
        for _ in range(15):
            _process(order_id="ord-002", amount=0.02)

        assert len(list_payments()) == 120
        assert len(list_payments_for_order("ord-001")) == 105
