"""Unit tests for the example Invoice aggregate."""

from __future__ import annotations

import pytest

from mongo_event_store.example import (
    Invoice,
    InvoiceWasCreated,
    Item,
    PaymentTransactionWasCompleted,
    PaymentTransactionWasStarted,
)
from mongo_event_store.kernel.errors import InvariantViolationError
from mongo_event_store.kernel.types import EntityId
from mongo_event_store.testing import FakeClock


def _invoice() -> Invoice:
    return Invoice.create(
        "12-34",
        Item("prod.123.456", "Product", 3, 5.95, 21.0),
        Item(None, "Shipping", 1, 4.95, 0.0),
        clock=FakeClock(),
    )


class TestInvoice:
    def test_create_records_event(self) -> None:
        invoice = _invoice()
        (event,) = invoice.get_events()
        assert isinstance(event, InvoiceWasCreated)
        assert invoice.number == "12-34"
        assert invoice.created_at == FakeClock().now()

    def test_totals(self) -> None:
        invoice = _invoice()
        assert invoice.get_sub_total() == 22.8
        assert invoice.get_tax() == 3.75
        assert invoice.get_total() == 26.55

    def test_started_transaction_is_not_paid(self) -> None:
        invoice = _invoice()
        invoice.start_payment_transaction("Manual", 10.0)
        assert invoice.get_paid() == 0
        assert invoice.get_total() == 26.55

    def test_completed_transaction_reduces_total(self) -> None:
        invoice = _invoice()
        transaction = invoice.start_payment_transaction("Manual", 10.0)
        invoice.complete_payment_transaction(transaction.id)

        assert invoice.get_total() == 16.55
        assert [type(e) for e in invoice.get_events()] == [
            InvoiceWasCreated,
            PaymentTransactionWasStarted,
            PaymentTransactionWasCompleted,
        ]

    def test_unknown_transaction(self) -> None:
        with pytest.raises(InvariantViolationError, match="Unknown payment transaction"):
            _invoice().complete_payment_transaction("nope")

    def test_transaction_completes_once(self) -> None:
        invoice = _invoice()
        transaction = invoice.start_payment_transaction("Manual", 10.0)
        invoice.complete_payment_transaction(transaction.id)
        with pytest.raises(InvariantViolationError, match="already completed"):
            invoice.complete_payment_transaction(transaction.id)

    def test_init_is_empty(self) -> None:
        invoice = Invoice.init("inv-1")
        assert invoice.id == EntityId("inv-1")
        assert invoice.number is None
        assert invoice.get_events() == []

    def test_created_payload_is_bson_friendly(self) -> None:
        (event,) = _invoice().get_events()
        payload = event.get_payload()
        assert payload["items"][1] == {
            "reference": None,
            "description": "Shipping",
            "quantity": 1,
            "price": 4.95,
            "tax": 0.0,
        }
        assert InvoiceWasCreated.from_payload(event.aggregate_root_id, payload, event.recorded_at) == event

    def test_started_payload_uses_camel_case_method(self) -> None:
        invoice = _invoice()
        invoice.start_payment_transaction("Manual", 10.0)
        _, event = invoice.get_events()
        payload = event.get_payload()

        assert payload == {"id": event.id, "paymentMethod": "Manual", "amount": 10.0}  # type: ignore[attr-defined]
        assert PaymentTransactionWasStarted.from_payload(event.aggregate_root_id, payload, event.recorded_at) == event
