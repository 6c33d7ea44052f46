"""Example domain – the Invoice aggregate."""

from __future__ import annotations

import dataclasses
import uuid
from datetime import datetime

from mongo_event_store.example.dto import Item, PaymentTransaction
from mongo_event_store.example.events import (
    InvoiceWasCreated,
    PaymentTransactionWasCompleted,
    PaymentTransactionWasStarted,
)
from mongo_event_store.kernel.ddd import AggregateRoot
from mongo_event_store.kernel.errors import InvariantViolationError
from mongo_event_store.kernel.time import Clock
from mongo_event_store.kernel.types import EntityId


class Invoice(AggregateRoot):
    """Invoice with items and payment transactions.

    ``get_total()`` is what is still owed: subtotal plus tax minus the
    amounts of completed payment transactions.
    """

    def __init__(self, id: EntityId, clock: Clock | None = None) -> None:  # noqa: A002
        super().__init__(id, clock)
        self.number: str | None = None
        self.created_at: datetime | None = None
        self.items: list[Item] = []
        self.payment_transactions: dict[str, PaymentTransaction] = {}

    @classmethod
    def create(cls, number: str, *items: Item, clock: Clock | None = None) -> "Invoice":
        invoice = cls(EntityId.generate(), clock)
        invoice.record_that(
            InvoiceWasCreated(
                aggregate_root_id=invoice.id,
                recorded_at=invoice._now(),
                number=number,
                items=items,
            )
        )
        return invoice

    @classmethod
    def init(cls, aggregate_root_id: str | EntityId, clock: Clock | None = None) -> "Invoice":
        """Return an empty invoice, ready to be loaded from an event store."""
        return cls(EntityId.coerce(aggregate_root_id), clock)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start_payment_transaction(self, payment_method: str, amount: float) -> PaymentTransaction:
        transaction_id = str(uuid.uuid4())
        self.record_that(
            PaymentTransactionWasStarted(
                aggregate_root_id=self.id,
                recorded_at=self._now(),
                id=transaction_id,
                payment_method=payment_method,
                amount=amount,
            )
        )
        return self.payment_transactions[transaction_id]

    def complete_payment_transaction(self, transaction_id: str) -> None:
        transaction = self.payment_transactions.get(transaction_id)
        if transaction is None:
            raise InvariantViolationError(
                f"Unknown payment transaction '{transaction_id}'", aggregate="Invoice"
            )
        if transaction.completed:
            raise InvariantViolationError(
                f"Payment transaction '{transaction_id}' is already completed", aggregate="Invoice"
            )
        self.record_that(
            PaymentTransactionWasCompleted(
                aggregate_root_id=self.id,
                recorded_at=self._now(),
                id=transaction_id,
            )
        )

    # ------------------------------------------------------------------
    # Totals
    # ------------------------------------------------------------------

    def get_sub_total(self) -> float:
        return round(sum(item.sub_total for item in self.items), 2)

    def get_tax(self) -> float:
        return round(sum(item.tax_amount for item in self.items), 2)

    def get_paid(self) -> float:
        return round(
            sum(t.amount for t in self.payment_transactions.values() if t.completed), 2
        )

    def get_total(self) -> float:
        return round(self.get_sub_total() + self.get_tax() - self.get_paid(), 2)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def apply_invoice_was_created(self, event: InvoiceWasCreated) -> None:
        self.number = event.number
        self.created_at = event.recorded_at
        self.items = list(event.items)

    def apply_payment_transaction_was_started(self, event: PaymentTransactionWasStarted) -> None:
        self.payment_transactions[event.id] = PaymentTransaction(
            id=event.id,
            payment_method=event.payment_method,
            amount=event.amount,
        )

    def apply_payment_transaction_was_completed(self, event: PaymentTransactionWasCompleted) -> None:
        self.payment_transactions[event.id] = dataclasses.replace(
            self.payment_transactions[event.id], completed=True
        )


__all__ = ["Invoice"]
