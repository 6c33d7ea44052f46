"""Example domain – events of the invoice aggregate."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, Mapping, Self

from mongo_event_store.example.dto import Item
from mongo_event_store.kernel.ddd import DomainEvent
from mongo_event_store.kernel.types import EntityId


@dataclasses.dataclass(frozen=True, kw_only=True)
class InvoiceWasCreated(DomainEvent):
    number: str
    items: tuple[Item, ...] = ()

    def get_payload(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_payload(
        cls,
        aggregate_root_id: EntityId,
        payload: Mapping[str, Any],
        recorded_at: datetime,
    ) -> Self:
        return cls(
            aggregate_root_id=aggregate_root_id,
            recorded_at=recorded_at,
            number=payload["number"],
            items=tuple(Item.from_dict(item) for item in payload.get("items", [])),
        )


@dataclasses.dataclass(frozen=True, kw_only=True)
class PaymentTransactionWasStarted(DomainEvent):
    id: str
    payment_method: str
    amount: float

    def get_payload(self) -> dict[str, Any]:
        return {"id": self.id, "paymentMethod": self.payment_method, "amount": self.amount}

    @classmethod
    def from_payload(
        cls,
        aggregate_root_id: EntityId,
        payload: Mapping[str, Any],
        recorded_at: datetime,
    ) -> Self:
        return cls(
            aggregate_root_id=aggregate_root_id,
            recorded_at=recorded_at,
            id=payload["id"],
            payment_method=payload["paymentMethod"],
            amount=float(payload["amount"]),
        )


@dataclasses.dataclass(frozen=True, kw_only=True)
class PaymentTransactionWasCompleted(DomainEvent):
    id: str


INVOICE_EVENTS = (
    InvoiceWasCreated,
    PaymentTransactionWasStarted,
    PaymentTransactionWasCompleted,
)

__all__ = [
    "INVOICE_EVENTS",
    "InvoiceWasCreated",
    "PaymentTransactionWasCompleted",
    "PaymentTransactionWasStarted",
]
