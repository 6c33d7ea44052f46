"""Example domain – value objects of the invoice aggregate."""

from __future__ import annotations

import dataclasses
from typing import Any, Mapping


@dataclasses.dataclass(frozen=True)
class Item:
    """An invoice line. ``tax`` is a percentage (``21.`` means 21 %)."""

    reference: str | None
    description: str
    quantity: int
    price: float
    tax: float

    @property
    def sub_total(self) -> float:
        return self.quantity * self.price

    @property
    def tax_amount(self) -> float:
        return self.sub_total * self.tax / 100

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Item":
        return cls(
            reference=data.get("reference"),
            description=data["description"],
            quantity=int(data["quantity"]),
            price=float(data["price"]),
            tax=float(data["tax"]),
        )


@dataclasses.dataclass(frozen=True)
class PaymentTransaction:
    id: str
    payment_method: str
    amount: float
    completed: bool = False


__all__ = ["Item", "PaymentTransaction"]
