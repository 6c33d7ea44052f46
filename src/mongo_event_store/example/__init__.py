"""Example domain – an invoice aggregate stored through the event store.

Register :data:`INVOICE_EVENTS` on the registry handed to the store::

    registry = EventTypeRegistry(*INVOICE_EVENTS, describer=KebabCaseDescriber())
"""

from mongo_event_store.example.dto import Item, PaymentTransaction
from mongo_event_store.example.events import (
    INVOICE_EVENTS,
    InvoiceWasCreated,
    PaymentTransactionWasCompleted,
    PaymentTransactionWasStarted,
)
from mongo_event_store.example.invoice import Invoice

__all__ = [
    "INVOICE_EVENTS",
    "Invoice",
    "InvoiceWasCreated",
    "Item",
    "PaymentTransaction",
    "PaymentTransactionWasCompleted",
    "PaymentTransactionWasStarted",
]
