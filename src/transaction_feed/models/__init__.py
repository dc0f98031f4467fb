"""
Data models and serialization helpers for the Transaction Feed.

This package provides:
- Transaction domain models (Employee, Transaction, TransactionPage)
- The FeedSnapshot read model handed to the UI
- Serialization to and from the data source's JSON payloads

Reflex models live in models.reflex_models and are imported by the UI only.
"""

from transaction_feed.models.common import FeedSnapshot
from transaction_feed.models.transaction import (
    ALL_EMPLOYEES,
    Employee,
    Transaction,
    TransactionPage,
    deserialize_employee,
    deserialize_page,
    deserialize_transaction,
    serialize_employee,
    serialize_page,
    serialize_transaction,
)

__all__ = [
    "ALL_EMPLOYEES",
    "Employee",
    "FeedSnapshot",
    "Transaction",
    "TransactionPage",
    "deserialize_employee",
    "deserialize_page",
    "deserialize_transaction",
    "serialize_employee",
    "serialize_page",
    "serialize_transaction",
]
