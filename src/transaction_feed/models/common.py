"""
Common state models for the Transaction Feed.

FeedSnapshot is the read model handed from the feed core to the rendering
layer: the accumulated transactions plus the flags that drive the employee
filter and the "View More" button.
"""

from dataclasses import dataclass, field
from typing import Sequence

from transaction_feed.models.transaction import (
    Employee,
    Transaction,
    serialize_employee,
    serialize_transaction,
)


@dataclass(frozen=True)
class FeedSnapshot:
    """
    Point-in-time view of the feed.

    Attributes:
        transactions: Accumulated transactions in first-seen order.
        employees: Employee directory, empty until loaded.
        selected_employee_id: Active filter, None when showing everyone.
        is_loading: True while any action or fetch is in flight.
        can_load_more: True once the current mode has fetched any data.
        has_more: True when a further fetch could return unseen transactions.
    """

    transactions: Sequence[Transaction] = field(default_factory=tuple)
    employees: Sequence[Employee] = field(default_factory=tuple)
    selected_employee_id: str | None = None
    is_loading: bool = False
    can_load_more: bool = False
    has_more: bool = False

    @property
    def is_empty(self) -> bool:
        """Check if the empty state should be shown."""
        return not self.is_loading and len(self.transactions) == 0

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "transactions": [serialize_transaction(t) for t in self.transactions],
            "employees": [serialize_employee(e) for e in self.employees],
            "selected_employee_id": self.selected_employee_id,
            "is_loading": self.is_loading,
            "can_load_more": self.can_load_more,
            "has_more": self.has_more,
        }
