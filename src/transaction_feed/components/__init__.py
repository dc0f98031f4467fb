"""
Reflex UI components for the Transaction Feed.

- employee_select: Employee filter select
- transactions: Transaction rows, empty/loading states and "View More"
"""

from transaction_feed.components.employee_select import employee_select
from transaction_feed.components.transactions import (
    transaction_results,
    transaction_row,
)

__all__ = ["employee_select", "transaction_results", "transaction_row"]
