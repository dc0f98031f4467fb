"""
Abstract base class defining the transaction data access contract.

All data source implementations extend TransactionService. Every method is
a coroutine and raises FetchFailed when the underlying request fails.

Implementations:
- DemoTransactionService: Static in-memory data for development/testing
- CachedTransactionService: Request cache decorator around any service
"""

from abc import ABC, abstractmethod
from typing import Sequence

from transaction_feed.models.transaction import Employee, Transaction, TransactionPage

# Logical endpoint names, also used as request cache tags
EMPLOYEES = "employees"
PAGINATED_TRANSACTIONS = "paginatedTransactions"
TRANSACTIONS_BY_EMPLOYEE = "transactionsByEmployee"
SET_TRANSACTION_APPROVAL = "setTransactionApproval"


class TransactionService(ABC):
    """
    Abstract base class for transaction data access.

    Subclasses provide the employee directory, the paginated transaction
    feed, the per-employee transaction list and approval updates.
    """

    @abstractmethod
    async def get_employees(self) -> Sequence[Employee]:
        """Return every employee."""

    @abstractmethod
    async def get_transaction_page(self, page: int) -> TransactionPage:
        """
        Return one page of the "all transactions" feed.

        Args:
            page: Page number (1-indexed).

        Returns:
            TransactionPage whose next_page is None on the last page.
        """

    @abstractmethod
    async def get_transactions_by_employee(
        self, employee_id: str
    ) -> Sequence[Transaction]:
        """
        Return the complete transaction set for one employee.

        Args:
            employee_id: Identifier of the employee.
        """

    @abstractmethod
    async def set_transaction_approval(self, transaction_id: str, value: bool) -> None:
        """
        Record the approval flag for a transaction.

        Args:
            transaction_id: Identifier of the transaction.
            value: New approval state.
        """

    async def close(self) -> None:
        """Release any resources held by the service."""
        return None
