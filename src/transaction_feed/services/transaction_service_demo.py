"""
Demo implementation of TransactionService using static in-memory data.

This service is useful for:
- Local development without a live data source
- Testing UI components with realistic data
- Demonstrating pagination and employee filtering

Pages are 1-indexed slices of page_size transactions. Approval changes are
kept in memory for the lifetime of the service.
"""

import asyncio
from typing import Sequence

from transaction_feed.data.demo_transactions import DEMO_EMPLOYEES, DEMO_TRANSACTIONS
from transaction_feed.errors import FetchFailed
from transaction_feed.lib import logs
from transaction_feed.models.transaction import Employee, Transaction, TransactionPage
from transaction_feed.services.transaction_service import (
    PAGINATED_TRANSACTIONS,
    SET_TRANSACTION_APPROVAL,
    TRANSACTIONS_BY_EMPLOYEE,
    TransactionService,
)

LOG = logs.logger(__file__)


class DemoTransactionService(TransactionService):
    """
    In-memory transaction service backed by static demo data.

    Attributes:
        page_size: Number of transactions per page.
        latency_ms: Artificial delay applied to every request.
    """

    def __init__(
        self,
        employees: Sequence[Employee] | None = None,
        transactions: Sequence[Transaction] | None = None,
        page_size: int = 5,
        latency_ms: int = 0,
    ) -> None:
        """
        Initialize with fixture data.

        Args:
            employees: Custom employee list, or None to use DEMO_EMPLOYEES.
            transactions: Custom transaction list, or None to use DEMO_TRANSACTIONS.
            page_size: Transactions per page (minimum 1).
            latency_ms: Simulated request latency in milliseconds.
        """
        self._employees = list(DEMO_EMPLOYEES if employees is None else employees)
        self._transactions = list(
            DEMO_TRANSACTIONS if transactions is None else transactions
        )
        self._approvals: dict[str, bool] = {}
        self.page_size = max(page_size, 1)
        self.latency_ms = max(latency_ms, 0)

    async def get_employees(self) -> Sequence[Employee]:
        await self._simulate_latency()
        return list(self._employees)

    async def get_transaction_page(self, page: int) -> TransactionPage:
        """
        Return a slice of all transactions.

        Raises:
            FetchFailed: If page is below 1 or past the last page.
        """
        await self._simulate_latency()
        start = (page - 1) * self.page_size
        if page < 1 or (start > 0 and start >= len(self._transactions)):
            raise FetchFailed(PAGINATED_TRANSACTIONS, "Invalid page", {"page": page})

        end = start + self.page_size
        items = [self._with_approval(t) for t in self._transactions[start:end]]
        next_page = page + 1 if end < len(self._transactions) else None
        LOG.debug("Serving page %s - items:%s next:%s", page, len(items), next_page)
        return TransactionPage(data=items, next_page=next_page)

    async def get_transactions_by_employee(
        self, employee_id: str
    ) -> Sequence[Transaction]:
        """
        Return every transaction of one employee.

        Raises:
            FetchFailed: If employee_id is empty.
        """
        await self._simulate_latency()
        if not employee_id:
            raise FetchFailed(TRANSACTIONS_BY_EMPLOYEE, "Employee id cannot be empty")
        return [
            self._with_approval(t)
            for t in self._transactions
            if t.employee.id == employee_id
        ]

    async def set_transaction_approval(self, transaction_id: str, value: bool) -> None:
        """
        Record an approval change.

        Raises:
            FetchFailed: If the transaction does not exist.
        """
        await self._simulate_latency()
        if not any(t.id == transaction_id for t in self._transactions):
            raise FetchFailed(
                SET_TRANSACTION_APPROVAL,
                "Invalid transaction to approve",
                {"transactionId": transaction_id},
            )
        self._approvals[transaction_id] = value

    def _with_approval(self, transaction: Transaction) -> Transaction:
        approved = self._approvals.get(transaction.id)
        if approved is None or approved == transaction.approved:
            return transaction
        return transaction.with_approval(approved)

    async def _simulate_latency(self) -> None:
        if self.latency_ms:
            await asyncio.sleep(self.latency_ms / 1000)
