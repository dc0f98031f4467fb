"""Pytest configuration and fixtures."""

import asyncio
from typing import Sequence

import pytest

from transaction_feed.errors import FetchFailed
from transaction_feed.models.transaction import Employee, Transaction, TransactionPage
from transaction_feed.services.transaction_service import (
    EMPLOYEES,
    PAGINATED_TRANSACTIONS,
    SET_TRANSACTION_APPROVAL,
    TRANSACTIONS_BY_EMPLOYEE,
    TransactionService,
)

EMPLOYEE_A = Employee(id="A", first_name="Ada", last_name="Lovelace")
EMPLOYEE_B = Employee(id="B", first_name="Bob", last_name="Babbage")


def make_transaction(
    txn_id: str, employee: Employee = EMPLOYEE_A, approved: bool = False
) -> Transaction:
    return Transaction(
        id=txn_id,
        amount=10.0,
        employee=employee,
        merchant=f"Merchant {txn_id}",
        date="2021-09-20",
        approved=approved,
    )


T1 = make_transaction("t1", EMPLOYEE_A)
T2 = make_transaction("t2", EMPLOYEE_B)
T3 = make_transaction("t3", EMPLOYEE_A)
T4 = make_transaction("t4", EMPLOYEE_B)
T5 = make_transaction("t5", EMPLOYEE_B)


class FakeTransactionService(TransactionService):
    """
    Scripted service that records every request.

    Requests can be made to fail (failures) or held until released
    (gates, keyed by (endpoint, *args)).
    """

    def __init__(
        self,
        employees: Sequence[Employee],
        pages: dict[int, TransactionPage],
        by_employee: dict[str, Sequence[Transaction]],
    ) -> None:
        self.employees = list(employees)
        self.pages = dict(pages)
        self.by_employee = dict(by_employee)
        self.calls: list[tuple] = []
        self.failures: set[str] = set()
        self.gates: dict[tuple, asyncio.Event] = {}

    def calls_to(self, endpoint: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == endpoint]

    async def _request(self, endpoint: str, *args) -> None:
        self.calls.append((endpoint, *args))
        gate = self.gates.get((endpoint, *args))
        if gate is not None:
            await gate.wait()
        if endpoint in self.failures:
            raise FetchFailed(endpoint, "scripted failure")

    async def get_employees(self) -> Sequence[Employee]:
        await self._request(EMPLOYEES)
        return list(self.employees)

    async def get_transaction_page(self, page: int) -> TransactionPage:
        await self._request(PAGINATED_TRANSACTIONS, page)
        if page not in self.pages:
            raise FetchFailed(PAGINATED_TRANSACTIONS, "Invalid page", {"page": page})
        return self.pages[page]

    async def get_transactions_by_employee(
        self, employee_id: str
    ) -> Sequence[Transaction]:
        await self._request(TRANSACTIONS_BY_EMPLOYEE, employee_id)
        return list(self.by_employee.get(employee_id, []))

    async def set_transaction_approval(self, transaction_id: str, value: bool) -> None:
        await self._request(SET_TRANSACTION_APPROVAL, transaction_id, value)


@pytest.fixture
def service():
    """Directory [A, B]; two pages where page 2 repeats t2; B owns t4 and t5."""
    return FakeTransactionService(
        employees=[EMPLOYEE_A, EMPLOYEE_B],
        pages={
            1: TransactionPage(data=[T1, T2], next_page=2),
            2: TransactionPage(data=[T2, T3], next_page=None),
        },
        by_employee={"A": [T1, T3], "B": [T4, T5]},
    )


def ids(transactions) -> list[str]:
    return [t.id for t in transactions]
