"""
Transaction domain models and serialization helpers.

The data source speaks camelCase JSON:

    TransactionPage  {"data": [Transaction, ...], "nextPage": int | null}
    Transaction      {"id", "amount", "employee", "merchant", "date", "approved"}
    Employee         {"id", "firstName", "lastName"}

Serialization functions convert between these payloads and the dataclasses
below. Deserialization wraps payloads in benedict so nested keypaths such as
"employee.firstName" resolve to defaults instead of raising KeyError.
"""

from dataclasses import dataclass, replace
from typing import Any, Mapping, Sequence

from benedict import benedict

from transaction_feed.utils import format_currency, format_date


@dataclass(frozen=True, slots=True)
class Employee:
    """An employee who owns transactions."""

    id: str
    first_name: str
    last_name: str

    @property
    def label(self) -> str:
        """Return the display name used by the employee filter."""
        return f"{self.first_name} {self.last_name}".strip()


# Pseudo-employee meaning "no filter"
ALL_EMPLOYEES = Employee(id="", first_name="All", last_name="Employees")


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single transaction; id is unique across every source."""

    id: str
    amount: float
    employee: Employee
    merchant: str
    date: str
    approved: bool = False

    def formatted_amount(self) -> str:
        return format_currency(self.amount)

    def formatted_date(self) -> str:
        return format_date(self.date)

    def with_approval(self, approved: bool) -> "Transaction":
        """Return a copy with the approval flag replaced."""
        return replace(self, approved=approved)


@dataclass(frozen=True, slots=True)
class TransactionPage:
    """One page of the "all transactions" feed."""

    data: Sequence[Transaction]
    next_page: int | None

    @property
    def has_more(self) -> bool:
        """Return True when another page can be requested."""
        return self.next_page is not None


def serialize_employee(employee: Employee) -> dict:
    """Convert an Employee into its JSON payload."""
    return {
        "id": employee.id,
        "firstName": employee.first_name,
        "lastName": employee.last_name,
    }


def serialize_transaction(transaction: Transaction) -> dict:
    """Convert a Transaction into its JSON payload."""
    return {
        "id": transaction.id,
        "amount": transaction.amount,
        "employee": serialize_employee(transaction.employee),
        "merchant": transaction.merchant,
        "date": transaction.date,
        "approved": transaction.approved,
    }


def serialize_page(page: TransactionPage) -> dict:
    """Convert a TransactionPage into its JSON payload."""
    return {
        "data": [serialize_transaction(txn) for txn in page.data],
        "nextPage": page.next_page,
    }


def deserialize_employee(payload: Mapping[str, Any]) -> Employee:
    """Convert an employee payload back into an Employee."""
    b = benedict(dict(payload))
    return Employee(
        id=str(b.get("id", "")),
        first_name=b.get("firstName", ""),
        last_name=b.get("lastName", ""),
    )


def deserialize_transaction(payload: Mapping[str, Any]) -> Transaction:
    """Convert a transaction payload back into a Transaction."""
    b = benedict(dict(payload))
    return Transaction(
        id=str(b.get("id", "")),
        amount=float(b.get("amount") or 0),
        employee=Employee(
            id=str(b.get("employee.id", "")),
            first_name=b.get("employee.firstName", ""),
            last_name=b.get("employee.lastName", ""),
        ),
        merchant=b.get("merchant", ""),
        date=b.get("date", ""),
        approved=bool(b.get("approved", False)),
    )


def deserialize_page(payload: Mapping[str, Any]) -> TransactionPage:
    """Convert a page payload back into a TransactionPage."""
    next_page = payload.get("nextPage")
    return TransactionPage(
        data=[deserialize_transaction(item) for item in payload.get("data") or []],
        next_page=None if next_page is None else int(next_page),
    )
