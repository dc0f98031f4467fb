"""
Reflex-compatible models for the Transaction Feed UI.

These models extend rx.Base so they can be used with rx.foreach and
other Reflex reactive components.
"""

import reflex as rx

from transaction_feed.models.transaction import Transaction


class EmployeeModel(rx.Base):
    """Employee option shown in the filter select."""

    id: str = ""
    label: str = ""


class TransactionModel(rx.Base):
    """Transaction row."""

    id: str = ""
    amount: str = ""
    employee_name: str = ""
    merchant: str = ""
    date: str = ""
    approved: bool = False


def to_transaction_model(transaction: Transaction) -> TransactionModel:
    """
    Convert a Transaction to a TransactionModel.

    Amount and date are pre-formatted since Reflex vars render as-is.
    """
    return TransactionModel(
        id=transaction.id,
        amount=transaction.formatted_amount(),
        employee_name=transaction.employee.label,
        merchant=transaction.merchant,
        date=transaction.formatted_date(),
        approved=transaction.approved,
    )
