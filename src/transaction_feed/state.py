"""
Reflex state management for the Transaction Feed application.

This module contains the application state class that exposes the feed to
the UI: the employee filter, the accumulated transactions and the flags
controlling the "View More" button. Each browser session drives its own
FeedController, held in a bounded FeedSessions; the state only mirrors the
controller's snapshot.
"""

from typing import AsyncGenerator

import reflex as rx

from transaction_feed.config import FeedConfig
from transaction_feed.feed import FeedController
from transaction_feed.lib import logs
from transaction_feed.models.reflex_models import (
    EmployeeModel,
    TransactionModel,
    to_transaction_model,
)
from transaction_feed.services import get_transaction_service
from transaction_feed.sessions import (
    ALL_OPTION,
    FeedSessions,
    employee_for_option,
    employee_options,
    option_after_command,
    run_command,
)

LOG = logs.logger(__file__)

APP_TITLE = "Transactions"
APP_SUBTITLE = "Browse all transactions or filter by employee."

_SESSIONS = FeedSessions(
    lambda: FeedController(get_transaction_service()),
    max_sessions=FeedConfig.from_env().max_sessions,
)


class FeedState(rx.State):
    """
    Main application state for the Transaction Feed.

    Handles employee filtering, pagination and approval toggles.
    """

    employees: list[EmployeeModel] = []
    transactions: list[TransactionModel] = []
    selected_employee_id: str = ALL_OPTION

    is_loading: bool = True
    can_load_more: bool = False
    has_more: bool = False
    error_message: str = ""

    @rx.var
    def is_empty(self) -> bool:
        """Check if empty state should be shown."""
        return not self.is_loading and len(self.transactions) == 0

    @rx.var
    def result_summary(self) -> str:
        """Generate summary text for the accumulated transactions."""
        count = len(self.transactions)
        noun = "transaction" if count == 1 else "transactions"
        return f"{count} {noun} loaded"

    @rx.event
    async def on_load(self) -> AsyncGenerator:
        """
        Event handler for initial page load.

        Loads the employee directory and the first page of transactions.
        """
        feed = self._feed()
        self.is_loading = True
        self.error_message = ""
        yield
        try:
            self.error_message = await run_command(feed.start(), "Initial load")
        finally:
            self._refresh(feed)

    @rx.event
    async def select_employee(self, value: str) -> AsyncGenerator:
        """
        Event handler for the employee filter.

        On failure the select is cleared so the same option can be chosen
        again to retry.

        Args:
            value: Employee id, or ALL_OPTION for every employee.
        """
        feed = self._feed()
        employee = employee_for_option(feed.employees, value)
        self.selected_employee_id = value
        self.transactions = []
        self.is_loading = True
        self.error_message = ""
        yield
        try:
            self.error_message = await run_command(
                feed.select_employee(employee), "Filter change"
            )
            self.selected_employee_id = option_after_command(
                value, self.error_message
            )
        finally:
            self._refresh(feed)

    @rx.event
    async def load_more(self) -> AsyncGenerator:
        """Event handler for the "View More" button."""
        feed = self._feed()
        self.is_loading = True
        self.error_message = ""
        yield
        try:
            self.error_message = await run_command(feed.load_more(), "Load more")
        finally:
            self._refresh(feed)

    @rx.event
    async def set_approval(self, transaction_id: str, value: bool):
        """Event handler for the approval checkbox of a transaction row."""
        feed = self._feed()
        try:
            self.error_message = await run_command(
                feed.set_transaction_approval(transaction_id, value),
                "Approval update",
            )
        finally:
            self._refresh(feed)

    def _feed(self) -> FeedController:
        """Return the controller of the current session."""
        return _SESSIONS.get(self.router.session.client_token)

    def _refresh(self, feed: FeedController) -> None:
        """Copy the controller's snapshot into the state vars."""
        snapshot = feed.snapshot()
        self.employees = [
            EmployeeModel(id=value, label=label)
            for value, label in employee_options(snapshot.employees)
        ]
        self.transactions = [to_transaction_model(t) for t in snapshot.transactions]
        self.is_loading = snapshot.is_loading
        self.can_load_more = snapshot.can_load_more
        self.has_more = snapshot.has_more
