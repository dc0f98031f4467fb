"""
Transaction list component for Reflex.

Renders the accumulated transactions, the empty and loading states, and the
"View More" button. The button appears once the current mode has fetched
any data and is disabled while a fetch is in flight.
"""

import reflex as rx

from transaction_feed.models.reflex_models import TransactionModel
from transaction_feed.state import FeedState


def transaction_results() -> rx.Component:
    """
    Build the transaction results container.

    Returns:
        The results container component.
    """
    return rx.box(
        rx.cond(
            FeedState.error_message != "",
            rx.callout(
                FeedState.error_message,
                icon="triangle_alert",
                color_scheme="red",
                class_name="error-callout",
            ),
        ),
        rx.cond(
            FeedState.is_empty,
            _empty(),
            _results(),
        ),
        id="results-container",
    )


def transaction_row(transaction: TransactionModel) -> rx.Component:
    """Build one transaction row with its approval checkbox."""
    return rx.box(
        rx.box(
            rx.text(transaction.merchant, class_name="merchant"),
            rx.text(
                transaction.employee_name, " - ", transaction.date, class_name="muted"
            ),
            class_name="transaction-text",
        ),
        rx.text(transaction.amount, class_name="amount"),
        rx.checkbox(
            checked=transaction.approved,
            disabled=FeedState.is_loading,
            on_change=lambda checked: FeedState.set_approval(transaction.id, checked),
            class_name="approval-checkbox",
        ),
        id=f"transaction-{transaction.id}",
        class_name="card transaction-row",
    )


def _results() -> rx.Component:
    return rx.box(
        rx.text(FeedState.result_summary, class_name="muted results-summary"),
        rx.foreach(FeedState.transactions, transaction_row),
        rx.cond(
            FeedState.can_load_more,
            rx.box(
                rx.button(
                    "View More",
                    on_click=FeedState.load_more,
                    disabled=FeedState.is_loading,
                    loading=FeedState.is_loading,
                    class_name="load-more-button",
                ),
                rx.cond(
                    FeedState.has_more,
                    None,
                    rx.text("All transactions loaded", class_name="load-more-hint end"),
                ),
                class_name="load-more-container",
            ),
            _loader(),
        ),
        class_name="results",
    )


def _empty() -> rx.Component:
    """Build the empty state when no transactions were returned."""
    return rx.box(
        rx.icon("receipt", class_name="empty-icon", size=60),
        rx.heading("No transactions found", size="3", as_="h3"),
        rx.text("No transactions available for this filter.", class_name="muted"),
        class_name="card empty-state",
    )


def _loader() -> rx.Component:
    return rx.box(
        rx.box(class_name="spinner"),
        rx.text("Loading transactions...", class_name="muted"),
        class_name="card loading-state",
    )
