"""
Employee filter component.

A select listing "All Employees" followed by the employee directory.
Disabled while the feed is loading; shows a loading label until the
directory has arrived, and the placeholder after a failed filter change.
"""

import reflex as rx

from transaction_feed.models.reflex_models import EmployeeModel
from transaction_feed.state import FeedState


def employee_select() -> rx.Component:
    """
    Build the employee filter card.

    Returns:
        The filter component.
    """
    return rx.box(
        rx.text("Filter by employee", class_name="field-label"),
        rx.cond(
            FeedState.employees.length() > 0,
            rx.select.root(
                rx.select.trigger(
                    placeholder="Select an employee",
                    class_name="employee-select-trigger",
                ),
                rx.select.content(rx.foreach(FeedState.employees, _option)),
                value=FeedState.selected_employee_id,
                on_change=FeedState.select_employee,
                disabled=FeedState.is_loading,
            ),
            rx.text("Loading employees...", class_name="muted"),
        ),
        class_name="card filter-card",
    )


def _option(employee: EmployeeModel) -> rx.Component:
    return rx.select.item(employee.label, value=employee.id)
