"""
Reflex application entry point for the Transaction Feed.

This module initializes the Reflex app and defines the main page layout.
"""

import reflex as rx

from transaction_feed.components import employee_select, transaction_results
from transaction_feed.config import FeedConfig
from transaction_feed.lib import logs
from transaction_feed.state import APP_SUBTITLE, APP_TITLE, FeedState

LOG = logs.logger(__file__)

_CONFIG = FeedConfig.from_env()
LOG.info(
    "Service: %s page_size:%s cache:%s",
    _CONFIG.service_kind,
    _CONFIG.page_size,
    _CONFIG.use_cache,
)

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap"


def page_header() -> rx.Component:
    """Build the hero text area at the top of the page."""
    return rx.box(
        rx.heading(APP_TITLE, size="6", as_="h1"),
        rx.text(APP_SUBTITLE, class_name="muted"),
        class_name="page-header",
    )


def index() -> rx.Component:
    """
    Build the main page layout.

    Returns:
        The complete page component with header, filter, and transactions.
    """
    return rx.box(
        rx.box(
            page_header(),
            employee_select(),
            transaction_results(),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[_FONT_URL],
)

app.add_page(
    index,
    title=APP_TITLE,
    on_load=FeedState.on_load,
)


def main() -> None:
    """Entrypoint for the `transaction-feed` console script."""
    # In production, use `reflex run` instead
    import subprocess
    import sys

    subprocess.run(
        [sys.executable, "-m", "reflex", "run", "--frontend-port", str(_CONFIG.port)]
    )


if __name__ == "__main__":
    main()
