"""Reflex configuration for the Transaction Feed application."""

import reflex as rx

config = rx.Config(
    app_name="transaction_feed",
    # Use the src directory structure
    app_module_import="transaction_feed.app",
)
