"""
Static and demo data for the Transaction Feed.

This package contains fixture data used by DemoTransactionService for
development, testing, and demonstrations without a live data source.

Modules:
- demo_transactions: Pre-populated Employee and Transaction objects
"""
