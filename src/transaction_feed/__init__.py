"""
Transaction Feed: a Reflex application for browsing employee transactions.

This package presents a paginated, filterable feed of transactions. Users
either page through every transaction or narrow the feed to one employee,
while every transaction seen so far is accumulated into a deduplicated list.

Subpackages:
- feed: Fetch coordination, source caches and the transaction accumulator
- models: Data models and serialization
- services: Data access layer (demo implementation and request caching)
- components: Reflex UI components
- data: Static demo fixtures
- lib: Logging, hashing and caching helpers

Main entry points:
- app.main(): Start the development server
- feed.FeedController: Drive the feed without a UI
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
