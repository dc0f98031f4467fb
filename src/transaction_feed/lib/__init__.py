"""
Local library modules shared across the Transaction Feed.

Modules:
    logs: Logging utilities
    objects: Stable hashing and JSON serialization
    caches: Endpoint-tagged request cache built on diskcache
"""

from transaction_feed.lib import caches, logs, objects

__all__ = ["caches", "logs", "objects"]
