"""
Service factory for the Transaction Feed.

This module provides the get_transaction_service() factory function that
returns the configured TransactionService implementation.

Available Implementations:
- demo: In-memory service with static transaction data

The service is cached at the module level, so the same instance is reused
across all sessions. Configure via the TRANSACTION_FEED_SERVICE environment
variable; TRANSACTION_FEED_USE_CACHE wraps it in the request cache,
whose temporary directory is closed and removed at interpreter exit.
"""

import atexit
from functools import cache
from typing import Callable, Dict

from transaction_feed.config import FeedConfig
from transaction_feed.lib import logs
from transaction_feed.lib.caches import RequestCache
from transaction_feed.services.cached import CachedTransactionService
from transaction_feed.services.transaction_service import TransactionService
from transaction_feed.services.transaction_service_demo import DemoTransactionService

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[FeedConfig], TransactionService]] = {
    "demo": lambda cfg: DemoTransactionService(
        page_size=cfg.page_size, latency_ms=cfg.latency_ms
    ),
}


@cache
def get_transaction_service(kind: str | None = None) -> TransactionService:
    """Return the configured transaction service implementation."""
    cfg = FeedConfig.from_env()
    resolved_kind = (kind or cfg.service_kind).lower()
    LOG.info(
        "get_transaction_service - kind:%s resolved_kind:%s cached:%s",
        kind,
        resolved_kind,
        cfg.use_cache,
    )
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown transaction service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    service = factory(cfg)
    if cfg.use_cache:
        request_cache = RequestCache()
        # Temporary cache directory is removed at interpreter exit
        atexit.register(request_cache.close)
        return CachedTransactionService(service, request_cache)
    return service


__all__ = [
    "CachedTransactionService",
    "DemoTransactionService",
    "TransactionService",
    "get_transaction_service",
]
