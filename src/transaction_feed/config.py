"""
Environment-driven configuration for the Transaction Feed.

All settings are read from environment variables so the same build can run
the demo locally or point at another service implementation.

Environment Variables:
    TRANSACTION_FEED_SERVICE: Service kind resolved by the registry (default "demo").
    TRANSACTION_FEED_PAGE_SIZE: Transactions per page in the demo service (default 5).
    TRANSACTION_FEED_LATENCY_MS: Simulated demo latency in milliseconds (default 0).
    TRANSACTION_FEED_USE_CACHE: Wrap the service in the request cache (default true).
    TRANSACTION_FEED_PORT: Port used by app.main() (default 8000).
    TRANSACTION_FEED_MAX_SESSIONS: Feed sessions kept in memory (default 256).
    LOG_LEVEL: Logging level name (default INFO).
"""

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes"}


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


def _int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        msg = f"{name} must be an integer, got {raw!r}"
        raise ValueError(msg) from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def log_level() -> str:
    """Return the configured logging level name."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True, slots=True)
class FeedConfig:
    """
    Resolved application settings.

    Attributes:
        service_kind: Registry key of the TransactionService to use.
        page_size: Number of transactions per page served by the demo service.
        latency_ms: Artificial delay applied to each demo request.
        use_cache: Whether reads go through the request cache.
        port: Port for the development server.
        max_sessions: Most recently used browser sessions whose feeds are kept.
    """

    service_kind: str = "demo"
    page_size: int = 5
    latency_ms: int = 0
    use_cache: bool = True
    port: int = 8000
    max_sessions: int = 256

    @classmethod
    def from_env(cls) -> "FeedConfig":
        """Build the configuration from the current environment."""
        return cls(
            service_kind=os.getenv("TRANSACTION_FEED_SERVICE", "demo").lower(),
            page_size=_int("TRANSACTION_FEED_PAGE_SIZE", 5, minimum=1),
            latency_ms=_int("TRANSACTION_FEED_LATENCY_MS", 0),
            use_cache=_flag("TRANSACTION_FEED_USE_CACHE", "true"),
            port=_int("TRANSACTION_FEED_PORT", 8000, minimum=1),
            max_sessions=_int("TRANSACTION_FEED_MAX_SESSIONS", 256, minimum=1),
        )
