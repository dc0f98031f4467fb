"""
Request caching utilities backed by diskcache.

Provides a RequestCache that stores data source responses keyed by endpoint
and parameters. The cache lives in a throwaway temporary directory, so
nothing survives the process. Every entry is tagged with its endpoint,
which lets writes evict all cached reads of the endpoints they affect.
"""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import diskcache

from transaction_feed.lib import logs, objects

LOG = logs.logger(__file__)


@dataclass
class CacheEntry:
    """
    Wrapper around a cached value.

    Attributes:
        value: The cached value.
    """

    value: Any


class RequestCache:
    """
    Endpoint-tagged response cache.

    Thread-safe and process-safe through diskcache; values must be
    picklable (the services store JSON-compatible payloads).
    """

    def __init__(self, cache_dir: str | Path | None = None) -> None:
        """
        Initialize the request cache.

        Args:
            cache_dir: Directory for cache files. None creates a temporary
                       directory that is removed by close().
        """
        self._owns_dir = cache_dir is None
        self._cache = diskcache.Cache(None if cache_dir is None else str(cache_dir))
        self.cache_dir = Path(self._cache.directory)

    def get(
        self, endpoint: str, params: Mapping[str, Any] | None = None
    ) -> CacheEntry | None:
        """
        Return the cached response for a request, or None on a miss.

        Args:
            endpoint: Logical endpoint name.
            params: Request parameters.
        """
        key = objects.request_key(endpoint, params)
        cached = self._cache.get(key, default=None)
        if cached is None:
            return None
        LOG.debug("Cache hit - key:%s", key)
        return CacheEntry(value=cached)

    def set(
        self,
        endpoint: str,
        params: Mapping[str, Any] | None,
        value: Any,
        expire: int | None = None,
    ) -> None:
        """
        Store a response, tagged with its endpoint.

        Args:
            endpoint: Logical endpoint name.
            params: Request parameters.
            value: Response payload to store.
            expire: TTL in seconds. None means no expiration.
        """
        key = objects.request_key(endpoint, params)
        self._cache.set(key, value, expire=expire, tag=endpoint)

    def clear_by_endpoint(self, *endpoints: str) -> int:
        """
        Evict every cached response for the given endpoints.

        Returns:
            Number of entries removed.
        """
        removed = sum(self._cache.evict(endpoint) for endpoint in endpoints)
        LOG.info("Cache evicted - endpoints:%s removed:%s", endpoints, removed)
        return removed

    def clear(self) -> None:
        """Clear all entries from the cache."""
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)

    def close(self) -> None:
        """Close the cache, removing its directory if it was temporary."""
        self._cache.close()
        if self._owns_dir:
            shutil.rmtree(self.cache_dir, ignore_errors=True)
