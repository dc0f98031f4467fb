"""
Exception types raised by the Transaction Feed.

Every data source failure surfaces as FetchFailed. The feed never retries
and never catches these; they propagate to the action that started the
fetch, and cached state is left exactly as it was before the call.
"""

from typing import Any, Mapping


class FeedError(Exception):
    """Base class for Transaction Feed errors."""


class FetchFailed(FeedError):
    """
    A data source request failed.

    Attributes:
        endpoint: Logical endpoint that was requested.
        params: Request parameters, if any.
    """

    def __init__(
        self,
        endpoint: str,
        message: str = "Fetch failed",
        params: Mapping[str, Any] | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.params = dict(params or {})
        super().__init__(f"{endpoint}: {message}")


class FeedStateError(FeedError):
    """Both transaction sources hold data at once."""
