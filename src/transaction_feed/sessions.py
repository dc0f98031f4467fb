"""
Per-browser-session feed bookkeeping for the Reflex state.

FeedState holds only serializable vars, so each session's FeedController
lives here, keyed by client token. Only the most recently used sessions are
kept; the least recently used controller is dropped once the bound is
reached and a returning session simply starts a fresh feed.

The helpers below hold the logic of the state's event handlers so it can be
exercised without a running Reflex app.
"""

from collections import OrderedDict
from typing import Awaitable, Callable, Sequence

from transaction_feed.errors import FetchFailed
from transaction_feed.feed import FeedController
from transaction_feed.lib import logs
from transaction_feed.models.transaction import ALL_EMPLOYEES, Employee

LOG = logs.logger(__file__)

# Select items may not use an empty value, so "everyone" gets its own key
ALL_OPTION = "all"

# Select value that shows the placeholder; re-choosing any option fires on_change
NO_OPTION = ""


class FeedSessions:
    """
    Bounded LRU of FeedControllers keyed by client token.

    Attributes:
        max_sessions: Number of controllers kept before eviction.
    """

    def __init__(
        self, factory: Callable[[], FeedController], max_sessions: int = 256
    ) -> None:
        if max_sessions < 1:
            raise ValueError(f"max_sessions must be >= 1, got {max_sessions}")
        self._factory = factory
        self._feeds: OrderedDict[str, FeedController] = OrderedDict()
        self.max_sessions = max_sessions

    def get(self, token: str) -> FeedController:
        """Return the session's controller, creating it on first use."""
        feed = self._feeds.get(token)
        if feed is not None:
            self._feeds.move_to_end(token)
            return feed
        feed = self._factory()
        self._feeds[token] = feed
        while len(self._feeds) > self.max_sessions:
            evicted, _ = self._feeds.popitem(last=False)
            LOG.info("Feed session evicted - token:%s", evicted)
        return feed

    def discard(self, token: str) -> None:
        self._feeds.pop(token, None)

    def __contains__(self, token: object) -> bool:
        return token in self._feeds

    def __len__(self) -> int:
        return len(self._feeds)


def employee_for_option(
    employees: Sequence[Employee], value: str
) -> Employee | None:
    """Map a select value to an Employee; ALL_OPTION and unknown ids mean everyone."""
    if value in (ALL_OPTION, NO_OPTION):
        return None
    return next((e for e in employees if e.id == value), None)


def employee_options(employees: Sequence[Employee]) -> list[tuple[str, str]]:
    """
    Return (value, label) pairs for the filter select.

    Empty until the directory has loaded, then "All Employees" first.
    """
    if not employees:
        return []
    return [(ALL_OPTION, ALL_EMPLOYEES.label)] + [(e.id, e.label) for e in employees]


async def run_command(command: Awaitable, action: str) -> str:
    """
    Await a feed command at the UI boundary.

    Returns:
        The FetchFailed message, or "" when the command succeeded.
    """
    try:
        await command
    except FetchFailed as e:
        LOG.error("%s failed: %s", action, e, exc_info=True)
        return str(e)
    return ""


def option_after_command(value: str, error: str) -> str:
    """Select value to show after a filter change; cleared on failure so it can be retried."""
    return NO_OPTION if error else value
