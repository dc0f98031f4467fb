"""
Transaction feed core: sources, aggregation and selection.

Modules:
- sources: Cached employee directory, paginated and employee-scoped sources
- accumulator: Deduplicated running list of transactions
- aggregator: Active batch computation and merging
- selection: Employee filter state
- controller: Commands issued by the UI (select employee, load more)
"""

from transaction_feed.feed.accumulator import TransactionAccumulator
from transaction_feed.feed.aggregator import FeedAggregator, active_batch
from transaction_feed.feed.controller import FeedController
from transaction_feed.feed.selection import ALL, Selection
from transaction_feed.feed.sources import (
    EmployeeDirectory,
    FetchCacheEntry,
    PaginatedTransactions,
    TransactionsByEmployee,
)

__all__ = [
    "ALL",
    "EmployeeDirectory",
    "FeedAggregator",
    "FeedController",
    "FetchCacheEntry",
    "PaginatedTransactions",
    "Selection",
    "TransactionAccumulator",
    "TransactionsByEmployee",
    "active_batch",
]
