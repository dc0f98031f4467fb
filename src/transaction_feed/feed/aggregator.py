"""
Feed aggregation: the active transaction batch and the accumulator.

The aggregator owns the three data sources and the accumulator. After every
fetch and every invalidation the caller runs sync(), which recomputes the
active batch from the two transaction sources and merges it into the
accumulator when it changed.
"""

from contextlib import contextmanager
from typing import Iterator, Sequence

from transaction_feed.errors import FeedStateError
from transaction_feed.feed.accumulator import TransactionAccumulator
from transaction_feed.feed.sources import (
    EmployeeDirectory,
    PaginatedTransactions,
    TransactionsByEmployee,
)
from transaction_feed.lib import logs
from transaction_feed.models.common import FeedSnapshot
from transaction_feed.models.transaction import Transaction, TransactionPage
from transaction_feed.services.transaction_service import TransactionService

LOG = logs.logger(__file__)


def active_batch(
    paged: TransactionPage | None,
    scoped: Sequence[Transaction] | None,
) -> Sequence[Transaction] | None:
    """
    Return the batch the feed currently shows.

    The paginated page wins when present, then the employee result. None
    means nothing has been fetched for the current mode; an empty sequence
    means a fetch returned no transactions.

    Raises:
        FeedStateError: If both sources hold data.
    """
    if paged is not None and scoped is not None:
        raise FeedStateError("paginated and employee results are both cached")
    if paged is not None:
        return paged.data
    return scoped


class FeedAggregator:
    """
    Owner of the feed's source caches and accumulator.

    Attributes:
        employees: Fetch-once employee directory.
        paginated: "All transactions" source.
        by_employee: Employee-scoped source.
        accumulator: Every transaction seen since the last selection change.
        generation: Incremented by clear(); sync() calls tagged with an older
            generation are ignored.
    """

    def __init__(self, service: TransactionService) -> None:
        self.employees = EmployeeDirectory(service)
        self.paginated = PaginatedTransactions(service)
        self.by_employee = TransactionsByEmployee(service)
        self.accumulator = TransactionAccumulator()
        self.generation = 0
        self._batch: Sequence[Transaction] | None = None
        self._busy = 0

    @property
    def batch(self) -> Sequence[Transaction] | None:
        """Active batch as of the last sync()."""
        return self._batch

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return self.accumulator.items

    @property
    def is_loading(self) -> bool:
        return (
            self._busy > 0
            or self.employees.loading
            or self.paginated.loading
            or self.by_employee.loading
        )

    @property
    def can_load_more(self) -> bool:
        """Show "load more" once the current mode has fetched any data."""
        return self._batch is not None

    @property
    def has_more(self) -> bool:
        """True while the paginated source has pages left to fetch."""
        return self.paginated.data is not None and not self.paginated.exhausted

    @contextmanager
    def busy(self) -> Iterator[None]:
        """Mark a user action as in flight; cleared even when it fails."""
        self._busy += 1
        try:
            yield
        finally:
            self._busy -= 1

    def clear(self) -> int:
        """
        Empty the accumulator and start a new generation.

        Returns:
            The new generation, used to tag the sync() calls of the action.
        """
        self.accumulator.clear()
        self.generation += 1
        return self.generation

    def sync(self, generation: int | None = None) -> int:
        """
        Recompute the active batch and merge it if it changed.

        Args:
            generation: Generation the calling action started in. A stale
                generation means the selection changed meanwhile and the
                call is ignored.

        Returns:
            Number of transactions appended to the accumulator.
        """
        if generation is not None and generation != self.generation:
            LOG.info(
                "Ignoring stale sync - generation:%s current:%s",
                generation,
                self.generation,
            )
            return 0
        batch = active_batch(self.paginated.data, self.by_employee.data)
        changed = batch is not self._batch
        self._batch = batch
        if batch is None or not changed:
            return 0
        added = self.accumulator.merge(batch)
        LOG.info(
            "Merged batch - received:%s added:%s total:%s",
            len(batch),
            added,
            len(self.accumulator),
        )
        return added

    def snapshot(self, selected_employee_id: str | None = None) -> FeedSnapshot:
        """Return the current read model for the rendering layer."""
        return FeedSnapshot(
            transactions=self.accumulator.items,
            employees=self.employees.data or (),
            selected_employee_id=selected_employee_id,
            is_loading=self.is_loading,
            can_load_more=self.can_load_more,
            has_more=self.has_more,
        )
