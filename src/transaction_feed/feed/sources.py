"""
Cached data sources behind the transaction feed.

Each source owns one FetchCacheEntry and fills it from the TransactionService:

- EmployeeDirectory: fetch-once employee list
- PaginatedTransactions: "all transactions", one page per fetch
- TransactionsByEmployee: full transaction set of one employee

Failed requests propagate and leave the entry untouched. A request that
completes after invalidate_data() (or after a newer request was issued) is
discarded instead of being written into the entry.
"""

from dataclasses import dataclass
from typing import Awaitable, Generic, Sequence, TypeVar

from transaction_feed.lib import logs
from transaction_feed.models.transaction import Employee, Transaction, TransactionPage
from transaction_feed.services.transaction_service import TransactionService

LOG = logs.logger(__file__)

T = TypeVar("T")


@dataclass
class FetchCacheEntry(Generic[T]):
    """
    Last successful result of a source plus its in-flight request count.

    Attributes:
        last_result: None until the first successful fetch.
        in_flight: Number of requests currently awaited.
    """

    last_result: T | None = None
    in_flight: int = 0

    @property
    def loading(self) -> bool:
        return self.in_flight > 0


class _CachedSource(Generic[T]):
    """Shared request bookkeeping for the feed sources."""

    def __init__(self, service: TransactionService) -> None:
        self._service = service
        self.entry: FetchCacheEntry[T] = FetchCacheEntry()
        # Bumped on invalidation; requests issued under an older epoch are stale
        self._epoch = 0

    @property
    def data(self) -> T | None:
        return self.entry.last_result

    @property
    def loading(self) -> bool:
        return self.entry.loading

    async def _load(self, request: Awaitable[T]) -> tuple[T, bool]:
        """Await a request, returning its result and whether it is still current."""
        epoch = self._epoch
        self.entry.in_flight += 1
        try:
            result = await request
        finally:
            self.entry.in_flight -= 1
        return result, epoch == self._epoch

    def _reset(self) -> None:
        self._epoch += 1
        self.entry.last_result = None


class EmployeeDirectory(_CachedSource[Sequence[Employee]]):
    """Employee list, fetched once and reused for the life of the feed."""

    async def fetch_all(self) -> Sequence[Employee]:
        """
        Return the employee directory, fetching it on first use.

        Raises:
            FetchFailed: If the request fails; the directory stays unloaded.
        """
        if self.entry.last_result is not None:
            return self.entry.last_result
        employees, _ = await self._load(self._service.get_employees())
        self.entry.last_result = tuple(employees)
        LOG.info("Employees loaded - count:%s", len(self.entry.last_result))
        return self.entry.last_result


class PaginatedTransactions(_CachedSource[TransactionPage]):
    """
    The "all transactions" feed.

    last_result holds only the most recently fetched page; earlier pages
    live on in the feed's accumulator.

    Attributes:
        current_page: Number of the page in last_result, None when not started.
    """

    def __init__(self, service: TransactionService) -> None:
        super().__init__(service)
        self.current_page: int | None = None

    @property
    def next_page(self) -> int | None:
        """Page the next fetch_all() will request, None once exhausted."""
        if self.entry.last_result is None:
            return 1
        return self.entry.last_result.next_page

    @property
    def exhausted(self) -> bool:
        """True once the last page has been fetched."""
        return self.entry.last_result is not None and self.next_page is None

    async def fetch_all(self) -> TransactionPage | None:
        """
        Fetch the next page.

        Starts at page 1 and follows next_page afterwards. Once a page with
        no next_page has been seen this is a no-op returning that page; it
        never wraps around to page 1.

        Raises:
            FetchFailed: If the request fails; the prior page is kept.
        """
        previous = self.entry.last_result
        if self.exhausted:
            LOG.debug("Pagination exhausted at page %s", self.current_page)
            return previous

        page = self.next_page
        result, current = await self._load(self._service.get_transaction_page(page))
        if not current or self.entry.last_result is not previous:
            LOG.info("Discarding stale page %s", page)
            return self.entry.last_result

        self.entry.last_result = TransactionPage(
            data=tuple(result.data), next_page=result.next_page
        )
        self.current_page = page
        LOG.info(
            "Page loaded - page:%s items:%s next:%s",
            page,
            len(result.data),
            result.next_page,
        )
        return self.entry.last_result

    def invalidate_data(self) -> None:
        """Drop the cached page; the next fetch_all() starts at page 1."""
        self._reset()
        self.current_page = None


class TransactionsByEmployee(_CachedSource[Sequence[Transaction]]):
    """
    Complete transaction set of a single employee.

    Attributes:
        employee_id: Owner of last_result, None when empty.
    """

    def __init__(self, service: TransactionService) -> None:
        super().__init__(service)
        self.employee_id: str | None = None
        self._sequence = 0

    async def fetch_by_id(self, employee_id: str) -> Sequence[Transaction] | None:
        """
        Fetch every transaction of an employee, replacing any cached result.

        Only the most recently issued request may land; earlier ones are
        discarded on arrival and the current cached result is returned.

        Raises:
            FetchFailed: If the request fails; the prior result is kept.
        """
        self._sequence += 1
        sequence = self._sequence
        result, current = await self._load(
            self._service.get_transactions_by_employee(employee_id)
        )
        if not current or sequence != self._sequence:
            LOG.info("Discarding stale transactions for employee %s", employee_id)
            return self.entry.last_result

        self.entry.last_result = tuple(result)
        self.employee_id = employee_id
        LOG.info(
            "Employee transactions loaded - employee:%s items:%s",
            employee_id,
            len(self.entry.last_result),
        )
        return self.entry.last_result

    def invalidate_data(self) -> None:
        """Drop the cached result."""
        self._reset()
        self.employee_id = None
