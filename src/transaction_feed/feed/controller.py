"""
User-facing commands of the transaction feed.

FeedController turns filter changes and "load more" clicks into the
invalidate -> fetch -> merge sequences on the FeedAggregator. Every command
runs inside the aggregator's busy flag. Failures propagate to the caller
with caches and accumulator as they were before the failed fetch.
"""

from typing import Sequence

from transaction_feed.feed.aggregator import FeedAggregator
from transaction_feed.feed.selection import ALL, Selection
from transaction_feed.lib import logs
from transaction_feed.models.common import FeedSnapshot
from transaction_feed.models.transaction import Employee, Transaction
from transaction_feed.services.transaction_service import TransactionService

LOG = logs.logger(__file__)


class FeedController:
    """
    Selection state machine driving the feed.

    States are ALL and BY_EMPLOYEE(id). Changing the selection clears the
    accumulator and reloads from scratch; load_more() extends the current
    mode without clearing anything.
    """

    def __init__(
        self,
        service: TransactionService,
        aggregator: FeedAggregator | None = None,
    ) -> None:
        self._service = service
        self.aggregator = aggregator or FeedAggregator(service)
        self.selection: Selection = ALL

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return self.aggregator.transactions

    @property
    def employees(self) -> Sequence[Employee]:
        return self.aggregator.employees.data or ()

    @property
    def is_loading(self) -> bool:
        return self.aggregator.is_loading

    @property
    def can_load_more(self) -> bool:
        return self.aggregator.can_load_more

    def snapshot(self) -> FeedSnapshot:
        return self.aggregator.snapshot(self.selection.employee_id)

    async def start(self) -> bool:
        """
        Run the initial ALL load when nothing has been requested yet.

        Does nothing once an employee is selected, once the current mode has
        data, or once the directory is loaded or loading.

        Returns:
            False if nothing was done.
        """
        directory = self.aggregator.employees
        if (
            not self.selection.is_all
            or self.aggregator.batch is not None
            or directory.data is not None
            or directory.loading
        ):
            return False
        LOG.info("Initial load")
        generation = self.aggregator.clear()
        with self.aggregator.busy():
            await self._load_all(generation)
        return True

    async def select_employee(self, employee: Employee | None) -> None:
        """
        Switch the filter to an employee, or to everyone for None/ALL_EMPLOYEES.

        The accumulator is cleared and the new mode is loaded from scratch.

        Raises:
            FetchFailed: If a fetch of the new mode fails.
        """
        selection = Selection.for_employee(employee)
        LOG.info("Selection changed - from:%s to:%s", self.selection, selection)
        self.selection = selection
        generation = self.aggregator.clear()
        with self.aggregator.busy():
            if selection.is_all:
                await self._load_all(generation)
            else:
                await self._load_employee(selection.employee_id, generation)

    async def load_more(self) -> bool:
        """
        Extend the current mode: the next page, or a refetch of the employee.

        Ignored while another command is in flight. After the last page has
        been seen no request is made.

        Returns:
            False if the call was ignored because the feed is busy.

        Raises:
            FetchFailed: If the fetch fails.
        """
        if self.aggregator.is_loading:
            LOG.info("Load ignored - feed is busy")
            return False

        LOG.info(
            "Load Started - selection:%s length:%s",
            self.selection,
            len(self.aggregator.accumulator),
        )
        generation = self.aggregator.generation
        with self.aggregator.busy():
            if self.selection.is_all:
                await self.aggregator.paginated.fetch_all()
            else:
                await self.aggregator.by_employee.fetch_by_id(self.selection.employee_id)
            self.aggregator.sync(generation)
        LOG.info(
            "Load Complete - has_more:%s length:%s",
            self.aggregator.has_more,
            len(self.aggregator.accumulator),
        )
        return True

    async def set_transaction_approval(
        self, transaction_id: str, value: bool
    ) -> Transaction | None:
        """
        Record an approval and update the accumulated transaction in place.

        Returns:
            The updated transaction, or None if it is not in the feed.

        Raises:
            FetchFailed: If the service rejects the update.
        """
        with self.aggregator.busy():
            await self._service.set_transaction_approval(transaction_id, value)
        current = self.aggregator.accumulator.get(transaction_id)
        if current is None:
            return None
        updated = current.with_approval(value)
        self.aggregator.accumulator.replace(updated)
        return updated

    async def _load_all(self, generation: int) -> None:
        self.aggregator.by_employee.invalidate_data()
        self.aggregator.paginated.invalidate_data()
        self.aggregator.sync(generation)
        await self.aggregator.employees.fetch_all()
        await self.aggregator.paginated.fetch_all()
        self.aggregator.sync(generation)

    async def _load_employee(self, employee_id: str, generation: int) -> None:
        self.aggregator.paginated.invalidate_data()
        self.aggregator.by_employee.invalidate_data()
        self.aggregator.sync(generation)
        await self.aggregator.by_employee.fetch_by_id(employee_id)
        self.aggregator.sync(generation)
