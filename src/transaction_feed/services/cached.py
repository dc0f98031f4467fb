"""
Request cache decorator for TransactionService implementations.

Reads are served from a RequestCache when a response for the same endpoint
and parameters has been seen before. Responses are stored as JSON payloads
and deserialized on every hit, so callers never share mutable state with
the cache. Approval updates bypass the cache and evict the transaction
endpoints whose cached responses they make stale.
"""

from typing import Sequence

from transaction_feed.lib import logs
from transaction_feed.lib.caches import RequestCache
from transaction_feed.models.transaction import (
    Employee,
    Transaction,
    TransactionPage,
    deserialize_employee,
    deserialize_page,
    deserialize_transaction,
    serialize_employee,
    serialize_page,
    serialize_transaction,
)
from transaction_feed.services.transaction_service import (
    EMPLOYEES,
    PAGINATED_TRANSACTIONS,
    TRANSACTIONS_BY_EMPLOYEE,
    TransactionService,
)

LOG = logs.logger(__file__)


class CachedTransactionService(TransactionService):
    """
    Caching wrapper around another TransactionService.

    Attributes:
        service: The wrapped service that performs real requests.
        cache: Response cache shared by all reads.
    """

    def __init__(
        self, service: TransactionService, cache: RequestCache | None = None
    ) -> None:
        self.service = service
        self.cache = cache if cache is not None else RequestCache()

    async def get_employees(self) -> Sequence[Employee]:
        entry = self.cache.get(EMPLOYEES)
        if entry is not None:
            return [deserialize_employee(e) for e in entry.value]
        employees = await self.service.get_employees()
        self.cache.set(EMPLOYEES, None, [serialize_employee(e) for e in employees])
        return list(employees)

    async def get_transaction_page(self, page: int) -> TransactionPage:
        params = {"page": page}
        entry = self.cache.get(PAGINATED_TRANSACTIONS, params)
        if entry is not None:
            return deserialize_page(entry.value)
        result = await self.service.get_transaction_page(page)
        self.cache.set(PAGINATED_TRANSACTIONS, params, serialize_page(result))
        return result

    async def get_transactions_by_employee(
        self, employee_id: str
    ) -> Sequence[Transaction]:
        params = {"employeeId": employee_id}
        entry = self.cache.get(TRANSACTIONS_BY_EMPLOYEE, params)
        if entry is not None:
            return [deserialize_transaction(t) for t in entry.value]
        transactions = await self.service.get_transactions_by_employee(employee_id)
        self.cache.set(
            TRANSACTIONS_BY_EMPLOYEE,
            params,
            [serialize_transaction(t) for t in transactions],
        )
        return list(transactions)

    async def set_transaction_approval(self, transaction_id: str, value: bool) -> None:
        await self.service.set_transaction_approval(transaction_id, value)
        self.cache.clear_by_endpoint(PAGINATED_TRANSACTIONS, TRANSACTIONS_BY_EMPLOYEE)
        LOG.info("Approval set - transaction:%s value:%s", transaction_id, value)

    async def close(self) -> None:
        await self.service.close()
        self.cache.close()
