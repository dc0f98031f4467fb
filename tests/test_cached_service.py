import asyncio

import pytest
from conftest import ids

from transaction_feed.errors import FetchFailed
from transaction_feed.lib.caches import RequestCache
from transaction_feed.services.cached import CachedTransactionService
from transaction_feed.services.transaction_service import (
    EMPLOYEES,
    PAGINATED_TRANSACTIONS,
    TRANSACTIONS_BY_EMPLOYEE,
)


@pytest.fixture
def cache(tmp_path):
    request_cache = RequestCache(tmp_path / "requests")
    yield request_cache
    request_cache.close()


def test_empty_injected_cache_is_used(service, cache):
    assert len(cache) == 0

    cached = CachedTransactionService(service, cache)
    asyncio.run(cached.get_employees())

    assert cached.cache is cache
    assert len(cache) == 1


def test_reads_are_served_from_cache(service, cache):
    cached = CachedTransactionService(service, cache)

    first = asyncio.run(cached.get_transaction_page(1))
    second = asyncio.run(cached.get_transaction_page(1))

    assert ids(second.data) == ids(first.data)
    assert second.next_page == first.next_page == 2
    assert len(service.calls_to(PAGINATED_TRANSACTIONS)) == 1


def test_cache_keys_include_parameters(service, cache):
    cached = CachedTransactionService(service, cache)

    a = asyncio.run(cached.get_transactions_by_employee("A"))
    b = asyncio.run(cached.get_transactions_by_employee("B"))
    b_again = asyncio.run(cached.get_transactions_by_employee("B"))

    assert ids(a) == ["t1", "t3"]
    assert ids(b_again) == ids(b) == ["t4", "t5"]
    assert len(service.calls_to(TRANSACTIONS_BY_EMPLOYEE)) == 2


def test_cached_employees_round_trip(service, cache):
    cached = CachedTransactionService(service, cache)

    asyncio.run(cached.get_employees())
    employees = asyncio.run(cached.get_employees())

    assert [e.label for e in employees] == ["Ada Lovelace", "Bob Babbage"]
    assert len(service.calls_to(EMPLOYEES)) == 1


def test_approval_evicts_transaction_reads(service, cache):
    cached = CachedTransactionService(service, cache)
    asyncio.run(cached.get_employees())
    asyncio.run(cached.get_transaction_page(1))
    asyncio.run(cached.get_transactions_by_employee("B"))

    asyncio.run(cached.set_transaction_approval("t1", True))
    asyncio.run(cached.get_transaction_page(1))
    asyncio.run(cached.get_employees())

    assert len(service.calls_to(PAGINATED_TRANSACTIONS)) == 2
    assert len(service.calls_to(EMPLOYEES)) == 1
    assert len(cache) == 2


def test_failed_reads_are_not_cached(service, cache):
    cached = CachedTransactionService(service, cache)
    service.failures.add(PAGINATED_TRANSACTIONS)

    with pytest.raises(FetchFailed):
        asyncio.run(cached.get_transaction_page(1))

    service.failures.clear()
    page = asyncio.run(cached.get_transaction_page(1))
    assert ids(page.data) == ["t1", "t2"]
    assert len(service.calls_to(PAGINATED_TRANSACTIONS)) == 2


def test_request_cache_clear_by_endpoint(tmp_path):
    cache = RequestCache(tmp_path / "c")
    cache.set("employees", None, ["e"])
    cache.set("paginatedTransactions", {"page": 1}, {"data": []})
    cache.set("paginatedTransactions", {"page": 2}, {"data": []})

    removed = cache.clear_by_endpoint("paginatedTransactions")

    assert removed == 2
    assert cache.get("paginatedTransactions", {"page": 1}) is None
    assert cache.get("employees").value == ["e"]
    cache.close()


def test_temporary_request_cache_is_removed_on_close():
    cache = RequestCache()
    cache.set("employees", None, [])
    directory = cache.cache_dir

    cache.close()

    assert not directory.exists()
