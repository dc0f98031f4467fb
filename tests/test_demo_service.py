import asyncio

import pytest

from transaction_feed.data.demo_transactions import DEMO_EMPLOYEES, DEMO_TRANSACTIONS
from transaction_feed.errors import FetchFailed
from transaction_feed.feed import FeedController
from transaction_feed.services.transaction_service_demo import DemoTransactionService


def test_pages_cover_all_transactions_then_stop():
    service = DemoTransactionService(page_size=5)
    seen = []
    page_number = 1

    while page_number is not None:
        page = asyncio.run(service.get_transaction_page(page_number))
        seen.extend(t.id for t in page.data)
        page_number = page.next_page

    assert seen == [t.id for t in DEMO_TRANSACTIONS]


def test_last_page_has_no_next_page():
    service = DemoTransactionService(page_size=5)

    page = asyncio.run(service.get_transaction_page(4))

    assert len(page.data) == len(DEMO_TRANSACTIONS) - 15
    assert page.next_page is None


@pytest.mark.parametrize("page", [0, 5])
def test_invalid_page_raises(page):
    service = DemoTransactionService(page_size=5)

    with pytest.raises(FetchFailed, match="Invalid page"):
        asyncio.run(service.get_transaction_page(page))


def test_empty_dataset_serves_one_empty_page():
    service = DemoTransactionService(employees=[], transactions=[])

    page = asyncio.run(service.get_transaction_page(1))

    assert list(page.data) == []
    assert page.next_page is None


def test_transactions_by_employee_filters():
    service = DemoTransactionService()
    employee = DEMO_EMPLOYEES[0]

    result = asyncio.run(service.get_transactions_by_employee(employee.id))

    assert result
    assert all(t.employee.id == employee.id for t in result)


def test_empty_employee_id_raises():
    service = DemoTransactionService()

    with pytest.raises(FetchFailed):
        asyncio.run(service.get_transactions_by_employee(""))


def test_approval_is_reflected_in_later_reads():
    service = DemoTransactionService(page_size=5)
    target = DEMO_TRANSACTIONS[0]

    asyncio.run(service.set_transaction_approval(target.id, not target.approved))
    page = asyncio.run(service.get_transaction_page(1))

    assert page.data[0].approved is (not target.approved)


def test_unknown_transaction_approval_raises():
    service = DemoTransactionService()

    with pytest.raises(FetchFailed):
        asyncio.run(service.set_transaction_approval("missing", True))


def test_feed_pages_through_demo_data():
    controller = FeedController(DemoTransactionService(page_size=5, latency_ms=1))

    async def scenario():
        await controller.start()
        while controller.snapshot().has_more:
            await controller.load_more()

    asyncio.run(scenario())

    assert [t.id for t in controller.transactions] == [t.id for t in DEMO_TRANSACTIONS]
    assert len(controller.employees) == len(DEMO_EMPLOYEES)
