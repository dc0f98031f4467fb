import asyncio

import pytest
from conftest import EMPLOYEE_A, EMPLOYEE_B, ids

from transaction_feed.feed import FeedController
from transaction_feed.services.transaction_service import TRANSACTIONS_BY_EMPLOYEE
from transaction_feed.sessions import (
    ALL_OPTION,
    NO_OPTION,
    FeedSessions,
    employee_for_option,
    employee_options,
    option_after_command,
    run_command,
)


@pytest.fixture
def sessions(service):
    return FeedSessions(lambda: FeedController(service), max_sessions=2)


def test_same_token_reuses_controller(sessions):
    feed = sessions.get("tab-1")

    assert sessions.get("tab-1") is feed
    assert len(sessions) == 1


def test_least_recently_used_session_is_evicted(sessions):
    first = sessions.get("tab-1")
    sessions.get("tab-2")
    sessions.get("tab-1")

    sessions.get("tab-3")

    assert len(sessions) == 2
    assert "tab-2" not in sessions
    assert sessions.get("tab-1") is first


def test_evicted_session_starts_a_fresh_feed(sessions):
    feed = sessions.get("tab-1")
    asyncio.run(feed.start())
    sessions.get("tab-2")
    sessions.get("tab-3")

    fresh = sessions.get("tab-1")

    assert fresh is not feed
    assert fresh.transactions == ()


def test_discard_drops_session(sessions):
    sessions.get("tab-1")

    sessions.discard("tab-1")
    sessions.discard("unknown")

    assert len(sessions) == 0


def test_max_sessions_must_be_positive(service):
    with pytest.raises(ValueError, match="max_sessions"):
        FeedSessions(lambda: FeedController(service), max_sessions=0)


@pytest.mark.parametrize(
    "value, expected",
    [(ALL_OPTION, None), (NO_OPTION, None), ("B", EMPLOYEE_B), ("Z", None)],
)
def test_employee_for_option(value, expected):
    assert employee_for_option([EMPLOYEE_A, EMPLOYEE_B], value) == expected


def test_employee_options_put_everyone_first():
    assert employee_options([EMPLOYEE_A, EMPLOYEE_B]) == [
        (ALL_OPTION, "All Employees"),
        ("A", "Ada Lovelace"),
        ("B", "Bob Babbage"),
    ]


def test_employee_options_empty_until_directory_loads():
    assert employee_options(()) == []


def test_run_command_returns_empty_message_on_success(service):
    feed = FeedController(service)

    assert asyncio.run(run_command(feed.start(), "Initial load")) == ""
    assert ids(feed.transactions) == ["t1", "t2"]


def test_failed_command_reports_message_and_clears_loading(service):
    feed = FeedController(service)
    asyncio.run(feed.start())
    service.failures.add(TRANSACTIONS_BY_EMPLOYEE)

    error = asyncio.run(run_command(feed.select_employee(EMPLOYEE_B), "Filter change"))

    assert error == f"{TRANSACTIONS_BY_EMPLOYEE}: scripted failure"
    assert feed.is_loading is False
    assert feed.snapshot().is_loading is False


def test_failed_filter_change_clears_select_so_it_can_be_retried(service):
    feed = FeedController(service)
    asyncio.run(feed.start())
    service.failures.add(TRANSACTIONS_BY_EMPLOYEE)

    error = asyncio.run(run_command(feed.select_employee(EMPLOYEE_B), "Filter change"))
    assert option_after_command("B", error) == NO_OPTION

    service.failures.clear()
    employee = employee_for_option(feed.employees, "B")
    error = asyncio.run(run_command(feed.select_employee(employee), "Filter change"))

    assert option_after_command("B", error) == "B"
    assert ids(feed.transactions) == ["t4", "t5"]
