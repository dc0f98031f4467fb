"""
Demo fixtures served by DemoTransactionService.

Four employees and eighteen transactions, enough for several pages at the
default page size of five.
"""

from transaction_feed.models.transaction import Employee, Transaction

DEMO_EMPLOYEES: list[Employee] = [
    Employee(id="emp-001", first_name="James", last_name="Smith"),
    Employee(id="emp-002", first_name="Mary", last_name="Johnson"),
    Employee(id="emp-003", first_name="Robert", last_name="Williams"),
    Employee(id="emp-004", first_name="Patricia", last_name="Brown"),
]

_JAMES, _MARY, _ROBERT, _PATRICIA = DEMO_EMPLOYEES

DEMO_TRANSACTIONS: list[Transaction] = [
    Transaction("txn-001", 2491.68, _JAMES, "Uber", "2021-09-20", False),
    Transaction("txn-002", 102.47, _MARY, "Social Media Ads Inc", "2021-09-19", True),
    Transaction("txn-003", 879.12, _ROBERT, "Flight Center", "2021-09-18", False),
    Transaction("txn-004", 38.40, _PATRICIA, "Blue Bottle Coffee", "2021-09-18", True),
    Transaction("txn-005", 1215.00, _JAMES, "AWS", "2021-09-17", False),
    Transaction("txn-006", 64.99, _MARY, "Office Depot", "2021-09-16", False),
    Transaction("txn-007", 412.35, _ROBERT, "Hilton Hotels", "2021-09-15", True),
    Transaction("txn-008", 23.50, _PATRICIA, "Lyft", "2021-09-15", False),
    Transaction("txn-009", 3100.00, _JAMES, "WeWork", "2021-09-14", True),
    Transaction("txn-010", 89.90, _MARY, "Zoom", "2021-09-13", False),
    Transaction("txn-011", 560.00, _ROBERT, "Delta Air Lines", "2021-09-12", False),
    Transaction("txn-012", 12.75, _PATRICIA, "Starbucks", "2021-09-12", True),
    Transaction("txn-013", 749.00, _JAMES, "Apple Store", "2021-09-11", False),
    Transaction("txn-014", 150.00, _MARY, "Google Ads", "2021-09-10", False),
    Transaction("txn-015", 45.20, _ROBERT, "Chipotle", "2021-09-09", True),
    Transaction("txn-016", 299.99, _PATRICIA, "Adobe", "2021-09-08", False),
    Transaction("txn-017", 18.00, _JAMES, "Parking Garage", "2021-09-07", False),
    Transaction("txn-018", 1020.40, _MARY, "Marriott", "2021-09-06", True),
]
