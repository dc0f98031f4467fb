"""
Utility functions for transaction formatting.

Provides helpers for:
- Date parsing (ISO and m/d/y formats)
- Date and currency formatting for display
"""

from datetime import datetime


def parse_date(date_str: str | None) -> datetime | None:
    """
    Parse a transaction date string to a datetime object.

    Args:
        date_str: Date string in ISO format (e.g., "2021-09-20") or m/d/y

    Returns:
        datetime object if parsing succeeds, None otherwise
    """
    if date_str:
        date_str = date_str.strip()
    if not date_str:
        return None

    try:
        return datetime.fromisoformat(date_str)
    except ValueError:
        pass

    for fmt in ("%m/%d/%Y", "%m/%d/%y"):
        try:
            return datetime.strptime(date_str, fmt)
        except ValueError:
            continue

    return None


def format_date(date_str: str | None) -> str:
    """Return a date string formatted for display, or the raw value if unparseable."""
    parsed = parse_date(date_str)
    if parsed is None:
        return date_str or "N/A"
    return parsed.strftime("%b %d, %Y")


def format_currency(value: float, currency: str = "USD") -> str:
    """
    Format a currency amount with the currency code prefix.

    Args:
        value: Numeric amount to format.
        currency: Currency code (e.g., 'USD', 'EUR').

    Returns:
        Formatted string like 'USD 1,234.56'.
    """
    return f"{currency} {value:,.2f}"
