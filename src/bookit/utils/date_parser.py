"""Value date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def _month_end(day: date) -> date:
    return day + relativedelta(day=31)


def parse_date(date_str: str) -> date:
    """Parse a value date string into a date object.

    Supports:
    - Absolute dates: "2024-01-15", "15.01.2024", "January 15, 2024"
    - Relative days: "today", "yesterday", "tomorrow"
    - Period boundaries used for closing bookings: "start of month",
      "end of month", "end of last month", "start of year", "end of year",
      "end of last year"

    Dotted dates are read day first, as they appear on invoices.

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "start of month": today.replace(day=1),
        "end of month": _month_end(today),
        "end of last month": today.replace(day=1) - timedelta(days=1),
        "start of year": today.replace(month=1, day=1),
        "end of year": today.replace(month=12, day=31),
        "end of last year": today.replace(month=1, day=1) - timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str, dayfirst="." in date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
