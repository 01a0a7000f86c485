"""Account date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str, dayfirst: bool = False) -> date:
    """Parse an account date string into a date object.

    Supports:
    - Absolute dates: "2024-01-15", "15/01/2024" (with dayfirst), "January 15, 2024"
    - Relative dates: "today", "yesterday", "tomorrow"
    - Period boundaries: "start of month", "end of month", "start of year",
      "end of last month"

    Args:
        date_str: Date string
        dayfirst: Read ambiguous numeric dates as day/month/year

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
        "end of month": today.replace(day=1) + relativedelta(months=1, days=-1),
        "start of year": today.replace(month=1, day=1),
        "end of year": today.replace(month=12, day=31),
        "end of last month": today.replace(day=1) - timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return date_parser.parse(date_str, dayfirst=dayfirst).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
