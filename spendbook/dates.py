"""Date utilities for spendbook.

Small helpers for today's date, user date input and month ranges.
"""

from datetime import date, datetime, timedelta

import pandas as pd

from spendbook.domain.models import IsoDate


def today() -> IsoDate:
    """Get today's local date as YYYY-MM-DD."""
    return IsoDate(date.today().strftime("%Y-%m-%d"))


def normalize_date(value: str) -> IsoDate:
    """Normalize a user-typed date to YYYY-MM-DD.

    Accepts YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY and similar formats.

    Args:
        value: Date text.

    Returns:
        Normalized date.

    Raises:
        ValueError: If the text isn't a recognisable date.
    """
    value = value.strip()
    if not value:
        raise ValueError("empty date")

    # ISO input must not be read day-first
    try:
        return IsoDate(datetime.strptime(value, "%Y-%m-%d").strftime("%Y-%m-%d"))
    except ValueError:
        pass

    try:
        parsed = pd.to_datetime(value, dayfirst=True)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"unrecognised date '{value}'") from e

    if pd.isna(parsed):
        raise ValueError(f"unrecognised date '{value}'")
    return IsoDate(parsed.strftime("%Y-%m-%d"))


def month_range(month: str) -> tuple[str, str, str]:
    """Calculate date range and label for a month.

    Args:
        month: Month in YYYY-MM format.

    Returns:
        Tuple of (since_date, until_date, label) where:
        - since_date: First day of month (YYYY-MM-DD)
        - until_date: First day of next month (YYYY-MM-DD)
        - label: Human-readable month (e.g., "January 2025")
    """
    dt = datetime.strptime(month, "%Y-%m")
    since = dt.strftime("%Y-%m-01")
    next_month = (dt.replace(day=28) + timedelta(days=4)).replace(day=1)
    until = next_month.strftime("%Y-%m-%d")
    label = dt.strftime("%B %Y")
    return since, until, label
