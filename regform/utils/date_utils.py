"""
Date Validation Utilities

Provides helper functions for date validation including:
- Date parsing (HTML date inputs send YYYY-MM-DD)
- Future date checks
- Age limit checks (years before a reference day)
- Min/max limits for the date of birth control
"""

from datetime import datetime, date
from typing import Union, Optional, Tuple


def parse_date(date_str: str) -> Optional[date]:
    """
    Parse a date string into a date object.

    Supports multiple common date formats:
    - YYYY-MM-DD
    - MM/DD/YYYY
    - M/D/YYYY
    - MM-DD-YYYY
    - Month DD, YYYY

    Args:
        date_str: String representation of a date

    Returns:
        date object if successfully parsed, None otherwise
    """
    if not date_str or not isinstance(date_str, str):
        return None

    date_str = date_str.strip()

    formats = [
        "%Y-%m-%d",      # 2024-12-31
        "%m/%d/%Y",      # 12/31/2024
        "%m-%d-%Y",      # 12-31-2024
        "%B %d, %Y",     # December 31, 2024
        "%b %d, %Y",     # Dec 31, 2024
    ]

    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue

    return None


def _as_date(date_value: Union[str, date, datetime, None]) -> Optional[date]:
    if isinstance(date_value, str):
        date_value = parse_date(date_value)
    if isinstance(date_value, datetime):
        date_value = date_value.date()
    return date_value


def is_future_date(date_value: Union[str, date, datetime],
                   strict: bool = True,
                   today: Optional[date] = None) -> bool:
    """
    Check if a date is in the future.

    Args:
        date_value: Date to check (string, date, or datetime)
        strict: If True, date must be > today. If False, date >= today is ok.
        today: Reference day (defaults to date.today())

    Returns:
        True if date is in the future, False otherwise
    """
    date_value = _as_date(date_value)
    if date_value is None:
        return False

    today = today or date.today()

    if strict:
        return date_value > today
    else:
        return date_value >= today


def years_before(reference: date, years: int) -> date:
    """
    Same calendar day `years` years before `reference`.

    February 29 rolls forward to March 1 when the target year is not a
    leap year.
    """
    try:
        return reference.replace(year=reference.year - years)
    except ValueError:
        return date(reference.year - years, 3, 1)


def is_older_than(date_value: Union[str, date, datetime],
                  years: int,
                  today: Optional[date] = None) -> bool:
    """
    Check if a date lies strictly before the same day `years` years ago.

    Args:
        date_value: Date to check
        years: Number of years
        today: Reference day (defaults to date.today())

    Returns:
        True if date_value < today - years, False otherwise
    """
    date_value = _as_date(date_value)
    if date_value is None:
        return False

    today = today or date.today()
    return date_value < years_before(today, years)


def date_of_birth_limits(max_age_years: int,
                         today: Optional[date] = None) -> Tuple[str, str]:
    """
    ISO (min, max) bounds for a date of birth control.

    Args:
        max_age_years: Oldest allowed age in years
        today: Reference day (defaults to date.today())

    Returns:
        Tuple of (min_date, max_date) as YYYY-MM-DD strings
    """
    today = today or date.today()
    return years_before(today, max_age_years).isoformat(), today.isoformat()
