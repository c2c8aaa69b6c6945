"""
Date helpers for training sessions.
"""

from datetime import date
from typing import Union

MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
]


class DateUtils:
    """Utilities for ISO training dates."""

    @staticmethod
    def build_iso_date(day: Union[int, str], month: Union[int, str], year: Union[int, str]) -> str:
        """Build a YYYY-MM-DD string from separate day, month and year values."""
        return f"{str(year).strip()}-{str(month).strip().zfill(2)}-{str(day).strip().zfill(2)}"

    @staticmethod
    def today_iso() -> str:
        return date.today().isoformat()

    @staticmethod
    def is_iso_date(value: str) -> bool:
        """Check whether a string is a valid calendar date in YYYY-MM-DD form."""
        if not isinstance(value, str) or len(value) != 10:
            return False
        try:
            date.fromisoformat(value)
        except ValueError:
            return False
        return True

    @staticmethod
    def format_date(iso_date: str) -> str:
        """
        Format an ISO date for display, e.g. '2026-01-15' -> '15 January 2026'.
        Anything that is not a three-part date is returned unchanged.
        """
        parts = iso_date.split('-') if isinstance(iso_date, str) else []
        if len(parts) != 3:
            return iso_date
        year, month, day = parts
        try:
            day_number = int(day)
            month_number = int(month)
        except ValueError:
            return iso_date

        if 1 <= month_number <= 12:
            month_name = MONTH_NAMES[month_number - 1]
        else:
            month_name = month
        return f"{day_number} {month_name} {year}"
