from __future__ import annotations

from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def format_long_date(value: date) -> str:
    """E.g. 'Friday, January 5, 2024' for the page heading."""
    return f"{value.strftime('%A, %B')} {value.day}, {value.year}"


def shift_date(value: date, days: int) -> date:
    return value + timedelta(days=int(days))


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
