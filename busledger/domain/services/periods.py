"""Calendar-month bucketing helpers."""

from datetime import date

from busledger.domain.constants import MONTH_ABBREVIATIONS
from busledger.domain.errors import InvalidRangeError


def month_key(value: date) -> str:
    """Return the YYYY-MM key of the month containing a date."""
    return f"{value.year:04d}-{value.month:02d}"


def year_start_key(value: date) -> str:
    """Return the YYYY-01 key of the year containing a date."""
    return f"{value.year:04d}-01"


def months_spanned(start: date, end: date) -> int:
    """Count the calendar months touched by an inclusive range.

    The day of month is ignored: 2024-01-31..2024-02-01 spans two months.

    Args:
        start: First day of the range.
        end: Last day of the range.

    Returns:
        int: Inclusive month count, at least 1 when end is not before start.
    """
    return (end.year - start.year) * 12 + (end.month - start.month) + 1


def first_day_of_month(value: date) -> date:
    """Return the first day of the month containing a date."""
    return value.replace(day=1)


def shift_month(value: date, months: int) -> date:
    """Return the first day of the month ``months`` away from a date.

    Args:
        value: Reference date.
        months: Offset in months, negative for past months.

    Returns:
        date: First day of the target month.
    """
    index = value.year * 12 + (value.month - 1) + months
    year, month_index = divmod(index, 12)
    return date(year, month_index + 1, 1)


def is_in_month(value: date, key: str) -> bool:
    """Return True when a date falls inside the month identified by key."""
    return month_key(value) == key


def period_month_keys(start: date, end: date) -> tuple[str, str]:
    """Normalize a date range to its first and last month keys."""
    return month_key(start), month_key(end)


def trend_label(value: date) -> str:
    """Return the short month label used by the dashboard trend."""
    return MONTH_ABBREVIATIONS[value.month - 1]


def forecast_label(value: date) -> str:
    """Return the month label used by the forecast, e.g. ``Jan 25``."""
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.year % 100:02d}"


def parse_iso_date(value: str, field: str) -> date:
    """Parse a YYYY-MM-DD request value.

    Args:
        value: Raw request value.
        field: Parameter name used in the error message.

    Returns:
        date: Parsed calendar date.

    Raises:
        InvalidRangeError: If the value is not an ISO calendar date.
    """
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError) as exc:
        raise InvalidRangeError(
            f"Invalid {field} date '{value}'. Expected format YYYY-MM-DD."
        ) from exc


__all__ = [
    "month_key",
    "year_start_key",
    "months_spanned",
    "first_day_of_month",
    "shift_month",
    "is_in_month",
    "period_month_keys",
    "trend_label",
    "forecast_label",
    "parse_iso_date",
]
