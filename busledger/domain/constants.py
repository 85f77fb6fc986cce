"""Domain constants for ledger analytics."""

from decimal import Decimal

CURRENCY_CODE = "SGD"

CPF_RATE = Decimal("0.17")

UNCATEGORIZED_LABEL = "Uncategorized"

TREND_MONTHS = 6

RECENT_ENTRIES_LIMIT = 5

DEFAULT_FORECAST_MONTHS = 6

FORECAST_PERIOD_CHOICES = (3, 6, 12, 24)

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


__all__ = [
    "CURRENCY_CODE",
    "CPF_RATE",
    "UNCATEGORIZED_LABEL",
    "TREND_MONTHS",
    "RECENT_ENTRIES_LIMIT",
    "DEFAULT_FORECAST_MONTHS",
    "FORECAST_PERIOD_CHOICES",
    "MONTH_ABBREVIATIONS",
]
