"""Domain normalization helpers for raw repository values."""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TypeVar

from busledger.domain.errors import MalformedRecordError

EnumT = TypeVar("EnumT", bound=Enum)

_BILLING_PERIOD_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def parse_money(value, field: str) -> Decimal:
    """Normalize a stored money value to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.
        field: Field name reported when the value is unusable.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        MalformedRecordError: If the value is missing, non-numeric or not
            finite.
    """
    if value is None:
        raise MalformedRecordError(field, value, "missing required amount")
    if isinstance(value, bool):
        raise MalformedRecordError(field, value, "boolean is not an amount")
    if isinstance(value, Decimal):
        amount = value
    else:
        raw = value.strip() if isinstance(value, str) else str(value)
        try:
            amount = Decimal(raw)
        except InvalidOperation as exc:
            raise MalformedRecordError(field, value, "not a number") from exc
    if not amount.is_finite():
        raise MalformedRecordError(field, value, "not a finite number")
    return amount


def parse_optional_money(value, field: str) -> Decimal | None:
    """Normalize an optional money value, keeping absence as None."""
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return parse_money(value, field)


def normalize_text(value: str | None) -> str | None:
    """Strip optional text values.

    Args:
        value: Raw text value from a repository.

    Returns:
        str | None: Stripped text, or None when blank.
    """
    if not value:
        return None
    cleaned = value.strip()
    return cleaned or None


def parse_enum(enum_type: type[EnumT], value, field: str) -> EnumT:
    """Map a stored string onto an enum member.

    Args:
        enum_type: Target enum class.
        value: Raw value from a repository.
        field: Field name reported on failure.

    Returns:
        EnumT: Matching enum member.

    Raises:
        MalformedRecordError: If no member matches the value.
    """
    if isinstance(value, enum_type):
        return value
    cleaned = value.strip().lower() if isinstance(value, str) else value
    try:
        return enum_type(cleaned)
    except ValueError as exc:
        expected = ", ".join(member.value for member in enum_type)
        raise MalformedRecordError(
            field, value, f"expected one of {expected}"
        ) from exc


def parse_optional_enum(
    enum_type: type[EnumT],
    value,
    field: str,
) -> EnumT | None:
    """Map an optional stored string onto an enum member."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_enum(enum_type, value, field)


def parse_date(value, field: str) -> date:
    """Normalize a stored calendar date.

    SQL drivers return ``date`` objects; SQLite returns ISO strings.

    Raises:
        MalformedRecordError: If the value is missing or not an ISO date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError as exc:
            raise MalformedRecordError(field, value, "not an ISO date") from exc
    raise MalformedRecordError(field, value, "missing date")


def parse_optional_date(value, field: str) -> date | None:
    """Normalize an optional stored calendar date."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_date(value, field)


def parse_billing_period(value, field: str = "billing_period") -> str:
    """Validate a YYYY-MM billing period key.

    Raises:
        MalformedRecordError: If the value is not a zero-padded month key.
    """
    if not isinstance(value, str) or not _BILLING_PERIOD_RE.match(
        value.strip()
    ):
        raise MalformedRecordError(field, value, "expected YYYY-MM")
    return value.strip()


__all__ = [
    "parse_money",
    "parse_optional_money",
    "normalize_text",
    "parse_enum",
    "parse_optional_enum",
    "parse_date",
    "parse_optional_date",
    "parse_billing_period",
]
