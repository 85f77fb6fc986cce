"""Conversion of report models into JSON-ready payloads."""

from dataclasses import fields, is_dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from busledger.utils.decimal_utils import quantize_money

_KEY_ALIASES = {
    "total_income_ytd": "totalIncomeYTD",
    "total_expenses_ytd": "totalExpensesYTD",
    "net_profit_ytd": "netProfitYTD",
    "start": "from",
    "end": "to",
    "label": "month",
}


def _camel_case(name: str) -> str:
    if name in _KEY_ALIASES:
        return _KEY_ALIASES[name]
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


def to_payload(value: Any) -> Any:
    """Convert report models into plain JSON-compatible structures.

    Dataclass fields become camelCase keys, money becomes a two-decimal
    string, dates become ISO strings and enums their stored value.

    Args:
        value: Report model, record, list or scalar.

    Returns:
        Any: Structure made of dicts, lists, strings, numbers and None.
    """
    if is_dataclass(value) and not isinstance(value, type):
        return {
            _camel_case(field.name): to_payload(getattr(value, field.name))
            for field in fields(value)
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(quantize_money(value))
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [to_payload(item) for item in value]
    return value


__all__ = ["to_payload"]
