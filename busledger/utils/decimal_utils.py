"""Helpers for Decimal normalization."""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def money_or_zero(value: Decimal | None) -> Decimal:
    """Return the amount, or zero for an unset optional amount."""
    if value is None:
        return Decimal("0")
    return value


def quantize_money(value: Decimal) -> Decimal:
    """Round an amount to cents, half up."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def sum_money(values: Iterable[Decimal]) -> Decimal:
    """Sum amounts starting from Decimal zero."""
    return sum(values, Decimal("0"))


__all__ = ["CENT", "money_or_zero", "quantize_money", "sum_money"]
