"""Selection rules over routes, income and expense records."""

from collections.abc import Iterable
from decimal import Decimal

from busledger.domain.models import (
    ExpenseEntry,
    IncomeEntry,
    IncomeType,
    RecordStatus,
    RecurringFrequency,
    Route,
    RouteType,
)
from busledger.utils.decimal_utils import sum_money


def is_active_route(route: Route) -> bool:
    """Return True when the route is currently operated."""
    if route.status is RecordStatus.ACTIVE:
        return True
    if route.status is RecordStatus.INACTIVE:
        return False
    raise ValueError(f"Unsupported route status: {route.status!r}")


def is_subcontracted(route: Route) -> bool:
    """Return True when a subcontractor drives the route."""
    if route.route_type is RouteType.SUBCONTRACTED:
        return True
    if route.route_type is RouteType.OWNED:
        return False
    raise ValueError(f"Unsupported route type: {route.route_type!r}")


def count_active_routes(routes: Iterable[Route]) -> int:
    return sum(1 for route in routes if is_active_route(route))


def monthly_route_income(routes: Iterable[Route]) -> Decimal:
    """Sum the monthly rates of active routes."""
    return sum_money(
        route.monthly_rate for route in routes if is_active_route(route)
    )


def monthly_subcontractor_costs(routes: Iterable[Route]) -> list[Decimal]:
    """Return the subcontractor cost of each active subcontracted route.

    Routes without a subcontractor cost are skipped.
    """
    return [
        route.subcontractor_cost
        for route in routes
        if is_subcontracted(route)
        and is_active_route(route)
        and route.subcontractor_cost is not None
    ]


def split_income_by_type(
    entries: Iterable[IncomeEntry],
) -> tuple[Decimal, Decimal]:
    """Return (route income, ad hoc income) totals.

    Raises:
        ValueError: If an entry carries an income type with no bucket.
    """
    route_income = Decimal("0")
    adhoc_income = Decimal("0")
    for entry in entries:
        if entry.income_type is IncomeType.ROUTE:
            route_income += entry.amount
        elif entry.income_type is IncomeType.ADHOC:
            adhoc_income += entry.amount
        else:
            raise ValueError(
                f"Unsupported income type: {entry.income_type!r}"
            )
    return route_income, adhoc_income


def is_monthly_recurring(expense: ExpenseEntry) -> bool:
    """Return True for recurring expenses billed every month."""
    if not expense.is_recurring or expense.recurring_frequency is None:
        return False
    if expense.recurring_frequency is RecurringFrequency.MONTHLY:
        return True
    if expense.recurring_frequency in (
        RecurringFrequency.QUARTERLY,
        RecurringFrequency.YEARLY,
    ):
        return False
    raise ValueError(
        f"Unsupported recurring frequency: {expense.recurring_frequency!r}"
    )


def monthly_recurring_expenses(expenses: Iterable[ExpenseEntry]) -> Decimal:
    """Sum the amounts of monthly recurring expenses."""
    return sum_money(
        expense.amount for expense in expenses if is_monthly_recurring(expense)
    )


__all__ = [
    "is_active_route",
    "is_subcontracted",
    "count_active_routes",
    "monthly_route_income",
    "monthly_subcontractor_costs",
    "split_income_by_type",
    "is_monthly_recurring",
    "monthly_recurring_expenses",
]
