"""Tests for route, income and expense selection rules."""

from datetime import date
from decimal import Decimal

import pytest

from busledger.domain.models import (
    ExpenseEntry,
    IncomeEntry,
    IncomeType,
    PaymentStatus,
    RecordStatus,
    RecurringFrequency,
    Route,
    RouteType,
)
from busledger.domain.services.ledger import (
    count_active_routes,
    is_monthly_recurring,
    monthly_recurring_expenses,
    monthly_route_income,
    monthly_subcontractor_costs,
    split_income_by_type,
)


def _route(
    route_id: int,
    rate: str,
    route_type: RouteType = RouteType.OWNED,
    status: RecordStatus = RecordStatus.ACTIVE,
    subcontractor_cost: str | None = None,
) -> Route:
    return Route(
        id=route_id,
        name=f"Route {route_id}",
        monthly_rate=Decimal(rate),
        route_type=route_type,
        status=status,
        subcontractor_cost=(
            Decimal(subcontractor_cost)
            if subcontractor_cost is not None
            else None
        ),
    )


def _expense(
    amount: str,
    is_recurring: bool = False,
    frequency: RecurringFrequency | None = None,
) -> ExpenseEntry:
    return ExpenseEntry(
        id=1,
        amount=Decimal(amount),
        description="Diesel",
        expense_date=date(2024, 1, 10),
        is_recurring=is_recurring,
        recurring_frequency=frequency,
    )


def test_route_income_and_count_only_include_active_routes() -> None:
    routes = [
        _route(1, "4000"),
        _route(2, "6000"),
        _route(3, "9000", status=RecordStatus.INACTIVE),
    ]

    assert count_active_routes(routes) == 2
    assert monthly_route_income(routes) == Decimal("10000")


def test_subcontractor_costs_need_active_subcontracted_route_with_cost() -> None:
    routes = [
        _route(1, "5000", RouteType.SUBCONTRACTED, subcontractor_cost="3000"),
        _route(2, "5000", RouteType.SUBCONTRACTED),
        _route(
            3,
            "5000",
            RouteType.SUBCONTRACTED,
            status=RecordStatus.INACTIVE,
            subcontractor_cost="2500",
        ),
        _route(4, "5000", RouteType.OWNED, subcontractor_cost="1000"),
    ]

    assert monthly_subcontractor_costs(routes) == [Decimal("3000")]


def test_split_income_by_type() -> None:
    entries = [
        IncomeEntry(
            id=1,
            amount=Decimal("4000"),
            billing_period="2024-01",
            income_type=IncomeType.ROUTE,
            payment_status=PaymentStatus.PAID,
        ),
        IncomeEntry(
            id=2,
            amount=Decimal("250.50"),
            billing_period="2024-01",
            income_type=IncomeType.ADHOC,
            payment_status=PaymentStatus.PENDING,
        ),
    ]

    assert split_income_by_type(entries) == (
        Decimal("4000"),
        Decimal("250.50"),
    )
    assert split_income_by_type([]) == (Decimal("0"), Decimal("0"))


def test_only_monthly_recurring_expenses_are_projected() -> None:
    expenses = [
        _expense("100", True, RecurringFrequency.MONTHLY),
        _expense("900", True, RecurringFrequency.QUARTERLY),
        _expense("1200", True, RecurringFrequency.YEARLY),
        _expense("50", True, None),
        _expense("75", False, RecurringFrequency.MONTHLY),
    ]

    assert monthly_recurring_expenses(expenses) == Decimal("100")


def test_unknown_frequency_raises() -> None:
    with pytest.raises(ValueError):
        is_monthly_recurring(_expense("10", True, "weekly"))
