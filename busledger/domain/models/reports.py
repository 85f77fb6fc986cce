"""Domain models for derived financial reports."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from busledger.domain.models.records import ExpenseEntry, IncomeEntry


@dataclass(frozen=True)
class MonthlyTrendPoint:
    """Income and expenses for one trailing month."""

    month_key: str
    label: str
    income: Decimal
    expenses: Decimal


@dataclass(frozen=True)
class DashboardStats:
    """Headline KPIs for the dashboard.

    Attributes:
        total_expenses_month: Dated expenses plus the active payroll.
        total_expenses_ytd: Dated expenses only, payroll excluded.
        monthly_trend: Six trailing months, oldest first.
    """

    total_income_month: Decimal
    total_income_ytd: Decimal
    total_expenses_month: Decimal
    total_expenses_ytd: Decimal
    net_profit_month: Decimal
    net_profit_ytd: Decimal
    active_routes: int
    recent_income: list[IncomeEntry]
    recent_expenses: list[ExpenseEntry]
    monthly_trend: list[MonthlyTrendPoint]


@dataclass(frozen=True)
class ReportPeriod:
    """Inclusive date range of a report."""

    start: date
    end: date


@dataclass(frozen=True)
class NamedAmount:
    """Amount aggregated under a display name."""

    name: str
    amount: Decimal


@dataclass(frozen=True)
class ProfitAndLossIncome:
    """Income side of the P&L statement."""

    route_income: Decimal
    adhoc_income: Decimal
    total_income: Decimal
    by_customer: list[NamedAmount]


@dataclass(frozen=True)
class ProfitAndLossExpenses:
    """Expense side of the P&L statement.

    Attributes:
        by_category: View over the raw expense entries; already included
            once in total_expenses.
        vehicle_costs: Placeholder, always zero.
    """

    by_category: list[NamedAmount]
    subcontractor_costs: Decimal
    employee_costs: Decimal
    vehicle_costs: Decimal
    total_expenses: Decimal


@dataclass(frozen=True)
class ProfitAndLossReport:
    """Profit and loss statement for a period."""

    period: ReportPeriod
    months_in_period: int
    income: ProfitAndLossIncome
    expenses: ProfitAndLossExpenses
    net_profit: Decimal


@dataclass(frozen=True)
class CashflowForecastDetails:
    """Component breakdown of one forecast month."""

    route_income: Decimal
    expected_payments: Decimal
    vehicle_installments: Decimal
    vehicle_insurance: Decimal
    vehicle_parking: Decimal
    employee_costs: Decimal
    subcontractor_costs: Decimal
    recurring_expenses: Decimal


@dataclass(frozen=True)
class CashflowForecastMonth:
    """Projected flows for one calendar month."""

    month_key: str
    label: str
    inflows: Decimal
    outflows: Decimal
    net_flow: Decimal
    cumulative_balance: Decimal
    details: CashflowForecastDetails


@dataclass(frozen=True)
class CashflowForecastSummary:
    """Totals over the whole forecast horizon."""

    total_inflows: Decimal
    total_outflows: Decimal
    net_cash_flow: Decimal
    ending_balance: Decimal


@dataclass(frozen=True)
class CashflowForecast:
    """Month-by-month forecast and its summary."""

    months: list[CashflowForecastMonth]
    summary: CashflowForecastSummary


__all__ = [
    "MonthlyTrendPoint",
    "DashboardStats",
    "ReportPeriod",
    "NamedAmount",
    "ProfitAndLossIncome",
    "ProfitAndLossExpenses",
    "ProfitAndLossReport",
    "CashflowForecastDetails",
    "CashflowForecastMonth",
    "CashflowForecastSummary",
    "CashflowForecast",
]
