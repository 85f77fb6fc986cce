"""Use case to compute dashboard KPIs."""

from datetime import date
from decimal import Decimal

from busledger.application.ports.ledger_repository import LedgerRepositoryPort
from busledger.domain.constants import RECENT_ENTRIES_LIMIT, TREND_MONTHS
from busledger.domain.models import (
    DashboardStats,
    ExpenseEntry,
    IncomeEntry,
    MonthlyTrendPoint,
)
from busledger.domain.services import (
    count_active_routes,
    is_in_month,
    month_key,
    shift_month,
    total_monthly_payroll,
    trend_label,
    validate_employees,
    year_start_key,
)
from busledger.infrastructure.logging.logger import get_app_logger
from busledger.utils.decimal_utils import sum_money


class GetDashboardStatsUseCase:
    """Compute current-month, year-to-date and trend figures."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        trend_months: int = TREND_MONTHS,
        recent_limit: int = RECENT_ENTRIES_LIMIT,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
            trend_months: Number of trailing months in the trend series.
            recent_limit: Number of recent income/expense entries returned.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._trend_months = trend_months
        self._recent_limit = recent_limit

    def execute(self, today: date | None = None) -> DashboardStats:
        """Return dashboard statistics as of a reference date.

        Monthly expenses include the active payroll. Year-to-date expenses
        only cover dated expense entries. Every trend month adds the same
        payroll figure computed from the current roster.

        Args:
            today: Reference date, defaults to the current date.

        Returns:
            DashboardStats: Totals, recent entries and trailing trend.
        """
        today = today or date.today()
        current_month = month_key(today)
        year_start = year_start_key(today)
        year_start_date = date(today.year, 1, 1)

        income = self._ledger_repository.fetch_income_entries()
        expenses = self._ledger_repository.fetch_expense_entries()
        routes = self._ledger_repository.fetch_routes()
        employees = self._ledger_repository.fetch_employees()
        self._logger.info(
            f"Fetched {len(income)} income entries, {len(expenses)} "
            f"expenses, {len(routes)} routes, {len(employees)} employees "
            f"for dashboard {current_month}"
        )
        validate_employees(employees, self._logger)

        payroll = total_monthly_payroll(employees)
        income_month = self._income_for_month(income, current_month)
        expenses_month = (
            self._expenses_for_month(expenses, current_month) + payroll
        )
        income_ytd = sum_money(
            entry.amount
            for entry in income
            if year_start <= entry.billing_period <= current_month
        )
        expenses_ytd = sum_money(
            entry.amount
            for entry in expenses
            if entry.expense_date >= year_start_date
        )

        trend = []
        for offset in range(self._trend_months - 1, -1, -1):
            month_start = shift_month(today, -offset)
            key = month_key(month_start)
            trend.append(
                MonthlyTrendPoint(
                    month_key=key,
                    label=trend_label(month_start),
                    income=self._income_for_month(income, key),
                    expenses=self._expenses_for_month(expenses, key) + payroll,
                )
            )

        stats = DashboardStats(
            total_income_month=income_month,
            total_income_ytd=income_ytd,
            total_expenses_month=expenses_month,
            total_expenses_ytd=expenses_ytd,
            net_profit_month=income_month - expenses_month,
            net_profit_ytd=income_ytd - expenses_ytd,
            active_routes=count_active_routes(routes),
            recent_income=list(income[: self._recent_limit]),
            recent_expenses=list(expenses[: self._recent_limit]),
            monthly_trend=trend,
        )
        self._logger.info(
            f"Dashboard computed: income_month={income_month}, "
            f"expenses_month={expenses_month}, payroll={payroll}"
        )
        return stats

    @staticmethod
    def _income_for_month(entries: list[IncomeEntry], key: str) -> Decimal:
        return sum_money(
            entry.amount for entry in entries if entry.billing_period == key
        )

    @staticmethod
    def _expenses_for_month(entries: list[ExpenseEntry], key: str) -> Decimal:
        return sum_money(
            entry.amount
            for entry in entries
            if is_in_month(entry.expense_date, key)
        )


__all__ = ["GetDashboardStatsUseCase", "DashboardStats"]
