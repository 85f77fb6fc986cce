"""Use case to build a Profit & Loss statement for a date range."""

from datetime import date
from decimal import Decimal

from busledger.application.ports.ledger_repository import LedgerRepositoryPort
from busledger.domain.constants import UNCATEGORIZED_LABEL
from busledger.domain.errors import InvalidRangeError
from busledger.domain.models import (
    Customer,
    ExpenseCategory,
    ExpenseEntry,
    IncomeEntry,
    NamedAmount,
    ProfitAndLossExpenses,
    ProfitAndLossIncome,
    ProfitAndLossReport,
    ReportPeriod,
)
from busledger.domain.services import (
    is_active_employee,
    monthly_employer_cost,
    monthly_subcontractor_costs,
    months_spanned,
    period_month_keys,
    prorate_over_period,
    split_income_by_type,
    validate_employees,
    validate_routes,
)
from busledger.infrastructure.logging.logger import get_app_logger
from busledger.utils.decimal_utils import sum_money


class GetProfitAndLossUseCase:
    """Compute income and expense breakdowns over an inclusive period."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        today: date | None = None,
    ) -> ProfitAndLossReport:
        """Return the P&L statement for the period.

        Payroll and subcontractor costs are monthly figures scaled by the
        number of calendar months the period touches, whether or not the
        contract or employment covered all of them.

        Args:
            start_date: First day of the period, defaults to January 1st.
            end_date: Last day of the period, defaults to today.
            today: Reference date used for the defaults.

        Returns:
            ProfitAndLossReport: Income, expenses and net profit.

        Raises:
            InvalidRangeError: If end_date precedes start_date.
        """
        today = today or date.today()
        start = start_date or date(today.year, 1, 1)
        end = end_date or today
        if end < start:
            raise InvalidRangeError(
                f"Report end {end.isoformat()} precedes start "
                f"{start.isoformat()}"
            )

        start_period, end_period = period_month_keys(start, end)
        income = self._ledger_repository.fetch_income_entries_between(
            start_period,
            end_period,
        )
        expenses = self._ledger_repository.fetch_expense_entries_between(
            start,
            end,
        )
        customers = self._ledger_repository.fetch_customers()
        routes = self._ledger_repository.fetch_routes()
        employees = self._ledger_repository.fetch_employees()
        categories = self._ledger_repository.fetch_expense_categories()
        self._logger.info(
            f"Fetched {len(income)} income entries and {len(expenses)} "
            f"expenses for P&L {start.isoformat()}..{end.isoformat()}"
        )
        validate_employees(employees, self._logger)
        validate_routes(routes, self._logger)

        months_in_period = months_spanned(start, end)

        route_income, adhoc_income = split_income_by_type(income)
        income_view = ProfitAndLossIncome(
            route_income=route_income,
            adhoc_income=adhoc_income,
            total_income=route_income + adhoc_income,
            by_customer=self._income_by_customer(income, customers),
        )

        subcontractor_costs = sum_money(
            prorate_over_period(cost, months_in_period)
            for cost in monthly_subcontractor_costs(routes)
        )
        employee_costs = sum_money(
            prorate_over_period(
                monthly_employer_cost(employee),
                months_in_period,
            )
            for employee in employees
            if is_active_employee(employee)
        )
        vehicle_costs = Decimal("0")
        raw_expenses = sum_money(entry.amount for entry in expenses)
        total_expenses = (
            raw_expenses + subcontractor_costs + employee_costs + vehicle_costs
        )
        expenses_view = ProfitAndLossExpenses(
            by_category=self._expenses_by_category(expenses, categories),
            subcontractor_costs=subcontractor_costs,
            employee_costs=employee_costs,
            vehicle_costs=vehicle_costs,
            total_expenses=total_expenses,
        )

        net_profit = income_view.total_income - total_expenses
        self._logger.info(
            f"P&L computed over {months_in_period} months: "
            f"income={income_view.total_income}, "
            f"expenses={total_expenses}, net={net_profit}"
        )
        return ProfitAndLossReport(
            period=ReportPeriod(start=start, end=end),
            months_in_period=months_in_period,
            income=income_view,
            expenses=expenses_view,
            net_profit=net_profit,
        )

    @staticmethod
    def _income_by_customer(
        income: list[IncomeEntry],
        customers: list[Customer],
    ) -> list[NamedAmount]:
        totals: dict[int, Decimal] = {}
        for entry in income:
            if entry.customer_id is None:
                continue
            totals[entry.customer_id] = (
                totals.get(entry.customer_id, Decimal("0")) + entry.amount
            )
        return [
            NamedAmount(name=customer.name, amount=totals[customer.id])
            for customer in customers
            if totals.get(customer.id, Decimal("0")) > 0
        ]

    @staticmethod
    def _expenses_by_category(
        expenses: list[ExpenseEntry],
        categories: list[ExpenseCategory],
    ) -> list[NamedAmount]:
        totals: dict[int, Decimal] = {}
        uncategorized = Decimal("0")
        for entry in expenses:
            if entry.category_id is None:
                uncategorized += entry.amount
                continue
            totals[entry.category_id] = (
                totals.get(entry.category_id, Decimal("0")) + entry.amount
            )
        breakdown = [
            NamedAmount(name=category.name, amount=totals[category.id])
            for category in categories
            if totals.get(category.id, Decimal("0")) > 0
        ]
        if uncategorized > 0:
            breakdown.append(
                NamedAmount(name=UNCATEGORIZED_LABEL, amount=uncategorized)
            )
        return breakdown


__all__ = ["GetProfitAndLossUseCase", "ProfitAndLossReport"]
