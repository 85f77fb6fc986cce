"""Use case to project cash flows over the coming months."""

from datetime import date
from decimal import Decimal

from busledger.application.ports.ledger_repository import LedgerRepositoryPort
from busledger.domain.constants import DEFAULT_FORECAST_MONTHS
from busledger.domain.errors import InvalidRangeError
from busledger.domain.models import (
    CashflowForecast,
    CashflowForecastDetails,
    CashflowForecastMonth,
    CashflowForecastSummary,
)
from busledger.domain.services import (
    forecast_label,
    installments_due,
    insurance_due,
    month_key,
    monthly_recurring_expenses,
    monthly_route_income,
    monthly_subcontractor_costs,
    parking_due,
    shift_month,
    total_monthly_payroll,
    validate_employees,
    validate_routes,
    validate_terms,
)
from busledger.infrastructure.logging.logger import get_app_logger
from busledger.utils.decimal_utils import sum_money


class GetCashflowForecastUseCase:
    """Project inflows, outflows and a running balance month by month."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        default_period_months: int = DEFAULT_FORECAST_MONTHS,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
            default_period_months: Horizon used when none is requested.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._default_period_months = default_period_months

    def execute(
        self,
        period_months: int | None = None,
        today: date | None = None,
    ) -> CashflowForecast:
        """Return the forecast starting with the current month.

        Route income, payroll, subcontractor costs and monthly recurring
        expenses come from the current snapshot and stay flat across the
        horizon. Installments, insurance and parking follow their own terms.

        Args:
            period_months: Number of months to project.
            today: Reference date, defaults to the current date.

        Returns:
            CashflowForecast: Per-month projections and a summary.

        Raises:
            InvalidRangeError: If period_months is not a positive integer.
        """
        months_count = (
            self._default_period_months
            if period_months is None
            else period_months
        )
        if (
            isinstance(months_count, bool)
            or not isinstance(months_count, int)
            or months_count <= 0
        ):
            raise InvalidRangeError(
                f"Forecast period must be a positive number of months, "
                f"got {period_months!r}"
            )
        today = today or date.today()

        routes = self._ledger_repository.fetch_routes()
        employees = self._ledger_repository.fetch_employees()
        installments = self._ledger_repository.fetch_vehicle_installments()
        insurance = self._ledger_repository.fetch_vehicle_insurance()
        parking = self._ledger_repository.fetch_vehicle_parking()
        expenses = self._ledger_repository.fetch_expense_entries()
        self._logger.info(
            f"Fetched {len(routes)} routes, {len(employees)} employees, "
            f"{len(installments)} installments, {len(insurance)} policies, "
            f"{len(parking)} parking leases, {len(expenses)} expenses "
            f"for a {months_count}-month forecast"
        )
        validate_employees(employees, self._logger)
        validate_routes(routes, self._logger)
        validate_terms([*installments, *insurance], self._logger)

        route_income = monthly_route_income(routes)
        employee_costs = total_monthly_payroll(employees)
        subcontractor_costs = sum_money(monthly_subcontractor_costs(routes))
        recurring_expenses = monthly_recurring_expenses(expenses)

        months: list[CashflowForecastMonth] = []
        cumulative_balance = Decimal("0")
        for offset in range(months_count):
            month_start = shift_month(today, offset)
            details = CashflowForecastDetails(
                route_income=route_income,
                expected_payments=Decimal("0"),
                vehicle_installments=installments_due(
                    installments,
                    month_start,
                ),
                vehicle_insurance=insurance_due(insurance, month_start),
                vehicle_parking=parking_due(parking, month_start),
                employee_costs=employee_costs,
                subcontractor_costs=subcontractor_costs,
                recurring_expenses=recurring_expenses,
            )
            inflows = details.route_income
            outflows = (
                details.vehicle_installments
                + details.vehicle_insurance
                + details.vehicle_parking
                + details.employee_costs
                + details.subcontractor_costs
                + details.recurring_expenses
            )
            net_flow = inflows - outflows
            cumulative_balance += net_flow
            months.append(
                CashflowForecastMonth(
                    month_key=month_key(month_start),
                    label=forecast_label(month_start),
                    inflows=inflows,
                    outflows=outflows,
                    net_flow=net_flow,
                    cumulative_balance=cumulative_balance,
                    details=details,
                )
            )

        total_inflows = sum_money(month.inflows for month in months)
        total_outflows = sum_money(month.outflows for month in months)
        summary = CashflowForecastSummary(
            total_inflows=total_inflows,
            total_outflows=total_outflows,
            net_cash_flow=total_inflows - total_outflows,
            ending_balance=cumulative_balance,
        )
        self._logger.info(
            f"Forecast computed: in={total_inflows}, out={total_outflows}, "
            f"ending_balance={cumulative_balance}"
        )
        return CashflowForecast(months=months, summary=summary)


__all__ = ["GetCashflowForecastUseCase", "CashflowForecast"]
