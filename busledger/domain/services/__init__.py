"""Domain services package."""

from .ledger import (
    count_active_routes,
    is_active_route,
    is_monthly_recurring,
    is_subcontracted,
    monthly_recurring_expenses,
    monthly_route_income,
    monthly_subcontractor_costs,
    split_income_by_type,
)
from .normalization import (
    normalize_text,
    parse_billing_period,
    parse_date,
    parse_enum,
    parse_optional_date,
    parse_optional_enum,
    parse_money,
    parse_optional_money,
)
from .payroll import (
    cpf_contribution,
    is_active_employee,
    monthly_employer_cost,
    total_monthly_payroll,
)
from .periods import (
    first_day_of_month,
    forecast_label,
    is_in_month,
    month_key,
    months_spanned,
    parse_iso_date,
    period_month_keys,
    shift_month,
    trend_label,
    year_start_key,
)
from .proration import (
    installment_active_in,
    installments_due,
    insurance_active_in,
    insurance_cost_in,
    insurance_due,
    insurance_monthly_cost,
    parking_active_in,
    parking_due,
    prorate_over_period,
)
from .validation import validate_employees, validate_routes, validate_terms

__all__ = [
    "count_active_routes",
    "is_active_route",
    "is_monthly_recurring",
    "is_subcontracted",
    "monthly_recurring_expenses",
    "monthly_route_income",
    "monthly_subcontractor_costs",
    "split_income_by_type",
    "normalize_text",
    "parse_billing_period",
    "parse_date",
    "parse_enum",
    "parse_optional_date",
    "parse_optional_enum",
    "parse_money",
    "parse_optional_money",
    "cpf_contribution",
    "is_active_employee",
    "monthly_employer_cost",
    "total_monthly_payroll",
    "first_day_of_month",
    "forecast_label",
    "is_in_month",
    "month_key",
    "months_spanned",
    "parse_iso_date",
    "period_month_keys",
    "shift_month",
    "trend_label",
    "year_start_key",
    "installment_active_in",
    "installments_due",
    "insurance_active_in",
    "insurance_due",
    "insurance_monthly_cost",
    "insurance_cost_in",
    "parking_active_in",
    "parking_due",
    "prorate_over_period",
    "validate_employees",
    "validate_routes",
    "validate_terms",
]
