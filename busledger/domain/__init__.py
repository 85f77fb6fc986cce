"""Domain package for business rules and core models."""

from .constants import CPF_RATE, CURRENCY_CODE, UNCATEGORIZED_LABEL
from .errors import (
    DataAccessError,
    InvalidRangeError,
    LedgerError,
    MalformedRecordError,
)
from .models import (
    CashflowForecast,
    DashboardStats,
    ProfitAndLossReport,
)
from .services import (
    cpf_contribution,
    monthly_employer_cost,
    month_key,
    months_spanned,
)

__all__ = [
    "CPF_RATE",
    "CURRENCY_CODE",
    "UNCATEGORIZED_LABEL",
    "DataAccessError",
    "InvalidRangeError",
    "LedgerError",
    "MalformedRecordError",
    "CashflowForecast",
    "DashboardStats",
    "ProfitAndLossReport",
    "cpf_contribution",
    "monthly_employer_cost",
    "month_key",
    "months_spanned",
]
