"""Application use cases package."""

from .get_cashflow_forecast import (
    CashflowForecast,
    GetCashflowForecastUseCase,
)
from .get_dashboard_stats import DashboardStats, GetDashboardStatsUseCase
from .get_profit_and_loss import (
    GetProfitAndLossUseCase,
    ProfitAndLossReport,
)

__all__ = [
    "GetCashflowForecastUseCase",
    "CashflowForecast",
    "GetDashboardStatsUseCase",
    "DashboardStats",
    "GetProfitAndLossUseCase",
    "ProfitAndLossReport",
]
