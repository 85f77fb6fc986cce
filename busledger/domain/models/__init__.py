"""Domain models package."""

from .records import (
    Customer,
    Employee,
    ExpenseCategory,
    ExpenseEntry,
    IncomeEntry,
    IncomeType,
    PaymentStatus,
    RecordStatus,
    RecurringFrequency,
    Route,
    RouteType,
    Vehicle,
    VehicleInstallment,
    VehicleInsurance,
    VehicleParking,
    VehicleStatus,
    WorkerType,
)
from .reports import (
    CashflowForecast,
    CashflowForecastDetails,
    CashflowForecastMonth,
    CashflowForecastSummary,
    DashboardStats,
    MonthlyTrendPoint,
    NamedAmount,
    ProfitAndLossExpenses,
    ProfitAndLossIncome,
    ProfitAndLossReport,
    ReportPeriod,
)

__all__ = [
    "Customer",
    "Employee",
    "ExpenseCategory",
    "ExpenseEntry",
    "IncomeEntry",
    "IncomeType",
    "PaymentStatus",
    "RecordStatus",
    "RecurringFrequency",
    "Route",
    "RouteType",
    "Vehicle",
    "VehicleInstallment",
    "VehicleInsurance",
    "VehicleParking",
    "VehicleStatus",
    "WorkerType",
    "CashflowForecast",
    "CashflowForecastDetails",
    "CashflowForecastMonth",
    "CashflowForecastSummary",
    "DashboardStats",
    "MonthlyTrendPoint",
    "NamedAmount",
    "ProfitAndLossExpenses",
    "ProfitAndLossIncome",
    "ProfitAndLossReport",
    "ReportPeriod",
]
