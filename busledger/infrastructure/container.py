"""Composition root for wiring infrastructure adapters."""

from busledger.application.ports.database import DatabaseEnginePort
from busledger.application.ports.ledger_repository import LedgerRepositoryPort
from busledger.application.use_cases.get_cashflow_forecast import (
    GetCashflowForecastUseCase,
)
from busledger.application.use_cases.get_dashboard_stats import (
    GetDashboardStatsUseCase,
)
from busledger.application.use_cases.get_profit_and_loss import (
    GetProfitAndLossUseCase,
)
from busledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from busledger.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)
from busledger.infrastructure.logging.logger import get_app_logger
from busledger.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_dashboard_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetDashboardStatsUseCase:
    """Return the dashboard statistics use case."""
    return GetDashboardStatsUseCase(
        ledger_repository=repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_profit_and_loss_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetProfitAndLossUseCase:
    """Return the P&L use case."""
    return GetProfitAndLossUseCase(
        ledger_repository=repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_cashflow_forecast_use_case(
    repository: LedgerRepositoryPort | None = None,
    settings: LedgerSettings | None = None,
) -> GetCashflowForecastUseCase:
    """Return the cash-flow forecast use case."""
    resolved_settings = settings or LedgerSettings.from_env()
    return GetCashflowForecastUseCase(
        ledger_repository=repository or build_ledger_repository(),
        logger=get_app_logger(),
        default_period_months=resolved_settings.forecast_months,
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_dashboard_use_case",
    "build_profit_and_loss_use_case",
    "build_cashflow_forecast_use_case",
]
