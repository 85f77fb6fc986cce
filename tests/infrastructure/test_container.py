"""Tests for the composition root."""

from unittest.mock import MagicMock

from busledger.application.use_cases.get_cashflow_forecast import (
    GetCashflowForecastUseCase,
)
from busledger.application.use_cases.get_dashboard_stats import (
    GetDashboardStatsUseCase,
)
from busledger.application.use_cases.get_profit_and_loss import (
    GetProfitAndLossUseCase,
)
from busledger.infrastructure import container
from busledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from busledger.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)
from busledger.infrastructure.settings import LedgerSettings


def test_build_ledger_repository_uses_database_adapter() -> None:
    repository = container.build_ledger_repository()

    assert isinstance(repository, SqlAlchemyLedgerRepository)
    assert isinstance(repository._db_port, SqlAlchemyDatabaseEngineAdapter)


def test_build_ledger_repository_accepts_db_port() -> None:
    db_port = MagicMock()

    repository = container.build_ledger_repository(db_port)

    assert repository._db_port is db_port


def test_use_case_builders_wire_the_given_repository(monkeypatch) -> None:
    logger = MagicMock()
    monkeypatch.setattr(container, "get_app_logger", lambda: logger)
    repository = MagicMock()

    dashboard = container.build_dashboard_use_case(repository)
    pnl = container.build_profit_and_loss_use_case(repository)

    assert isinstance(dashboard, GetDashboardStatsUseCase)
    assert isinstance(pnl, GetProfitAndLossUseCase)
    assert dashboard._ledger_repository is repository
    assert pnl._ledger_repository is repository
    assert dashboard._logger is logger


def test_cashflow_builder_uses_settings_horizon(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())

    use_case = container.build_cashflow_forecast_use_case(
        MagicMock(),
        settings=LedgerSettings(forecast_months=24),
    )

    assert isinstance(use_case, GetCashflowForecastUseCase)
    assert use_case._default_period_months == 24
