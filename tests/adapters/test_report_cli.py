"""Tests for the report CLI adapter."""

import json
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from busledger.adapters import report_cli
from busledger.domain.errors import DataAccessError
from busledger.domain.models import ReportPeriod
from busledger.infrastructure.settings import LedgerSettings


@pytest.fixture
def patched_cli(monkeypatch):
    """Replace settings, loggers and the container with fakes."""
    logger = MagicMock()
    usage_logger = MagicMock()
    monkeypatch.setattr(report_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(report_cli, "get_usage_logger", lambda: usage_logger)
    monkeypatch.setattr(
        report_cli.LedgerSettings,
        "from_env",
        classmethod(
            lambda cls: LedgerSettings(reference_date=date(2024, 3, 15))
        ),
    )
    repository = MagicMock()
    monkeypatch.setattr(
        report_cli,
        "build_ledger_repository",
        lambda: repository,
    )
    use_cases = {
        "dashboard": MagicMock(),
        "pnl": MagicMock(),
        "cashflow": MagicMock(),
    }
    monkeypatch.setattr(
        report_cli,
        "build_dashboard_use_case",
        lambda repo: use_cases["dashboard"],
    )
    monkeypatch.setattr(
        report_cli,
        "build_profit_and_loss_use_case",
        lambda repo: use_cases["pnl"],
    )
    monkeypatch.setattr(
        report_cli,
        "build_cashflow_forecast_use_case",
        lambda repo, settings: use_cases["cashflow"],
    )
    return use_cases, logger, usage_logger


def test_pnl_prints_json_payload(patched_cli, capsys) -> None:
    use_cases, _, usage_logger = patched_cli
    use_cases["pnl"].execute.return_value = ReportPeriod(
        start=date(2024, 1, 1),
        end=date(2024, 6, 30),
    )

    exit_code = report_cli.main(
        ["pnl", "--from", "2024-01-01", "--to", "2024-06-30"]
    )

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {
        "from": "2024-01-01",
        "to": "2024-06-30",
    }
    use_cases["pnl"].execute.assert_called_once_with(
        start_date=date(2024, 1, 1),
        end_date=date(2024, 6, 30),
        today=date(2024, 3, 15),
    )
    usage_logger.info.assert_called_once_with("report=pnl")


def test_dashboard_uses_reference_date(patched_cli, capsys) -> None:
    use_cases, _, _ = patched_cli
    use_cases["dashboard"].execute.return_value = [Decimal("1")]

    assert report_cli.main(["dashboard"]) == 0

    use_cases["dashboard"].execute.assert_called_once_with(
        today=date(2024, 3, 15)
    )


def test_cashflow_passes_months(patched_cli, capsys) -> None:
    use_cases, _, _ = patched_cli
    use_cases["cashflow"].execute.return_value = []

    assert report_cli.main(["cashflow", "--months", "12"]) == 0

    use_cases["cashflow"].execute.assert_called_once_with(
        period_months=12,
        today=date(2024, 3, 15),
    )


def test_invalid_date_returns_error_code(patched_cli, capsys) -> None:
    use_cases, logger, _ = patched_cli

    exit_code = report_cli.main(["pnl", "--from", "01/01/2024"])

    assert exit_code == 1
    assert "Invalid from date" in capsys.readouterr().err
    use_cases["pnl"].execute.assert_not_called()
    logger.error.assert_called_once()


def test_ledger_errors_are_reported(patched_cli, capsys) -> None:
    use_cases, _, _ = patched_cli
    use_cases["dashboard"].execute.side_effect = DataAccessError("db down")

    assert report_cli.main(["dashboard"]) == 1
    assert "db down" in capsys.readouterr().err
