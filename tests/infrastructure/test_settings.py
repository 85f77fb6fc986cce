"""Tests for infrastructure settings."""

from datetime import date
from unittest.mock import MagicMock

from busledger.infrastructure import settings as settings_module
from busledger.infrastructure.settings import LedgerSettings


def _patch_env_loading(monkeypatch) -> MagicMock:
    logger = MagicMock()
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    return logger


def test_from_env_reads_reference_date_and_horizon(monkeypatch) -> None:
    _patch_env_loading(monkeypatch)
    monkeypatch.setenv("LEDGER_REFERENCE_DATE", "2024-03-15")
    monkeypatch.setenv("LEDGER_FORECAST_MONTHS", "12")

    settings = LedgerSettings.from_env()

    assert settings.reference_date == date(2024, 3, 15)
    assert settings.forecast_months == 12
    assert settings.currency_code == "SGD"
    assert settings.today() == date(2024, 3, 15)


def test_from_env_uses_defaults_when_unset(monkeypatch) -> None:
    _patch_env_loading(monkeypatch)
    monkeypatch.delenv("LEDGER_REFERENCE_DATE", raising=False)
    monkeypatch.delenv("LEDGER_FORECAST_MONTHS", raising=False)

    settings = LedgerSettings.from_env()

    assert settings.reference_date is None
    assert settings.forecast_months == 6
    assert settings.today() == date.today()


def test_invalid_values_fall_back_with_warnings(monkeypatch) -> None:
    logger = _patch_env_loading(monkeypatch)
    monkeypatch.setenv("LEDGER_REFERENCE_DATE", "15/03/2024")
    monkeypatch.setenv("LEDGER_FORECAST_MONTHS", "-2")

    settings = LedgerSettings.from_env()

    assert settings.reference_date is None
    assert settings.forecast_months == 6
    assert logger.warning.call_count == 2


def test_non_numeric_horizon_falls_back(monkeypatch) -> None:
    logger = _patch_env_loading(monkeypatch)
    monkeypatch.delenv("LEDGER_REFERENCE_DATE", raising=False)
    monkeypatch.setenv("LEDGER_FORECAST_MONTHS", "six")

    settings = LedgerSettings.from_env()

    assert settings.forecast_months == 6
    assert "six" in logger.warning.call_args.args[0]
