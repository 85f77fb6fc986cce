"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from datetime import date
import os
from typing import Optional

import dotenv

from busledger.domain.constants import CURRENCY_CODE, DEFAULT_FORECAST_MONTHS
from busledger.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for report generation.

    Attributes:
        reference_date: Optional fixed "today" for reproducible reports.
        forecast_months: Default cash-flow forecast horizon.
        currency_code: Display currency; amounts are never converted.
    """

    reference_date: Optional[date] = None
    forecast_months: int = DEFAULT_FORECAST_MONTHS
    currency_code: str = CURRENCY_CODE

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        reference_date = cls._parse_reference_date(
            os.getenv("LEDGER_REFERENCE_DATE"),
            logger=logger,
        )
        forecast_months = cls._parse_forecast_months(
            os.getenv("LEDGER_FORECAST_MONTHS"),
            logger=logger,
        )
        return cls(
            reference_date=reference_date,
            forecast_months=forecast_months,
        )

    def today(self) -> date:
        """Return the reference date, or the current date when unset."""
        return self.reference_date or date.today()

    @staticmethod
    def _parse_reference_date(raw_value: str | None, logger) -> date | None:
        """Parse the optional reference date.

        Args:
            raw_value: Raw date string in YYYY-MM-DD format.
            logger: Logger used for warnings.

        Returns:
            date | None: Parsed date or None when unset or invalid.
        """
        if not raw_value:
            return None
        try:
            return date.fromisoformat(raw_value.strip())
        except ValueError:
            logger.warning(
                f"Invalid LEDGER_REFERENCE_DATE '{raw_value}'. "
                "Expected format YYYY-MM-DD."
            )
            return None

    @staticmethod
    def _parse_forecast_months(raw_value: str | None, logger) -> int:
        """Parse the default forecast horizon.

        Args:
            raw_value: Raw integer string.
            logger: Logger used for warnings.

        Returns:
            int: Positive month count, falling back to the default.
        """
        if not raw_value:
            return DEFAULT_FORECAST_MONTHS
        try:
            months = int(raw_value.strip())
        except ValueError:
            months = 0
        if months <= 0:
            logger.warning(
                f"Invalid LEDGER_FORECAST_MONTHS '{raw_value}'. "
                f"Using {DEFAULT_FORECAST_MONTHS}."
            )
            return DEFAULT_FORECAST_MONTHS
        return months


__all__ = ["LedgerSettings"]
