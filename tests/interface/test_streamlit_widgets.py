"""Tests for dashboard widget preferences and chart data."""

from decimal import Decimal

import pytest

from busledger.adapters.interface.streamlit.widgets import (
    DEFAULT_WIDGET_ORDER,
    DashboardPreferences,
    forecast_chart_data,
    format_currency,
    trend_chart_data,
)
from busledger.domain.models import (
    CashflowForecast,
    CashflowForecastDetails,
    CashflowForecastMonth,
    CashflowForecastSummary,
    DashboardStats,
    MonthlyTrendPoint,
)


def test_default_preferences_show_every_widget() -> None:
    preferences = DashboardPreferences()

    assert preferences.visible_widgets() == list(DEFAULT_WIDGET_ORDER)


def test_hidden_widgets_are_skipped_and_can_return() -> None:
    preferences = DashboardPreferences().with_visibility("trend", False)

    assert "trend" not in preferences.visible_widgets()
    restored = preferences.with_visibility("trend", True)
    assert restored.visible_widgets() == list(DEFAULT_WIDGET_ORDER)


def test_moved_reorders_and_clamps() -> None:
    preferences = DashboardPreferences()

    moved_up = preferences.moved("recent_expenses", -1)
    assert moved_up.order == (
        "kpis",
        "trend",
        "recent_expenses",
        "recent_income",
    )
    assert preferences.moved("kpis", -5).order == DEFAULT_WIDGET_ORDER
    assert preferences.moved("kpis", 10).order[-1] == "kpis"


def test_unknown_widget_is_rejected() -> None:
    with pytest.raises(ValueError):
        DashboardPreferences().with_visibility("weather", True)


def test_format_currency() -> None:
    assert format_currency(Decimal("12345.6")) == "S$12,345.60"
    assert format_currency(Decimal("-3510")) == "-S$3,510.00"
    assert format_currency(Decimal("10"), "EUR") == "EUR10.00"


def test_trend_chart_data_emits_income_and_expense_rows() -> None:
    stats = DashboardStats(
        total_income_month=Decimal("0"),
        total_income_ytd=Decimal("0"),
        total_expenses_month=Decimal("0"),
        total_expenses_ytd=Decimal("0"),
        net_profit_month=Decimal("0"),
        net_profit_ytd=Decimal("0"),
        active_routes=0,
        recent_income=[],
        recent_expenses=[],
        monthly_trend=[
            MonthlyTrendPoint(
                month_key="2024-03",
                label="Mar",
                income=Decimal("4000"),
                expenses=Decimal("3510.00"),
            )
        ],
    )

    data = trend_chart_data(stats)

    assert data == [
        {
            "month": "Mar",
            "month_key": "2024-03",
            "series": "Income",
            "amount": 4000.0,
        },
        {
            "month": "Mar",
            "month_key": "2024-03",
            "series": "Expenses",
            "amount": 3510.0,
        },
    ]


def test_forecast_chart_data_carries_running_balance() -> None:
    details = CashflowForecastDetails(
        route_income=Decimal("10000"),
        expected_payments=Decimal("0"),
        vehicle_installments=Decimal("0"),
        vehicle_insurance=Decimal("0"),
        vehicle_parking=Decimal("0"),
        employee_costs=Decimal("3510"),
        subcontractor_costs=Decimal("0"),
        recurring_expenses=Decimal("0"),
    )
    forecast = CashflowForecast(
        months=[
            CashflowForecastMonth(
                month_key="2025-01",
                label="Jan 25",
                inflows=Decimal("10000"),
                outflows=Decimal("3510"),
                net_flow=Decimal("6490"),
                cumulative_balance=Decimal("6490"),
                details=details,
            )
        ],
        summary=CashflowForecastSummary(
            total_inflows=Decimal("10000"),
            total_outflows=Decimal("3510"),
            net_cash_flow=Decimal("6490"),
            ending_balance=Decimal("6490"),
        ),
    )

    data = forecast_chart_data(forecast)

    assert data[0]["month"] == "Jan 25"
    assert data[0]["cumulative_balance"] == 6490.0
