"""Streamlit dashboard entry point."""

from datetime import date

import altair as alt
import streamlit as st

from busledger.adapters.interface.streamlit.widgets import (
    WIDGET_TITLES,
    DashboardPreferences,
    forecast_chart_data,
    format_currency,
    trend_chart_data,
)
from busledger.domain.constants import FORECAST_PERIOD_CHOICES
from busledger.domain.errors import LedgerError
from busledger.domain.models import (
    CashflowForecast,
    DashboardStats,
    ProfitAndLossReport,
)
from busledger.infrastructure.container import (
    build_cashflow_forecast_use_case,
    build_dashboard_use_case,
    build_profit_and_loss_use_case,
)
from busledger.infrastructure.logging.logger import get_app_logger
from busledger.infrastructure.settings import LedgerSettings

PREFERENCES_KEY = "dashboard_preferences"


def _fetch_dashboard_stats(today: date) -> DashboardStats:
    """Fetch dashboard KPIs from the ledger database."""
    return build_dashboard_use_case().execute(today=today)


def _fetch_profit_and_loss(
    start_date: date,
    end_date: date,
    today: date,
) -> ProfitAndLossReport:
    """Fetch the P&L statement for the selected period."""
    use_case = build_profit_and_loss_use_case()
    return use_case.execute(
        start_date=start_date,
        end_date=end_date,
        today=today,
    )


def _fetch_cashflow_forecast(
    period_months: int,
    today: date,
    settings: LedgerSettings,
) -> CashflowForecast:
    """Fetch the cash-flow projection."""
    use_case = build_cashflow_forecast_use_case(settings=settings)
    return use_case.execute(period_months=period_months, today=today)


def _get_preferences() -> DashboardPreferences:
    """Return the widget preferences stored in the session."""
    if PREFERENCES_KEY not in st.session_state:
        st.session_state[PREFERENCES_KEY] = DashboardPreferences()
    return st.session_state[PREFERENCES_KEY]


def _render_preferences_editor(
    preferences: DashboardPreferences,
) -> DashboardPreferences:
    """Render sidebar toggles and return the updated preferences."""
    st.sidebar.subheader("Widgets")
    updated = preferences
    for key in preferences.order:
        visible = st.sidebar.checkbox(
            WIDGET_TITLES[key],
            value=key not in preferences.hidden,
            key=f"widget_visible_{key}",
        )
        updated = updated.with_visibility(key, visible)
    to_move = st.sidebar.selectbox(
        "Move widget",
        options=list(updated.order),
        format_func=lambda key: WIDGET_TITLES[key],
    )
    up_col, down_col = st.sidebar.columns(2)
    if up_col.button("Up"):
        updated = updated.moved(to_move, -1)
    if down_col.button("Down"):
        updated = updated.moved(to_move, 1)
    st.session_state[PREFERENCES_KEY] = updated
    return updated


def _render_kpis(stats: DashboardStats) -> None:
    month_col, ytd_col = st.columns(2)
    with month_col:
        st.caption("This month")
        st.metric("Income", format_currency(stats.total_income_month))
        st.metric("Expenses", format_currency(stats.total_expenses_month))
        st.metric("Net profit", format_currency(stats.net_profit_month))
    with ytd_col:
        st.caption("Year to date")
        st.metric("Income", format_currency(stats.total_income_ytd))
        st.metric("Expenses", format_currency(stats.total_expenses_ytd))
        st.metric("Net profit", format_currency(stats.net_profit_ytd))
    st.metric("Active routes", stats.active_routes)


def _render_trend(stats: DashboardStats) -> None:
    """Render the six-month income vs expenses bar chart."""
    data = trend_chart_data(stats)
    chart = alt.Chart(alt.Data(values=data)).mark_bar().encode(
        x=alt.X("month:N", sort=None, title=None),
        xOffset=alt.XOffset("series:N"),
        y=alt.Y("amount:Q", title="SGD"),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(
                domain=["Income", "Expenses"],
                range=["#4c9f70", "#d1495b"],
            ),
        ),
        tooltip=[
            alt.Tooltip("month:N"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_recent_income(stats: DashboardStats) -> None:
    data = [
        {
            "Period": entry.billing_period,
            "Type": entry.income_type.value,
            "Status": entry.payment_status.value,
            "Amount": format_currency(entry.amount),
        }
        for entry in stats.recent_income
    ]
    st.dataframe(data, width="stretch", hide_index=True)


def _render_recent_expenses(stats: DashboardStats) -> None:
    data = [
        {
            "Date": entry.expense_date.isoformat(),
            "Description": entry.description or "",
            "Amount": format_currency(entry.amount),
        }
        for entry in stats.recent_expenses
    ]
    st.dataframe(data, width="stretch", hide_index=True)


_WIDGET_RENDERERS = {
    "kpis": _render_kpis,
    "trend": _render_trend,
    "recent_income": _render_recent_income,
    "recent_expenses": _render_recent_expenses,
}


def _render_dashboard(
    stats: DashboardStats,
    preferences: DashboardPreferences,
) -> None:
    """Render the visible widgets in the user's order."""
    for key in preferences.visible_widgets():
        st.subheader(WIDGET_TITLES[key])
        _WIDGET_RENDERERS[key](stats)


def _render_profit_and_loss(report: ProfitAndLossReport) -> None:
    """Render the P&L statement tables."""
    st.caption(
        f"{report.period.start.isoformat()} to {report.period.end.isoformat()}"
        f" ({report.months_in_period} months)"
    )
    income_col, expense_col, net_col = st.columns(3)
    income_col.metric(
        "Total income",
        format_currency(report.income.total_income),
    )
    expense_col.metric(
        "Total expenses",
        format_currency(report.expenses.total_expenses),
    )
    net_col.metric("Net profit", format_currency(report.net_profit))

    st.subheader("Income")
    income_rows = [
        {"Line": "Route income",
         "Amount": format_currency(report.income.route_income)},
        {"Line": "Ad-hoc income",
         "Amount": format_currency(report.income.adhoc_income)},
    ]
    income_rows.extend(
        {"Line": item.name, "Amount": format_currency(item.amount)}
        for item in report.income.by_customer
    )
    st.dataframe(income_rows, width="stretch", hide_index=True)

    st.subheader("Expenses")
    expense_rows = [
        {"Line": item.name, "Amount": format_currency(item.amount)}
        for item in report.expenses.by_category
    ]
    expense_rows.extend(
        [
            {"Line": "Subcontractors",
             "Amount": format_currency(report.expenses.subcontractor_costs)},
            {"Line": "Employees",
             "Amount": format_currency(report.expenses.employee_costs)},
            {"Line": "Vehicles",
             "Amount": format_currency(report.expenses.vehicle_costs)},
        ]
    )
    st.dataframe(expense_rows, width="stretch", hide_index=True)


def _render_cashflow(forecast: CashflowForecast) -> None:
    """Render the forecast summary and balance chart."""
    summary = forecast.summary
    inflow_col, outflow_col, net_col, ending_col = st.columns(4)
    inflow_col.metric("Inflows", format_currency(summary.total_inflows))
    outflow_col.metric("Outflows", format_currency(summary.total_outflows))
    net_col.metric("Net cash flow", format_currency(summary.net_cash_flow))
    ending_col.metric("Ending balance", format_currency(summary.ending_balance))

    data = forecast_chart_data(forecast)
    chart = alt.Chart(alt.Data(values=data)).mark_line(point=True).encode(
        x=alt.X("month:N", sort=None, title=None),
        y=alt.Y("cumulative_balance:Q", title="Cumulative balance (SGD)"),
        tooltip=[
            alt.Tooltip("month:N"),
            alt.Tooltip("inflows:Q", format=",.2f"),
            alt.Tooltip("outflows:Q", format=",.2f"),
            alt.Tooltip("net_flow:Q", format=",.2f"),
            alt.Tooltip("cumulative_balance:Q", format=",.2f"),
        ],
    )
    st.altair_chart(chart, width="stretch")
    st.dataframe(
        [
            {
                "Month": row["month"],
                "Inflows": format_currency(month.inflows),
                "Outflows": format_currency(month.outflows),
                "Net": format_currency(month.net_flow),
                "Balance": format_currency(month.cumulative_balance),
            }
            for row, month in zip(data, forecast.months)
        ],
        width="stretch",
        hide_index=True,
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Bus Ledger", layout="wide")
    st.title("Bus Ledger")

    settings = LedgerSettings.from_env()
    today = settings.today()
    page = st.sidebar.selectbox(
        "Page",
        ["Dashboard", "Profit & Loss", "Cash Flow"],
    )

    try:
        if page == "Dashboard":
            preferences = _render_preferences_editor(_get_preferences())
            _render_dashboard(_fetch_dashboard_stats(today), preferences)
        elif page == "Profit & Loss":
            start_date = st.sidebar.date_input(
                "From",
                value=date(today.year, 1, 1),
            )
            end_date = st.sidebar.date_input("To", value=today)
            _render_profit_and_loss(
                _fetch_profit_and_loss(start_date, end_date, today)
            )
        else:
            choices = list(FORECAST_PERIOD_CHOICES)
            default = settings.forecast_months
            period_months = st.sidebar.selectbox(
                "Months ahead",
                choices,
                index=choices.index(default) if default in choices else 1,
            )
            _render_cashflow(
                _fetch_cashflow_forecast(period_months, today, settings)
            )
    except LedgerError as exc:
        get_app_logger().error(f"{page} failed: {exc}")
        st.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    main()
