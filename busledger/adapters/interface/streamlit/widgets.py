"""Dashboard widget preferences and chart data for the Streamlit UI.

This module holds pure, testable presentation logic. The UI is responsible
for:
    - loading report models through the use cases (no IO here),
    - persisting ``DashboardPreferences`` in ``st.session_state``,
    - passing the preferences into the render functions.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal

from busledger.domain.constants import CURRENCY_CODE
from busledger.domain.models import CashflowForecast, DashboardStats

WIDGET_KPIS = "kpis"
WIDGET_TREND = "trend"
WIDGET_RECENT_INCOME = "recent_income"
WIDGET_RECENT_EXPENSES = "recent_expenses"

DEFAULT_WIDGET_ORDER = (
    WIDGET_KPIS,
    WIDGET_TREND,
    WIDGET_RECENT_INCOME,
    WIDGET_RECENT_EXPENSES,
)

WIDGET_TITLES = {
    WIDGET_KPIS: "Key figures",
    WIDGET_TREND: "Income vs expenses (6 months)",
    WIDGET_RECENT_INCOME: "Recent income",
    WIDGET_RECENT_EXPENSES: "Recent expenses",
}


@dataclass(frozen=True)
class DashboardPreferences:
    """Visibility and order of the dashboard widgets.

    Attributes:
        order: Widget keys in display order.
        hidden: Widget keys the user switched off.
    """

    order: tuple[str, ...] = DEFAULT_WIDGET_ORDER
    hidden: frozenset[str] = field(default_factory=frozenset)

    def visible_widgets(self) -> list[str]:
        """Return the widgets to render, in order."""
        return [key for key in self.order if key not in self.hidden]

    def with_visibility(self, key: str, visible: bool) -> "DashboardPreferences":
        """Return preferences with a widget shown or hidden."""
        self._check_key(key)
        hidden = set(self.hidden)
        if visible:
            hidden.discard(key)
        else:
            hidden.add(key)
        return replace(self, hidden=frozenset(hidden))

    def moved(self, key: str, offset: int) -> "DashboardPreferences":
        """Return preferences with a widget moved by offset positions.

        Moves past either end clamp to the first or last position.
        """
        self._check_key(key)
        order = list(self.order)
        index = order.index(key)
        target = min(max(index + offset, 0), len(order) - 1)
        order.insert(target, order.pop(index))
        return replace(self, order=tuple(order))

    def _check_key(self, key: str) -> None:
        if key not in self.order:
            raise ValueError(f"Unknown dashboard widget: {key}")


def format_currency(value: Decimal, currency_code: str = CURRENCY_CODE) -> str:
    """Format currency values for display."""
    symbol = "S$" if currency_code == "SGD" else currency_code
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def trend_chart_data(stats: DashboardStats) -> list[dict[str, str | float]]:
    """Prepare long-form trend rows for an Altair grouped bar chart."""
    data: list[dict[str, str | float]] = []
    for point in stats.monthly_trend:
        data.append(
            {
                "month": point.label,
                "month_key": point.month_key,
                "series": "Income",
                "amount": float(point.income),
            }
        )
        data.append(
            {
                "month": point.label,
                "month_key": point.month_key,
                "series": "Expenses",
                "amount": float(point.expenses),
            }
        )
    return data


def forecast_chart_data(
    forecast: CashflowForecast,
) -> list[dict[str, str | float]]:
    """Prepare forecast rows for the balance line chart."""
    return [
        {
            "month": month.label,
            "month_key": month.month_key,
            "inflows": float(month.inflows),
            "outflows": float(month.outflows),
            "net_flow": float(month.net_flow),
            "cumulative_balance": float(month.cumulative_balance),
        }
        for month in forecast.months
    ]


__all__ = [
    "DEFAULT_WIDGET_ORDER",
    "WIDGET_TITLES",
    "DashboardPreferences",
    "format_currency",
    "trend_chart_data",
    "forecast_chart_data",
]
