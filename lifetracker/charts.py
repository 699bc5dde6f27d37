"""Plotly figures for the budget dashboard."""

from typing import Any, Sequence

import plotly.graph_objects as go

from lifetracker.models import category_color

INCOME_COLOR = "#22c55e"
EXPENSE_COLOR = "#ef4444"


def _apply_layout(fig: go.Figure) -> go.Figure:
    fig.update_layout(
        margin=dict(t=0, b=0, l=0, r=0),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(color="#f8fafc"),
        showlegend=True,
    )
    return fig


def build_category_pie(category_data: Sequence[dict[str, Any]]) -> go.Figure:
    """Donut chart of expenses per category."""
    names = [row["name"] for row in category_data]
    values = [row["value"] for row in category_data]
    colors = [category_color(name) for name in names]

    fig = go.Figure(
        data=[
            go.Pie(
                labels=names,
                values=values,
                hole=0.4,
                marker=dict(colors=colors),
                hovertemplate="%{label}: $%{value:,.2f}<extra></extra>",
            )
        ]
    )
    return _apply_layout(fig)


def build_monthly_bar(monthly_data: Sequence[dict[str, Any]]) -> go.Figure:
    """Grouped income/expense bars for the six-month series."""
    months = [row["month"] for row in monthly_data]

    fig = go.Figure(
        data=[
            go.Bar(
                name="income",
                x=months,
                y=[row["income"] for row in monthly_data],
                marker_color=INCOME_COLOR,
            ),
            go.Bar(
                name="expenses",
                x=months,
                y=[row["expenses"] for row in monthly_data],
                marker_color=EXPENSE_COLOR,
            ),
        ]
    )
    fig.update_layout(barmode="group", yaxis=dict(tickprefix="$", color="#94a3b8"))
    return _apply_layout(fig)
