"""Plotly rendering of a :class:`~finance_charts.sync.ChartBundle`.

Each function turns part of a bundle into a `plotly.graph_objects.Figure`
that Streamlit renders via ``st.plotly_chart``.  Traces are added in
binding order, so the legend order matches the category order of the
ledger.
"""

from __future__ import annotations

from typing import Dict

import plotly.graph_objects as go

from .sync import ChartBundle, PieData


def _empty_figure(title: str = "No data to display") -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title=title)
    return fig


def create_ledger_bar_chart(bundle: ChartBundle, title: str | None = None) -> go.Figure:
    """Stacked monthly bars per category with the budget as a dashed line.

    Parameters
    ----------
    bundle : ChartBundle
        Output of :func:`finance_charts.sync.build_chart_bundle`.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Expense and income categories stacked in two columns per month.
    """
    if not bundle.bar:
        return _empty_figure()
    fig = go.Figure()
    for binding in bundle.bar:
        dataset = binding.dataset
        if dataset.kind == "line":
            fig.add_trace(
                go.Scatter(
                    x=bundle.labels,
                    y=dataset.data,
                    name=dataset.label,
                    mode="lines",
                    line=dict(color=dataset.border_color, width=1, dash="dash" if dataset.dashed else None),
                )
            )
            continue
        fig.add_trace(
            go.Bar(
                x=bundle.labels,
                y=dataset.data,
                name=dataset.label,
                offsetgroup=dataset.stack,
                legendgroup=dataset.stack,
                marker=dict(
                    color=dataset.background_color,
                    line=dict(color=dataset.border_color, width=1),
                ),
            )
        )
    fig.update_layout(
        title=title or "Monthly income and expenses",
        barmode="relative",
        xaxis_title="Month",
        yaxis=dict(title="Amount", rangemode="tozero"),
    )
    return fig


def create_group_pie_chart(pie: PieData, title: str | None = None) -> go.Figure:
    """Pie chart of yearly totals for one category group.

    Parameters
    ----------
    pie : PieData
        Labels, values and colours in category order.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Pie chart with slices kept in category order.
    """
    if not pie.labels:
        return _empty_figure()
    fig = go.Figure(
        go.Pie(
            labels=pie.labels,
            values=pie.values,
            marker=dict(colors=pie.colors),
            sort=False,
        )
    )
    fig.update_layout(title=title or "Category breakdown")
    return fig


def create_chart_figures(bundle: ChartBundle, currency: str | None = None) -> Dict[str, go.Figure]:
    """Build all three figures for a bundle."""
    suffix = f" ({currency})" if currency else ""
    return {
        "bar": create_ledger_bar_chart(bundle, title=f"Monthly income and expenses{suffix}"),
        "expense_pie": create_group_pie_chart(bundle.expense_pie, title=f"Expenses this year{suffix}"),
        "income_pie": create_group_pie_chart(bundle.income_pie, title=f"Income this year{suffix}"),
    }
