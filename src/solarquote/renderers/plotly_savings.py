"""Plotly savings chart renderer.

Bars show the savings earned each year; the line shows the cumulative total
reaching the twenty-year figure of the projection.
"""

import numpy as np
import plotly.graph_objects as go

from solarquote.compute import SAVINGS_HORIZON_YEARS, savings_schedule
from solarquote.models import SavingsProjection

_BAR_COLOR = "#f5b301"
_LINE_COLOR = "#1f6f43"
_PAYBACK_COLOR = "#c0392b"


def _payback_crossing(
    cumulative: np.ndarray, annual_savings: float, payback_period: float | None
) -> float | None:
    """Year at which the cumulative line reaches the installation cost."""
    if not len(cumulative) or payback_period is None or payback_period <= 0:
        return None
    if annual_savings <= 0:
        return None
    cost = payback_period * annual_savings
    if cost > cumulative[-1]:
        return None
    years = np.arange(0, len(cumulative) + 1)
    return float(np.interp(cost, np.concatenate(([0.0], cumulative)), years))


def render_savings_chart(
    projection: SavingsProjection,
    payback_period: float | None = None,
    years: int = SAVINGS_HORIZON_YEARS,
    lang: str = "fr",
) -> go.Figure:
    """Render a SavingsProjection as a yearly/cumulative Plotly chart.

    Args:
        projection: Savings figures of a simulated project.
        payback_period: Years to recover the installation cost at full
            annual savings. The marker is drawn where the cumulative line
            reaches that cost, when it does so inside the horizon.
        years: Number of years on the x-axis.
        lang: 'fr' or 'en' for axis titles.

    Returns:
        Plotly Figure object.
    """
    year_axis = np.arange(1, years + 1)
    cumulative = np.asarray(savings_schedule(projection, years), dtype=float)
    yearly = np.diff(cumulative, prepend=0.0)

    yearly_name, cumulative_name, x_title = (
        ("Économies annuelles", "Économies cumulées", "Année")
        if lang == "fr"
        else ("Yearly savings", "Cumulative savings", "Year")
    )

    bar_trace = go.Bar(
        x=year_axis,
        y=yearly,
        name=yearly_name,
        marker=dict(color=_BAR_COLOR),
        hovertemplate="%{y:,.0f} €<extra></extra>",
    )
    line_trace = go.Scatter(
        x=year_axis,
        y=cumulative,
        mode="lines+markers",
        name=cumulative_name,
        line=dict(color=_LINE_COLOR, width=2),
        yaxis="y2",
        hovertemplate="%{y:,.0f} €<extra></extra>",
    )

    fig = go.Figure(data=[bar_trace, line_trace])
    fig.update_layout(
        margin=dict(l=0, r=0, t=10, b=0),
        height=360,
        legend=dict(orientation="h", y=1.12),
        xaxis=dict(title=x_title, dtick=1 if years <= 20 else 5),
        yaxis=dict(title="€ / an" if lang == "fr" else "€ / yr"),
        yaxis2=dict(title="€", overlaying="y", side="right", showgrid=False),
    )
    crossing = _payback_crossing(cumulative, projection.annual_savings, payback_period)
    if crossing is not None:
        fig.add_vline(
            x=crossing,
            line=dict(color=_PAYBACK_COLOR, dash="dash", width=1),
            annotation_text="Retour sur investissement"
            if lang == "fr"
            else "Payback",
        )
    fig._config = {"displayModeBar": False}  # type: ignore[attr-defined]
    return fig
