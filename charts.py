from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from tax_calculator import YearRecord

OLD_TAX_COLOR = "#8884d8"
NEW_TAX_COLOR = "#82ca9d"
INDEXED_COST_COLOR = "#ff7300"


# =============================================================================
# CHART BUILDERS
# =============================================================================
def create_tax_comparison_chart(df: pd.DataFrame, crossover: Optional[YearRecord] = None) -> go.Figure:
    """Old vs new tax over the holding period, with indexed cost and the crossover year."""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=df["Year"], y=df["Old Tax"],
        name="Old Tax (20% with indexation)",
        line=dict(color=OLD_TAX_COLOR, width=3),
        hovertemplate="Year %{x}<br>Old Tax: ₹%{y:,.0f}<extra></extra>"
    ))
    fig.add_trace(go.Scatter(
        x=df["Year"], y=df["New Tax"],
        name="New Tax (12.5% flat)",
        line=dict(color=NEW_TAX_COLOR, width=3),
        hovertemplate="Year %{x}<br>New Tax: ₹%{y:,.0f}<extra></extra>"
    ))
    fig.add_trace(go.Scatter(
        x=df["Year"], y=df["Indexed Cost"],
        name="Indexed Cost",
        line=dict(color=INDEXED_COST_COLOR, width=2, dash="dot"),
        hovertemplate="Year %{x}<br>Indexed Cost: ₹%{y:,.0f}<extra></extra>"
    ))

    if crossover is not None:
        fig.add_vline(
            x=crossover.year, line_color="red", line_width=2,
            annotation_text="Crossover", annotation_position="top"
        )

    fig.update_layout(
        height=450,
        xaxis_title="Holding Period (years)",
        yaxis_title="Amount (₹)",
        paper_bgcolor="rgba(0,0,0,0)",
        legend=dict(orientation="h", y=-0.2, x=0.5, xanchor="center"),
        hovermode="x unified",
        margin=dict(t=30, r=30, l=20, b=5),
    )
    return fig


def create_sensitivity_chart(rates: np.ndarray, crossover_years: np.ndarray, current_rate: float) -> go.Figure:
    """Crossover year as a function of the indexation rate."""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=rates, y=crossover_years,
        name="Crossover Year",
        line=dict(color=OLD_TAX_COLOR, width=3),
        connectgaps=False,
        hovertemplate="Rate %{x:.1f}%<br>Crossover: year %{y:.0f}<extra></extra>"
    ))

    fig.add_vline(x=current_rate, line_dash="dash", line_color="#e74c3c", opacity=0.7)

    fig.update_layout(
        title=dict(text="Crossover Year vs Indexation Rate", font=dict(size=14)),
        xaxis_title="Annual Indexation Rate (%)",
        yaxis_title="Crossover Year",
        height=400,
        paper_bgcolor="rgba(0,0,0,0)",
        showlegend=False,
    )
    return fig
