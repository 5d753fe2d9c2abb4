"""
components/charts.py — Plotly chart builders for the matrix dashboard.
"""

import plotly.graph_objects as go
import pandas as pd


RISK_COLORS = {
    "High": "#dc2626",
    "Medium": "#ea580c",
    "Low": "#16a34a",
}

RISK_ORDER = ["Low", "Medium", "High"]


def impact_feasibility_scatter(df: pd.DataFrame) -> go.Figure:
    """
    Feasibility vs impact scatter with the 3x3 band boundaries.
    Each dot = one opportunity, colored by risk category, sized by risk score.
    """
    if df.empty:
        return go.Figure()

    fig = go.Figure()

    # Band boundaries: Low <= 3 < Medium <= 6 < High
    for edge in (3.5, 6.5):
        fig.add_hline(y=edge, line_dash="dot", line_color="#cbd5e1", line_width=1)
        fig.add_vline(x=edge, line_dash="dot", line_color="#cbd5e1", line_width=1)

    fig.add_shape(type="rect", x0=6.5, x1=10.5, y0=6.5, y1=10.5,
                  fillcolor="rgba(34,197,94,0.08)", line_width=0, layer="below")
    fig.add_shape(type="rect", x0=0.5, x1=3.5, y0=0.5, y1=3.5,
                  fillcolor="rgba(148,163,184,0.12)", line_width=0, layer="below")

    _ann = dict(showarrow=False, font=dict(size=10, color="#94a3b8"))
    fig.add_annotation(x=8.5, y=10.2, text="Quick Wins / Must-Dos", **_ann)
    fig.add_annotation(x=2.0, y=0.8, text="Avoid / Sunset", **_ann)

    for category in RISK_ORDER:
        subset = df[df["Risk"] == category]
        if subset.empty:
            continue
        fig.add_trace(go.Scatter(
            x=subset["Overall Feasibility / Readiness"],
            y=subset["Overall Business Impact"],
            mode="markers",
            marker=dict(
                size=[max(10, r * 3) for r in subset["Overall Risk"]],
                color=RISK_COLORS[category], opacity=0.8,
                line=dict(width=1.5, color="white"),
            ),
            name=f"{category} risk",
            text=subset["Name"],
            customdata=subset[["ID", "Overall Risk", "Quadrant"]].values,
            hovertemplate=(
                "<b>%{text}</b><br>"
                "Impact: %{y}<br>"
                "Feasibility: %{x}<br>"
                "Risk: %{customdata[1]}<br>"
                "%{customdata[2]}<extra></extra>"
            ),
        ))

    fig.update_layout(
        title="Impact vs Feasibility",
        xaxis=dict(title="Feasibility / Readiness", range=[0.5, 10.5], dtick=1),
        yaxis=dict(title="Business Impact", range=[0.5, 10.5], dtick=1),
        height=460, margin=dict(t=50, b=50, l=60, r=40),
        plot_bgcolor="white", legend=dict(orientation="h", y=-0.15),
    )
    return fig


def risk_distribution_bar(df: pd.DataFrame) -> go.Figure:
    """Count of opportunities per risk category."""
    counts = df["Risk"].value_counts() if not df.empty else pd.Series(dtype=int)
    values = [int(counts.get(c, 0)) for c in RISK_ORDER]

    fig = go.Figure(go.Bar(
        x=RISK_ORDER, y=values,
        marker_color=[RISK_COLORS[c] for c in RISK_ORDER],
        text=values, textposition="outside",
    ))
    fig.update_layout(
        title="Risk Distribution",
        yaxis=dict(title="Opportunities", rangemode="tozero"),
        height=320, margin=dict(t=50, b=40, l=50, r=20),
        showlegend=False, plot_bgcolor="white",
    )
    return fig
