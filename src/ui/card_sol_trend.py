# src/ui/card_sol_trend.py
from __future__ import annotations

from collections.abc import Sequence

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from src.config import COLOR_COLD_BLUE, COLOR_MARS_ORANGE, COLOR_MARS_RED, PLOTLY_CONFIG
from src.viewmodels.mars_weather import SolRow

FRAME_COLUMNS = ["sol", "temperature", "temp_min", "temp_max", "wind_speed", "pressure"]


def sol_frame(rows: Sequence[SolRow]) -> pd.DataFrame:
    """Rivit DataFrameksi samassa järjestyksessä. Puuttuva min/max -> NaN."""
    return pd.DataFrame(
        [
            {
                "sol": r.sol,
                "temperature": r.temperature,
                "temp_min": r.temp_min,
                "temp_max": r.temp_max,
                "wind_speed": r.wind_speed,
                "pressure": r.pressure,
            }
            for r in rows
        ],
        columns=FRAME_COLUMNS,
    )


def build_sol_trend_figure(rows: Sequence[SolRow]) -> go.Figure | None:
    """Temperature per sol. Returns None when there is nothing to draw a line through."""
    if len(rows) < 2:
        return None

    df = sol_frame(rows)
    x = df["sol"].tolist()

    fig = go.Figure()
    if df["temp_max"].notna().any():
        fig.add_trace(
            go.Scatter(
                x=x,
                y=df["temp_max"],
                name="max",
                mode="lines",
                line=dict(color=COLOR_MARS_ORANGE, width=1, dash="dot"),
                hovertemplate="Sol %{x}<br>max %{y:.1f} °C<extra></extra>",
            )
        )
    fig.add_trace(
        go.Scatter(
            x=x,
            y=df["temperature"],
            name="avg",
            mode="lines+markers",
            line=dict(color=COLOR_MARS_RED, width=2),
            hovertemplate="Sol %{x}<br>avg %{y:.1f} °C<extra></extra>",
        )
    )
    if df["temp_min"].notna().any():
        fig.add_trace(
            go.Scatter(
                x=x,
                y=df["temp_min"],
                name="min",
                mode="lines",
                line=dict(color=COLOR_COLD_BLUE, width=1, dash="dot"),
                hovertemplate="Sol %{x}<br>min %{y:.1f} °C<extra></extra>",
            )
        )

    fig.update_layout(
        margin=dict(l=60, r=10, t=24, b=44),
        xaxis_title="Sol",
        yaxis_title="°C",
        height=220,
        showlegend=False,
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
        # sol-avaimet ovat merkkijonoja, ei numeroakselia
        xaxis=dict(type="category", gridcolor="rgba(255,255,255,0.08)"),
        yaxis=dict(gridcolor="rgba(255,255,255,0.08)", automargin=True),
    )
    return fig


def render_sol_trend(rows: Sequence[SolRow]) -> None:
    fig = build_sol_trend_figure(rows)
    if fig is None:
        return
    st.plotly_chart(fig, use_container_width=True, theme=None, config=PLOTLY_CONFIG)
