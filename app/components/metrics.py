from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from config import THEME


@dataclass(frozen=True)
class Kpi:
    label: str
    value: str
    help: Optional[str] = None


def render_kpi_row(kpis: list[Kpi]) -> None:
    cols = st.columns(len(kpis))
    for c, k in zip(cols, kpis):
        with c:
            st.markdown(
                f"""
<div class="metric-card" title="{html.escape(k.help or '')}">
  <div class="metric-label">{k.label}</div>
  <div class="metric-value">{k.value}</div>
</div>
                """,
                unsafe_allow_html=True,
            )


def create_plotly_theme() -> dict:
    """
    Shared Plotly styling:
    - white card surface
    - DM Sans
    - gold/charcoal colorway
    - soft grids
    """
    return {
        "font_family": "DM Sans, system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif",
        "font_color": THEME["text_primary"],
        "paper_bgcolor": THEME["bg_card"],
        "plot_bgcolor": THEME["bg_card"],
        "colorway": [
            THEME["accent_primary"],
            THEME["ink_900"],
            THEME["accent_secondary"],
            THEME["ink_800"],
            "#6B7280",
            "#9CA3AF",
        ],
        "gridcolor": THEME["grid"],
        "axis_linecolor": THEME["border_color"],
        "title_font": {"color": THEME["ink_900"], "size": 16},
    }


def apply_plotly_theme(fig: go.Figure, x_title: str, y_title: str) -> go.Figure:
    theme = create_plotly_theme()
    fig.update_layout(
        margin=dict(l=10, r=10, t=44, b=10),
        font=dict(family=theme["font_family"], color=theme["font_color"]),
        paper_bgcolor=theme["paper_bgcolor"],
        plot_bgcolor=theme["plot_bgcolor"],
        colorway=theme["colorway"],
        showlegend=False,
        title_font=theme["title_font"],
    )
    fig.update_xaxes(
        title_text=x_title,
        gridcolor=theme["gridcolor"],
        zeroline=False,
        linecolor=theme["axis_linecolor"],
        tickfont=dict(color=THEME["text_secondary"]),
        title_font=dict(color=THEME["text_secondary"]),
    )
    fig.update_yaxes(
        title_text=y_title,
        gridcolor=theme["gridcolor"],
        zeroline=False,
        linecolor=theme["axis_linecolor"],
        tickfont=dict(color=THEME["text_secondary"]),
        title_font=dict(color=THEME["text_secondary"]),
    )
    return fig


def bar_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    title: str = "",
    y_range: Optional[tuple[float, float]] = None,
) -> go.Figure:
    fig = px.bar(df, x=x, y=y, title=title, color_discrete_sequence=[THEME["accent_primary"]])
    fig = apply_plotly_theme(fig, x_title=x, y_title=y)
    if y_range:
        fig.update_yaxes(range=list(y_range))
    st.plotly_chart(fig)
    return fig
