"""
Colour palette, Plotly base layout, value formatting and small Dash UI
components.

Keeps visual constants out of callback code so charts stay consistent.
"""

from __future__ import annotations

import pandas as pd
from dash import html

from .config import DISPLAY_TZ

# ── Colour palette ───────────────────────────────────────────────────────────

C: dict[str, str] = {
    "bg":      "#0a0e1a",
    "card":    "#111827",
    "border":  "#1f2937",
    "bar":     "rgba(246,148,148,0.5)",
    "bar_edge": "rgba(250,90,90,0.5)",
    "text":    "#f1f5f9",
    "muted":   "#64748b",
    "green":   "#22c55e",
    "red":     "#ef4444",
    "avg":     "#38bdf8",
}


def rgba(hex_color: str, alpha: float = 1.0) -> str:
    h = hex_color.lstrip("#")
    r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    return f"rgba({r},{g},{b},{alpha})"


# ── Plotly base layout dict ──────────────────────────────────────────────────

BASE: dict = dict(
    paper_bgcolor=C["bg"],
    plot_bgcolor=C["card"],
    font=dict(color=C["text"], family="'IBM Plex Mono',monospace", size=11),
    xaxis=dict(gridcolor=C["border"], linecolor=C["border"], zeroline=False),
    yaxis=dict(gridcolor=C["border"], linecolor=C["border"], zeroline=False),
    margin=dict(l=55, r=30, t=20, b=50),
    hoverlabel=dict(bgcolor=C["card"], font_size=11),
    showlegend=False,
)

LABEL_STYLE: dict = {
    "color": C["muted"],
    "fontSize": "0.68rem",
    "textTransform": "uppercase",
    "letterSpacing": "0.08em",
}


# ── Formatting ───────────────────────────────────────────────────────────────

def format_hour(ts: str | None, tz: str = DISPLAY_TZ) -> str:
    """``HH:MM`` (24 h) for a feed timestamp; ``""`` if it cannot be read.

    Offset-aware stamps are shown in *tz*; naive ones are taken as local.
    """
    if not ts:
        return ""
    try:
        stamp = pd.Timestamp(ts)
    except (ValueError, TypeError):
        return ""
    if pd.isna(stamp):
        return ""
    if stamp.tzinfo is not None:
        stamp = stamp.tz_convert(tz)
    return stamp.strftime("%H:%M")


def format_price(value: float) -> str:
    return f"{value:.2f}"


# ── Reusable UI atoms ───────────────────────────────────────────────────────

def kpi_card(
    label: str,
    val: str,
    unit: str,
    color: str,
    border: str | None = None,
) -> html.Div:
    return html.Div(
        [
            html.P(
                label,
                style={
                    "color": C["muted"],
                    "fontSize": "0.7rem",
                    "letterSpacing": "0.1em",
                    "textTransform": "uppercase",
                    "marginBottom": "2px",
                },
            ),
            html.Span(
                val,
                style={
                    "color": color,
                    "fontSize": "1.6rem",
                    "fontFamily": "'IBM Plex Mono',monospace",
                    "fontWeight": 700,
                },
            ),
            html.Span(f" {unit}", style={"color": C["muted"], "fontSize": "0.8rem"}),
        ],
        style={
            "background": C["card"],
            "border": f"1px solid {C['border']}",
            "borderLeft": f"3px solid {border or color}",
            "borderRadius": "6px",
            "padding": "10px 16px",
            "minHeight": "100px",
            "textAlign": "center",
        },
    )


def legend_swatch(label: str) -> html.Div:
    return html.Div(
        [
            html.Div(
                style={
                    "width": "30px",
                    "height": "15px",
                    "backgroundColor": C["bar"],
                    "border": f"2px solid {C['bar_edge']}",
                    "marginRight": "10px",
                }
            ),
            html.Span(label, style={"color": C["muted"], "fontSize": "0.8rem"}),
        ],
        style={"display": "flex", "alignItems": "center", "justifyContent": "center"},
    )
