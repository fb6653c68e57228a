"""
Dashboard callbacks: feed (re)load, day selection, stat cards and the
hourly price chart.

Callbacks only move :class:`DashboardState` through its transitions and
render :func:`view`; the builders below are pure functions.

A load runs in two steps so the store sees it begin: ``update_state``
writes the LOADING state with a new request id, ``fetch`` runs the request
for that id, and ``finish_load`` folds the result into whatever the store
holds by then.  A result whose id is no longer current is dropped.
"""

from __future__ import annotations

from datetime import datetime

import dash_bootstrap_components as dbc
import plotly.graph_objects as go
from dash import Input, Output, State, ctx, dcc, html, no_update

from .config import CHART_HEIGHT, DATA_URL, UNIT_LABEL
from .exceptions import FeedError
from .fetchers import fetch_prices
from .i18n import t
from .logger import log
from .models import DailyStats, PriceRecord
from .state import (
    FAILED,
    LOADING,
    DashboardState,
    day_selected,
    load_failed,
    load_started,
    load_succeeded,
    view,
)
from .theme import BASE, C, format_hour, format_price, kpi_card, rgba


def run_load(request: dict, url: str | None = DATA_URL) -> dict:
    """Fetch the feed for one load request; the result carries its id."""
    rid = request["request_id"]
    try:
        records = fetch_prices(url)
    except FeedError as exc:
        log.error("Failed to fetch data: %s", exc.message)
        return {"request_id": rid, "error": exc.message}
    return {"request_id": rid, "records": [r.to_dict() for r in records]}


def apply_load_result(state: DashboardState, result: dict) -> DashboardState:
    rid = result["request_id"]
    if "error" in result:
        return load_failed(state, result["error"], rid)
    records = (PriceRecord.from_dict(r) for r in result.get("records", []))
    return load_succeeded(state, records, rid)


def register_dashboard_callbacks(app, data_url: str | None = DATA_URL, lang: str | None = None) -> None:
    """Attach all dashboard callbacks to *app*."""

    @app.callback(
        Output("state", "data"),
        Output("load-request", "data"),
        Input("refresh-btn", "n_clicks"),
        Input("fetch-btn", "n_clicks"),
        State("day", "date"),
        State("state", "data"),
    )
    def update_state(_refresh, _fetch, day, data):
        state = DashboardState.from_store(data)
        if ctx.triggered_id == "fetch-btn":
            log.info("Day selected: %s", day)
            return day_selected(state, day).to_store(), no_update
        # initial page load or refresh button
        state, rid = load_started(state)
        return state.to_store(), {"request_id": rid}

    @app.callback(
        Output("load-result", "data"),
        Input("load-request", "data"),
        prevent_initial_call=True,
    )
    def fetch(request):
        if not request:
            return no_update
        return run_load(request, data_url)

    @app.callback(
        Output("state", "data", allow_duplicate=True),
        Input("load-result", "data"),
        State("state", "data"),
        prevent_initial_call=True,
    )
    def finish_load(result, data):
        if not result:
            return no_update
        return apply_load_result(DashboardState.from_store(data), result).to_store()

    @app.callback(
        Output("stat-cards", "children"),
        Output("chart-area", "children"),
        Output("error-alert", "children"),
        Output("error-alert", "is_open"),
        Output("status-lbl", "children"),
        Input("state", "data"),
    )
    def render(data):
        return render_state(DashboardState.from_store(data), lang)


# ── Builders (pure functions) ────────────────────────────────────────────────

def render_state(state: DashboardState, lang: str | None = None) -> tuple:
    """Outputs for the ``render`` callback, in callback order."""
    if state.load_status == FAILED:
        msg = f"{t('load_failed', lang)}: {state.error}"
        return [], html.Div(), msg, True, ""
    if state.load_status == LOADING:
        return [], html.P(t("loading", lang)), "", False, ""

    filtered, stats = view(state)
    status = (
        f"{t('records_loaded', lang, n=len(state.records))}"
        f"  ·  {datetime.now().strftime('%H:%M')}"
    )
    return (
        build_stat_cards(stats, lang),
        build_chart_area(filtered, stats, lang),
        "",
        False,
        status,
    )


def build_stat_cards(stats: DailyStats, lang: str | None = None) -> list:
    cheapest = f"{t('cheapest', lang)} {format_hour(stats.cheapest_hour)}".strip()
    dearest = f"{t('most_expensive', lang)} {format_hour(stats.most_expensive_hour)}".strip()
    return [
        dbc.Col(kpi_card(cheapest, format_price(stats.cheapest_price), UNIT_LABEL, C["green"]), md=3),
        dbc.Col(kpi_card(dearest, format_price(stats.most_expensive_price), UNIT_LABEL, C["red"]), md=3),
        dbc.Col(kpi_card(t("average", lang), format_price(stats.average_price), UNIT_LABEL, C["avg"]), md=3),
    ]


def build_chart_area(
    filtered: tuple[PriceRecord, ...],
    stats: DailyStats,
    lang: str | None = None,
):
    if not filtered:
        return html.P(
            t("no_data", lang),
            style={"color": C["muted"], "textAlign": "center", "marginTop": "40px"},
        )
    return dcc.Graph(
        id="price-chart",
        figure=build_price_chart(filtered, stats),
        config={"displayModeBar": False},
    )


def build_price_chart(filtered: tuple[PriceRecord, ...], stats: DailyStats) -> go.Figure:
    """Hourly bars keyed by the raw timestamp, ticks shown as ``HH:MM``.

    A category axis on the raw stamps keeps both hours of a DST fall-back
    day apart even though they format to the same label.
    """
    stamps = [r.timestamp for r in filtered]
    hours = [format_hour(ts) for ts in stamps]
    fig = go.Figure(
        go.Bar(
            x=stamps,
            y=[r.price for r in filtered],
            customdata=hours,
            marker=dict(color=C["bar"], line=dict(color=C["bar_edge"], width=2)),
            hovertemplate="%{customdata}  %{y:.2f} " + UNIT_LABEL + "<extra></extra>",
        )
    )
    fig.add_hline(
        y=stats.average_price,
        line_color=rgba(C["avg"], 0.8), line_width=1, line_dash="dot",
    )
    fig.update_layout(**BASE, height=CHART_HEIGHT, bargap=0.2, yaxis_title=UNIT_LABEL)
    fig.update_xaxes(type="category", tickmode="array", tickvals=stamps, ticktext=hours)
    return fig
