"""
Dash layout definition.

Pure structure: no callbacks, no data loading.
"""

from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from .config import UNIT_LABEL
from .i18n import t
from .theme import C, LABEL_STYLE, legend_swatch


def build_layout(lang: str | None = None) -> dbc.Container:
    return dbc.Container(
        [
            dcc.Store(id="state"),
            dcc.Store(id="load-request"),
            dcc.Store(id="load-result"),
            # ── Header ───────────────────────────────────────────────────────
            dbc.Row(
                [
                    dbc.Col(
                        html.Div(
                            [
                                html.H1(
                                    t("title", lang),
                                    style={
                                        "fontFamily": "'IBM Plex Mono',monospace",
                                        "fontSize": "1.35rem",
                                        "color": C["text"],
                                        "marginBottom": "1px",
                                        "fontWeight": 700,
                                    },
                                ),
                                html.Span(
                                    t("subtitle", lang),
                                    style={"color": C["muted"], "fontSize": "0.72rem"},
                                ),
                            ]
                        ),
                        width=8,
                    ),
                    dbc.Col(
                        html.Span(
                            id="status-lbl",
                            style={"color": C["muted"], "fontSize": "0.68rem"},
                        ),
                        width=4,
                        style={"textAlign": "right", "paddingTop": "4px"},
                    ),
                ],
                className="my-3 align-items-center",
            ),
            # ── Controls ─────────────────────────────────────────────────────
            dbc.Row(
                [
                    dbc.Col(
                        [
                            dbc.Label(t("pick_date", lang), style=LABEL_STYLE),
                            html.Br(),
                            dcc.DatePickerSingle(
                                id="day",
                                display_format="YYYY-MM-DD",
                                first_day_of_week=1,
                                clearable=True,
                            ),
                        ],
                        width="auto",
                    ),
                    dbc.Col(
                        dbc.Button(t("fetch", lang), id="fetch-btn", color="primary"),
                        width="auto",
                    ),
                    dbc.Col(
                        dbc.Button(
                            t("refresh", lang),
                            id="refresh-btn",
                            color="secondary",
                            outline=True,
                        ),
                        width="auto",
                    ),
                ],
                className="mb-3 g-2 align-items-end",
            ),
            dbc.Alert(id="error-alert", color="danger", is_open=False),
            # ── Stats + chart ────────────────────────────────────────────────
            dcc.Loading(
                html.Div(
                    [
                        dbc.Row(id="stat-cards", className="mb-3 g-2 justify-content-center"),
                        html.Div(
                            legend_swatch(f"{t('legend', lang)} {UNIT_LABEL}"),
                            className="mb-2",
                        ),
                        html.Div(id="chart-area"),
                    ]
                ),
                type="default",
            ),
        ],
        fluid=True,
        style={"background": C["bg"], "minHeight": "100vh"},
    )
