"""
Application factory: builds the Dash app, registers layout and callbacks.
"""

from __future__ import annotations

import dash
import dash_bootstrap_components as dbc

from .callbacks_dashboard import register_dashboard_callbacks
from .config import DATA_URL
from .i18n import t
from .layout import build_layout


def create_app(data_url: str | None = None, language: str | None = None) -> dash.Dash:
    """Construct and return a fully-wired Dash application."""
    app = dash.Dash(
        __name__,
        external_stylesheets=[dbc.themes.DARKLY],
        title=t("title", language),
    )
    app.layout = build_layout(language)
    register_dashboard_callbacks(app, data_url or DATA_URL, language)
    return app
