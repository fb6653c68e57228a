"""
Spot-Hinnat
===========
Single-page Dash dashboard for day-ahead electricity spot prices: loads the
price feed, converts EUR/MWh to c/kWh incl. VAT, and shows the cheapest
hour, the most expensive hour, the daily average and an hourly bar chart
for a chosen day.

Quick start::

    from spot_hinnat import create_app

    app = create_app()
    app.run(host="0.0.0.0", port=8050)
"""

from .aggregate import aggregate
from .app import create_app

__all__ = ["aggregate", "create_app"]
