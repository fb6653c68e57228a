#!/usr/bin/env python3
"""
Spot-Hinnat dashboard
=====================
Day-ahead spot prices in snt/kWh (VAT 24 %), one day at a time.

Run:  python run.py   →   http://127.0.0.1:8050

The feed is fetched from DATA_URL in spot_hinnat/config.py; when that is
unset the bundled spot_hinnat/assets/data.json is read from disk.
"""

from spot_hinnat import create_app
from spot_hinnat.config import HOST, PORT
from spot_hinnat.logger import log

if __name__ == "__main__":
    app = create_app()
    log.info("→ http://127.0.0.1:%d", PORT)
    app.run(debug=False, host=HOST, port=PORT)
