"""
Centralised configuration for the Spot-Hinnat dashboard.

All tunables live here so the rest of the code base never hard-codes
magic numbers.
"""

from __future__ import annotations

from pathlib import Path

# ── Server ───────────────────────────────────────────────────────────────────
HOST: str = "0.0.0.0"
PORT: int = 8050

# ── Feed ─────────────────────────────────────────────────────────────────────
# No URL: read the bundled sample from disk.
DATA_URL: str | None = None
DATA_PATH: Path = Path(__file__).parent / "assets" / "data.json"
REQUEST_TIMEOUT: int = 15
REQUEST_RETRIES: int = 3
RETRY_PAUSE_SECONDS: float = 0.5

# ── Price conversion ─────────────────────────────────────────────────────────
PRICE_SCALE: float = 0.1   # EUR/MWh → c/kWh
VAT_FACTOR: float = 1.24
UNIT_LABEL: str = "snt/kWh"

# ── Presentation ─────────────────────────────────────────────────────────────
DISPLAY_TZ: str = "Europe/Helsinki"
LANGUAGE: str = "fi"
CHART_HEIGHT: int = 600
