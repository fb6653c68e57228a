"""
Data ingest: day-ahead spot prices.

``fetch_prices`` pulls the JSON feed (over HTTP, or the bundled file when no
URL is configured), checks its shape, and converts every record from
EUR/MWh to c/kWh incl. VAT exactly once.
"""

from __future__ import annotations

import json
import math
from numbers import Real
from pathlib import Path

from .api import get_json
from .config import DATA_PATH, DATA_URL, PRICE_SCALE, UNIT_LABEL, VAT_FACTOR
from .exceptions import FeedError, FeedFormatError
from .logger import log
from .models import PriceRecord


# ── Helpers ──────────────────────────────────────────────────────────────────

def convert_price(raw: float) -> float:
    return raw * PRICE_SCALE * VAT_FACTOR


def _record(i: int, r: object) -> PriceRecord:
    if not isinstance(r, dict):
        raise FeedFormatError(f"Record {i} is not an object")
    ts = r.get("timestamp")
    price = r.get("price")
    if not isinstance(ts, str) or not ts:
        raise FeedFormatError(f"Record {i} has no timestamp")
    # bool is an int subclass
    if isinstance(price, bool) or not isinstance(price, Real):
        raise FeedFormatError(f"Record {i} has a non-numeric price: {price!r}")
    # json accepts NaN / Infinity literals
    if not math.isfinite(price):
        raise FeedFormatError(f"Record {i} has a non-finite price: {price!r}")
    return PriceRecord(
        timestamp=ts,
        price=convert_price(float(price)),
        delivery_area=str(r.get("deliveryArea", "")),
        unit=UNIT_LABEL,
    )


def read_local_feed(path: Path = DATA_PATH) -> object:
    """Decode a feed stored on disk."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return json.load(fh)
    except OSError as exc:
        raise FeedError(f"Could not read {path}: {exc}") from exc
    except ValueError as exc:
        raise FeedFormatError(f"{path} is not valid JSON: {exc}") from exc


# ── Spot prices ──────────────────────────────────────────────────────────────

def convert_records(payload: object) -> tuple[PriceRecord, ...]:
    """Validate a decoded feed payload and return converted records.

    The source ``unit`` field is ignored; every record gets ``UNIT_LABEL``.
    """
    if not isinstance(payload, list):
        raise FeedFormatError(
            f"Expected a JSON array of records, got {type(payload).__name__}"
        )
    return tuple(_record(i, r) for i, r in enumerate(payload))


def fetch_prices(
    url: str | None = DATA_URL,
    path: Path = DATA_PATH,
) -> tuple[PriceRecord, ...]:
    """Fetch and convert the whole feed.  Raises :class:`FeedError`.

    With no *url* the feed is read from *path* instead.
    """
    if url:
        log.info("Prices: GET %s", url)
        payload = get_json(url)
    else:
        log.info("Prices: reading %s", path)
        payload = read_local_feed(path)

    records = convert_records(payload)
    if records:
        log.info("Prices: %d records, %s → %s",
                 len(records), records[0].timestamp, records[-1].timestamp)
    else:
        log.warning("Prices: feed returned no records")
    return records
