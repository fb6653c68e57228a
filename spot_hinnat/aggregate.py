"""
Daily aggregation: filter the record sequence to one calendar day and
summarise it.

Everything here is pure: same records + same day key → same result.  No
locale or timezone handling happens at this level; timestamps are matched
and returned as the raw strings the feed delivered.
"""

from __future__ import annotations

import math
from typing import Sequence

from .models import DailyStats, PriceRecord, records_frame


def filter_day(records: Sequence[PriceRecord], day_key: str) -> tuple[PriceRecord, ...]:
    """Records whose timestamp starts with *day_key*, in input order.

    A plain string-prefix match, so *day_key* must use the same leading
    format as the timestamps (``YYYY-MM-DD``).  An empty key selects nothing.
    """
    if not day_key:
        return ()
    return tuple(r for r in records if r.timestamp.startswith(day_key))


def daily_stats(filtered: Sequence[PriceRecord]) -> DailyStats:
    """Cheapest, most expensive and mean price of *filtered*.

    Ties resolve to the earliest record (``idxmin``/``idxmax`` return the
    first occurrence).  Non-finite prices take no part in any of the three.
    """
    if not filtered:
        return DailyStats.empty()

    df = records_frame(filtered)
    prices = df["price"].astype(float)
    prices = prices[prices.map(math.isfinite)]
    if prices.empty:
        return DailyStats.empty()
    lo = prices.idxmin()
    hi = prices.idxmax()
    return DailyStats(
        cheapest_hour=df.at[lo, "timestamp"],
        most_expensive_hour=df.at[hi, "timestamp"],
        cheapest_price=float(prices[lo]),
        most_expensive_price=float(prices[hi]),
        average_price=float(prices.sum() / len(prices)),
    )


def aggregate(
    records: Sequence[PriceRecord],
    day_key: str,
) -> tuple[tuple[PriceRecord, ...], DailyStats]:
    filtered = filter_day(records, day_key)
    return filtered, daily_stats(filtered)
