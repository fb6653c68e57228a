"""
Record types shared by the loader, the aggregator and the callbacks.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

import pandas as pd

RECORD_COLUMNS: list = ["timestamp", "price", "delivery_area", "unit"]


@dataclass(frozen=True)
class PriceRecord:
    """One hourly observation, price already converted to ``unit``."""

    timestamp: str
    price: float
    delivery_area: str
    unit: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "PriceRecord":
        return cls(
            timestamp=str(d["timestamp"]),
            price=float(d["price"]),
            delivery_area=str(d.get("delivery_area", "")),
            unit=str(d.get("unit", "")),
        )


@dataclass(frozen=True)
class DailyStats:
    """Summary of one day's records.

    ``cheapest_hour`` and ``most_expensive_hour`` hold the raw timestamp of
    the winning record; turning them into ``HH:MM`` is left to
    :func:`spot_hinnat.theme.format_hour`.
    """

    cheapest_hour: str = ""
    most_expensive_hour: str = ""
    cheapest_price: float = 0.0
    most_expensive_price: float = 0.0
    average_price: float = 0.0

    @classmethod
    def empty(cls) -> "DailyStats":
        return cls()


def records_frame(records) -> pd.DataFrame:
    """Tabulate records; row order follows the input sequence."""
    if not records:
        return pd.DataFrame(columns=RECORD_COLUMNS)
    return pd.DataFrame([r.to_dict() for r in records], columns=RECORD_COLUMNS)
