import pytest

from spot_hinnat.models import PriceRecord

DAY = "2024-05-01"


@pytest.fixture
def make_records():
    """Build converted records from ``(timestamp, price)`` pairs."""

    def _make(pairs):
        return tuple(
            PriceRecord(timestamp=ts, price=p, delivery_area="FI", unit="snt/kWh")
            for ts, p in pairs
        )

    return _make


@pytest.fixture
def two_day_records(make_records):
    return make_records(
        [
            ("2024-04-30T23:00:00", 9.0),
            (f"{DAY}T00:00:00", 5.0),
            (f"{DAY}T01:00:00", 3.0),
            (f"{DAY}T02:00:00", 7.0),
            (f"{DAY}T03:00:00", 4.0),
            ("2024-05-02T00:00:00", 1.0),
        ]
    )


@pytest.fixture
def raw_feed():
    return [
        {"timestamp": f"{DAY}T00:00:00", "price": 10, "deliveryArea": "FI", "unit": "EUR/MWh"},
        {"timestamp": f"{DAY}T01:00:00", "price": 20, "deliveryArea": "FI", "unit": "EUR/MWh"},
    ]
