"""Tests for feed validation and price conversion."""

import pytest

from spot_hinnat import fetchers
from spot_hinnat.aggregate import aggregate
from spot_hinnat.config import UNIT_LABEL
from spot_hinnat.exceptions import FeedError, FeedFormatError

DAY = "2024-05-01"


def test_conversion_law(raw_feed):
    records = fetchers.convert_records(raw_feed)
    for raw, rec in zip(raw_feed, records):
        assert rec.price == pytest.approx(raw["price"] * 0.1 * 1.24)


def test_unit_is_overwritten(raw_feed):
    raw_feed[1]["unit"] = "something else"
    records = fetchers.convert_records(raw_feed)
    assert {r.unit for r in records} == {UNIT_LABEL}


def test_delivery_area_passes_through(raw_feed):
    records = fetchers.convert_records(raw_feed)
    assert all(r.delivery_area == "FI" for r in records)


def test_missing_delivery_area_is_empty(raw_feed):
    del raw_feed[0]["deliveryArea"]
    assert fetchers.convert_records(raw_feed)[0].delivery_area == ""


def test_single_record_day():
    payload = [{"timestamp": f"{DAY}T00:00:00", "price": 10, "deliveryArea": "FI", "unit": "x"}]
    filtered, stats = aggregate(fetchers.convert_records(payload), DAY)
    assert len(filtered) == 1
    assert filtered[0].price == pytest.approx(1.24)
    assert stats.cheapest_hour == stats.most_expensive_hour == f"{DAY}T00:00:00"
    assert stats.average_price == pytest.approx(1.24)


def test_two_record_day(raw_feed):
    _, stats = aggregate(fetchers.convert_records(raw_feed), DAY)
    assert stats.cheapest_price == pytest.approx(1.24)
    assert stats.most_expensive_price == pytest.approx(2.48)
    assert stats.average_price == pytest.approx(1.86)


def test_empty_array_is_valid():
    assert fetchers.convert_records([]) == ()


@pytest.mark.parametrize(
    "payload",
    [
        {"records": []},
        "not a list",
        [["2024-05-01T00:00:00", 10]],
        [{"price": 10}],
        [{"timestamp": "", "price": 10}],
        [{"timestamp": "2024-05-01T00:00:00", "price": "10"}],
        [{"timestamp": "2024-05-01T00:00:00", "price": None}],
        [{"timestamp": "2024-05-01T00:00:00", "price": True}],
        [{"timestamp": "2024-05-01T00:00:00", "price": float("nan")}],
        [{"timestamp": "2024-05-01T00:00:00", "price": float("inf")}],
        [{"timestamp": "2024-05-01T00:00:00", "price": float("-inf")}],
    ],
)
def test_malformed_payload_raises(payload):
    with pytest.raises(FeedFormatError):
        fetchers.convert_records(payload)


def test_fetch_prices_uses_url(monkeypatch, raw_feed):
    seen = []

    def fake_get_json(url):
        seen.append(url)
        return raw_feed

    monkeypatch.setattr(fetchers, "get_json", fake_get_json)
    records = fetchers.fetch_prices("http://feed.test/data.json")
    assert seen == ["http://feed.test/data.json"]
    assert len(records) == 2


def test_nan_literal_in_feed_is_rejected(tmp_path):
    feed = tmp_path / "data.json"
    feed.write_text(
        '[{"timestamp": "2024-05-01T00:00:00", "price": 10},'
        ' {"timestamp": "2024-05-01T01:00:00", "price": NaN}]',
        encoding="utf-8",
    )
    with pytest.raises(FeedFormatError):
        fetchers.fetch_prices(None, path=feed)


def test_bundled_feed_is_read_without_url():
    records = fetchers.fetch_prices(None)
    assert len(records) == 48
    assert records[0].timestamp == f"{DAY}T00:00:00"
    assert records[0].price == pytest.approx(42.1 * 0.1 * 1.24)


def test_local_feed_missing_file(tmp_path):
    with pytest.raises(FeedError):
        fetchers.fetch_prices(None, path=tmp_path / "missing.json")


def test_local_feed_invalid_json(tmp_path):
    feed = tmp_path / "data.json"
    feed.write_text("not json", encoding="utf-8")
    with pytest.raises(FeedFormatError):
        fetchers.fetch_prices(None, path=feed)


def test_url_takes_precedence_over_file(monkeypatch, tmp_path, raw_feed):
    monkeypatch.setattr(fetchers, "get_json", lambda url: raw_feed)
    records = fetchers.fetch_prices("http://feed.test/data.json", path=tmp_path / "missing.json")
    assert len(records) == 2
