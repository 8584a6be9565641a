# backend/tests/test_helpers.py
import datetime as dt
import re

from app.mock_data.helpers import (
    consistent_id, days_between, generate_hourly_series, generate_time_series,
    generate_weighted_breakdown, growth_factor, int_in_range, iso, random_in_range, unit,
)

UTC = dt.timezone.utc

def test_same_seed_and_salt_give_same_value():
    assert random_in_range("acme", 0, 1, salt=3) == random_in_range("acme", 0, 1, salt=3)
    assert unit("acme-payment", "PIX") == unit("acme-payment", "PIX")

def test_salt_and_seed_change_the_value():
    values = {unit("acme", s) for s in range(50)}
    assert len(values) == 50
    assert unit("acme1") != unit("acme2")

def test_values_stay_in_range_and_spread():
    xs = [random_in_range(f"seed-{i}", 10, 20) for i in range(2000)]
    assert all(10 <= x < 20 for x in xs)
    # rough spread check: both halves are populated
    assert sum(1 for x in xs if x < 15) > 800
    assert sum(1 for x in xs if x >= 15) > 800

def test_int_in_range_is_inclusive():
    seen = {int_in_range(f"seed-{i}", 1, 3) for i in range(500)}
    assert seen == {1, 2, 3}
    assert int_in_range("acme", 5, 5) == 5

def test_consistent_id_shape_and_uniqueness():
    ids = [consistent_id("acme-sessions", i, "sess-") for i in range(100)]
    assert len(set(ids)) == 100
    assert re.fullmatch(r"sess-\d{6}-7", ids[7])
    assert consistent_id("acme-sessions", 7, "sess-") == ids[7]

def test_weighted_breakdown_sums_to_100():
    table = {"a": 0.35, "b": 0.3, "c": 0.2, "d": 0.1, "e": 0.05}
    rows = generate_weighted_breakdown("acme", table, 1234, jitter=0.2)
    assert [r["name"] for r in rows] == list(table)
    assert abs(sum(r["percentage"] for r in rows) - 100) < 1e-6
    assert abs(sum(r["value"] for r in rows) - 1234) < 1e-6

def test_weighted_breakdown_edge_cases():
    assert generate_weighted_breakdown("acme", [], 100) == []
    rows = generate_weighted_breakdown("acme", [("x", 0.0), ("y", 0.0)], 100)
    assert [r["percentage"] for r in rows] == [0.0, 0.0]
    assert all(r["value"] == 0 for r in rows)

def test_growth_and_days():
    start = dt.datetime(2025, 1, 1, tzinfo=UTC)
    end = start + dt.timedelta(days=30)
    assert days_between(start, end) == 30
    assert days_between(end, start) == 0
    assert abs(growth_factor(start, end, 0.1) - 1.1) < 1e-9
    assert growth_factor(start, start, 0.1) == 1.0

def test_iso_format():
    assert iso(dt.datetime(2025, 3, 15, 12, 0, 0, 123456, tzinfo=UTC)) == "2025-03-15T12:00:00.123Z"

def test_time_series_is_ordered_and_non_negative():
    start = dt.datetime(2025, 3, 1, tzinfo=UTC)
    points = generate_time_series("acme", start, start + dt.timedelta(days=7), 1000, variance=0.3, daily_growth=0.01)
    assert len(points) == 7
    dates = [p["date"] for p in points]
    assert dates == sorted(dates) and len(set(dates)) == 7
    assert all(p["value"] >= 0 for p in points)
    assert generate_time_series("acme", start, start, 1000) == []

def test_hourly_series_weights_business_hours():
    day = dt.datetime(2025, 3, 14, tzinfo=UTC)
    points = generate_hourly_series("acme", day, 2400, variance=0.0)
    assert [p["hour"] for p in points] == list(range(24))
    assert points[10]["value"] == 150.0
    assert points[3]["value"] == 50.0
