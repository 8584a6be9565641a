# backend/tests/test_timeframe.py
import datetime as dt
import logging

import pytest

from app.mock_data import config
from app.mock_data.timeframe import (
    InvalidDateRangeError, parse_date, parse_period, previous_range, resolve_range,
)
from conftest import FIXED_NOW

@pytest.mark.parametrize("period,days", [("today", 1), ("week", 7), ("month", 30), ("year", 365)])
def test_named_periods_end_now(period, days):
    rng = resolve_range(period, now=FIXED_NOW)
    assert rng.end == FIXED_NOW
    assert rng.end - rng.start == dt.timedelta(days=days)

def test_custom_requires_both_dates():
    start = dt.datetime(2025, 1, 1, tzinfo=dt.timezone.utc)
    with pytest.raises(InvalidDateRangeError):
        resolve_range("custom", start_date=start)
    with pytest.raises(InvalidDateRangeError):
        resolve_range("custom", end_date=start)

def test_custom_rejects_reversed_window():
    a = dt.datetime(2025, 1, 1, tzinfo=dt.timezone.utc)
    with pytest.raises(InvalidDateRangeError):
        resolve_range("custom", a + dt.timedelta(days=1), a)

def test_custom_naive_dates_are_utc():
    rng = resolve_range("custom", dt.datetime(2025, 1, 1), dt.datetime(2025, 1, 8))
    assert rng.start.tzinfo is not None
    assert rng.start.utcoffset() == dt.timedelta(0)

def test_parse_period(caplog):
    assert parse_period(None) == "month"
    assert parse_period("YEAR") == "year"
    with caplog.at_level(logging.WARNING):
        assert parse_period("fortnight") == "week"
    assert "fortnight" in caplog.text

def test_parse_date():
    d = parse_date("2025-01-02T03:04:05Z")
    assert d == dt.datetime(2025, 1, 2, 3, 4, 5, tzinfo=dt.timezone.utc)
    assert parse_date("") is None
    with pytest.raises(InvalidDateRangeError):
        parse_date("not-a-date")

def test_previous_range_has_same_length():
    rng = resolve_range("week", now=FIXED_NOW)
    prev = previous_range(rng)
    assert prev.end == rng.start
    assert prev.end - prev.start == rng.end - rng.start

def test_custom_window_length_is_capped():
    start = dt.datetime(2020, 1, 1, tzinfo=dt.timezone.utc)
    rng = resolve_range("custom", start, start + dt.timedelta(days=config.MAX_CUSTOM_RANGE_DAYS))
    assert rng.start == start
    with pytest.raises(InvalidDateRangeError):
        resolve_range("custom", start, start + dt.timedelta(days=config.MAX_CUSTOM_RANGE_DAYS + 1))

def test_custom_window_outside_supported_years():
    with pytest.raises(InvalidDateRangeError):
        resolve_range("custom", dt.datetime(1000, 1, 1), dt.datetime(1000, 1, 8))
    with pytest.raises(InvalidDateRangeError):
        resolve_range("custom", dt.datetime(9999, 12, 1), dt.datetime(9999, 12, 31))
