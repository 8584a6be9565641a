# backend/app/mock_data/timeframe.py
import datetime as dt
import logging
from typing import Optional, Union, get_args

from app.mock_data.config import CUSTOM_YEAR_RANGE, MAX_CUSTOM_RANGE_DAYS, PERIOD_DAYS
from app.schemas.mock_data import DateRange, GenerationParams, Period

PERIODS = get_args(Period)
DEFAULT_PERIOD: Period = "month"
FALLBACK_PERIOD: Period = "week"

class InvalidDateRangeError(ValueError):
    """Raised for a custom window that is missing a bound, reversed or unparseable."""

def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)

def _as_utc(d: dt.datetime) -> dt.datetime:
    # naive timestamps are read as UTC
    return d.replace(tzinfo=dt.timezone.utc) if d.tzinfo is None else d.astimezone(dt.timezone.utc)

# ---------- parsing ----------
def parse_period(raw: Optional[str]) -> Period:
    if not raw:
        return DEFAULT_PERIOD
    value = raw.strip().lower()
    if value in PERIODS:
        return value  # type: ignore[return-value]
    logging.warning("Unknown period %r, falling back to %s", raw, FALLBACK_PERIOD)
    return FALLBACK_PERIOD

def parse_date(raw: Union[str, dt.datetime, None]) -> Optional[dt.datetime]:
    if raw is None or raw == "":
        return None
    if isinstance(raw, dt.datetime):
        return _as_utc(raw)
    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return _as_utc(dt.datetime.fromisoformat(text))
    except (ValueError, OverflowError):
        raise InvalidDateRangeError(f"Invalid date: {raw!r} (expected ISO-8601)")

# ---------- resolution ----------
def resolve_range(
    period: Period,
    start_date: Optional[dt.datetime] = None,
    end_date: Optional[dt.datetime] = None,
    now: Optional[dt.datetime] = None,
) -> DateRange:
    """
    Concrete [start, end) window for a period.

    Named periods end at `now` and reach back a fixed number of days.
    `custom` needs both bounds with start <= end, at most
    MAX_CUSTOM_RANGE_DAYS apart and inside CUSTOM_YEAR_RANGE.
    """
    if period == "custom":
        if start_date is None or end_date is None:
            raise InvalidDateRangeError("period=custom requires both startDate and endDate")
        start, end = _as_utc(start_date), _as_utc(end_date)
        if start > end:
            raise InvalidDateRangeError("startDate must not be after endDate")
        if end - start > dt.timedelta(days=MAX_CUSTOM_RANGE_DAYS):
            raise InvalidDateRangeError(f"Custom range may span at most {MAX_CUSTOM_RANGE_DAYS} days")
        lo, hi = CUSTOM_YEAR_RANGE
        if start.year < lo or end.year > hi:
            raise InvalidDateRangeError(f"Custom range must fall between {lo} and {hi}")
        return DateRange(start=start, end=end)

    if period not in PERIOD_DAYS:
        raise InvalidDateRangeError(f"Unsupported period: {period!r}")
    end = _as_utc(now) if now is not None else utc_now()
    return DateRange(start=end - dt.timedelta(days=PERIOD_DAYS[period]), end=end)

def params_range(params: GenerationParams) -> DateRange:
    return resolve_range(params.period, params.start_date, params.end_date, params.now)

def previous_range(rng: DateRange) -> DateRange:
    """The equally long window right before `rng`."""
    length = rng.end - rng.start
    return DateRange(start=rng.start - length, end=rng.start)
