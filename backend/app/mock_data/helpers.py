# backend/app/mock_data/helpers.py
"""
Seed-keyed pseudo-random helpers.

Every value is a pure function of (seed, salt): no random.Random instance,
no module state and no dependence on call order.
"""
import datetime as dt
import math
from typing import Any, Dict, List, Mapping, Sequence, Tuple, TypeVar, Union

Salt = Union[int, str]
T = TypeVar("T")

_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193
_MASK32 = 0xFFFFFFFF

# ---------- hashing ----------
def hash_seed(seed: str, salt: Salt = 0) -> int:
    """32-bit FNV-1a over "<seed>-<salt>" followed by a murmur3 finalizer."""
    h = _FNV_OFFSET
    for b in f"{seed}-{salt}".encode("utf-8"):
        h ^= b
        h = (h * _FNV_PRIME) & _MASK32
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _MASK32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & _MASK32
    h ^= h >> 16
    return h

def unit(seed: str, salt: Salt = 0) -> float:
    """Uniform value in [0, 1)."""
    return hash_seed(seed, salt) / 4294967296.0

def random_in_range(seed: str, min_value: float, max_value: float, salt: Salt = 0) -> float:
    return min_value + unit(seed, salt) * (max_value - min_value)

def int_in_range(seed: str, min_value: int, max_value: int, salt: Salt = 0) -> int:
    """Inclusive on both ends."""
    if max_value <= min_value:
        return min_value
    span = max_value - min_value + 1
    return min(max_value, min_value + int(unit(seed, salt) * span))

def chance(seed: str, probability: float, salt: Salt = 0) -> bool:
    return unit(seed, salt) < probability

def pick(seed: str, options: Sequence[T], salt: Salt = 0) -> T:
    return options[int_in_range(seed, 0, len(options) - 1, salt)]

def consistent_id(seed: str, index: int, prefix: str = "") -> str:
    code = int_in_range(seed, 100000, 999999, f"id-{prefix}-{index}")
    return f"{prefix}{code}-{index}"

# ---------- numbers ----------
def round2(x: float) -> float:
    return round(float(x), 2)

def safe_div(a: float, b: float, default: float = 0.0) -> float:
    return a / b if b else default

# ---------- dates ----------
def iso(d: dt.datetime) -> str:
    """UTC timestamp in the YYYY-MM-DDTHH:MM:SS.mmmZ form the dashboard parses."""
    u = d.astimezone(dt.timezone.utc)
    return u.strftime("%Y-%m-%dT%H:%M:%S.") + f"{u.microsecond // 1000:03d}Z"

def days_between(start: dt.datetime, end: dt.datetime) -> float:
    return max(0.0, (end - start).total_seconds() / 86400.0)

def growth_factor(start: dt.datetime, end: dt.datetime, monthly_rate: float) -> float:
    """Compounded growth over the window, with 30-day months."""
    return (1.0 + monthly_rate) ** (days_between(start, end) / 30.0)

def midnight(d: dt.datetime) -> dt.datetime:
    return d.replace(hour=0, minute=0, second=0, microsecond=0)

# ---------- series ----------
def generate_time_series(
    seed: str,
    start: dt.datetime,
    end: dt.datetime,
    base_value: float,
    variance: float = 0.3,
    daily_growth: float = 0.0,
) -> List[Dict[str, Any]]:
    """One point per day in [start, end); weekends run at 70% of the baseline."""
    days = int(math.ceil(days_between(start, end)))
    out: List[Dict[str, Any]] = []
    first = midnight(start)
    for i in range(days):
        day = first + dt.timedelta(days=i)
        noise = 1.0 + (unit(seed, f"day-{day.date().isoformat()}") * 2 - 1) * variance
        value = base_value * (1.0 + daily_growth) ** i * noise
        if day.weekday() >= 5:
            value *= 0.7
        out.append({"date": iso(day), "value": round2(max(0.0, value))})
    return out

def generate_hourly_series(
    seed: str,
    day: dt.datetime,
    base_value: float,
    variance: float = 0.3,
) -> List[Dict[str, Any]]:
    """24 points for one day; business hours (9-17) weigh 1.5x, the rest 0.5x."""
    first = midnight(day)
    return [_hour_point(seed, first + dt.timedelta(hours=h), base_value / 24.0, variance) for h in range(24)]

def generate_hourly_range(
    seed: str,
    start: dt.datetime,
    end: dt.datetime,
    base_value: float,
    variance: float = 0.3,
) -> List[Dict[str, Any]]:
    """Whole hours inside [start, end), weighted like `generate_hourly_series`."""
    t = start.replace(minute=0, second=0, microsecond=0)
    if t < start:
        t += dt.timedelta(hours=1)
    out: List[Dict[str, Any]] = []
    while t < end:
        out.append(_hour_point(seed, t, base_value / 24.0, variance))
        t += dt.timedelta(hours=1)
    return out

def _hour_point(seed: str, t: dt.datetime, hourly: float, variance: float) -> Dict[str, Any]:
    factor = 1.5 if 9 <= t.hour <= 17 else 0.5
    noise = 1.0 + (unit(seed, f"hour-{t.date().isoformat()}-{t.hour}") * 2 - 1) * variance
    return {
        "hour": t.hour,
        "date": iso(t),
        "value": round2(max(0.0, hourly * factor * noise)),
    }

# ---------- weighted breakdown ----------
WeightTable = Union[Mapping[Any, float], Sequence[Tuple[Any, float]]]

def generate_weighted_breakdown(
    seed: str,
    weight_table: WeightTable,
    total: float,
    jitter: float = 0.0,
) -> List[Dict[str, Any]]:
    """
    Distribute `total` over the rows of a weight table.

    Each row's weight is perturbed by a seeded +/- `jitter` fraction, then
    the rows are normalized. Percentages are rounded to 2 dp and the largest
    row takes the rounding residual so they sum to exactly 100.
    Rows keep the table order.
    """
    rows = list(weight_table.items()) if isinstance(weight_table, Mapping) else list(weight_table)
    if not rows:
        return []

    weights = []
    for name, w in rows:
        factor = 1.0 + (unit(seed, f"weight-{name}") * 2 - 1) * jitter
        weights.append(max(0.0, float(w) * factor))
    weight_sum = sum(weights)

    out: List[Dict[str, Any]] = []
    for (name, _), w in zip(rows, weights):
        share = safe_div(w, weight_sum)
        out.append({
            "name": name,
            "weight": share,
            "percentage": round2(share * 100),
            "value": share * total,
        })

    if weight_sum > 0:
        residual = round2(100.0 - sum(r["percentage"] for r in out))
        if residual:
            largest = max(out, key=lambda r: r["weight"])
            largest["percentage"] = round2(largest["percentage"] + residual)
    return out
