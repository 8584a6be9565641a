# backend/app/mock_data/breakdowns.py
"""
Weighted breakdowns: payment, shipping, devices, browsers, platforms,
geography, coupons, customer segments and acquisition channels.

Each generator re-derives base metrics from the params and spreads them over
a weight table from `config` via `generate_weighted_breakdown`.
"""
from typing import Any, Dict, List

from app.mock_data import config
from app.mock_data.customers import total_customers
from app.mock_data.helpers import (
    generate_time_series, generate_weighted_breakdown, int_in_range, random_in_range, round2,
)
from app.mock_data.metrics import generate_base_metrics
from app.mock_data.timeframe import params_range
from app.schemas.mock_data import GenerationParams

def _region_weights(regions: Dict[str, List[str]]) -> Dict[str, float]:
    return {
        region: sum(config.COUNTRY_DISTRIBUTION[c] for c in countries)
        for region, countries in regions.items()
    }

# ---------- payment / shipping ----------
def generate_payment_methods(params: GenerationParams) -> List[Dict[str, Any]]:
    base = generate_base_metrics(params)
    seed = f"{params.account_id}-payment"

    aggregated: Dict[str, float] = {}
    for region, weight in _region_weights(config.REGIONS).items():
        for method, share in config.PAYMENT_MIX[region].items():
            aggregated[method] = aggregated.get(method, 0.0) + weight * share

    out = []
    for i, row in enumerate(generate_weighted_breakdown(seed, aggregated, base.total_orders, jitter=0.05)):
        conversion = random_in_range(seed, *config.PAYMENT_CONVERSION_RANGE, salt=f"{row['name']}-{i}")
        out.append({
            "method": row["name"],
            "count": int(round(row["value"])),
            "revenue": round2(base.total_revenue * row["weight"]),
            "percentage": row["percentage"],
            "conversionRate": round2(conversion * 100),
        })
    return out

def generate_shipping_methods(params: GenerationParams) -> List[Dict[str, Any]]:
    base = generate_base_metrics(params)
    seed = f"{params.account_id}-shipping"

    weights: Dict[str, float] = {}
    day_sums: Dict[str, float] = {}
    for region, weight in _region_weights(config.SHIPPING_REGIONS).items():
        for carrier, share, days in config.SHIPPING_MIX[region]:
            w = weight * share
            weights[carrier] = weights.get(carrier, 0.0) + w
            day_sums[carrier] = day_sums.get(carrier, 0.0) + w * days

    out = []
    for row in generate_weighted_breakdown(seed, weights, base.total_orders, jitter=0.05):
        carrier = row["name"]
        avg_days = int(round(day_sums[carrier] / weights[carrier]))
        out.append({
            "method": carrier,
            "count": int(round(row["value"])),
            "percentage": row["percentage"],
            "avgDeliveryTime": int_in_range(seed, max(1, avg_days - 1), avg_days + 1, salt=carrier),
        })
    return out

# ---------- traffic ----------
def generate_devices(params: GenerationParams) -> List[Dict[str, Any]]:
    base = generate_base_metrics(params)
    conversion_by_device = {name: conv for name, _, conv in config.DEVICE_WEIGHTS}
    table = [(name, share) for name, share, _ in config.DEVICE_WEIGHTS]

    out = []
    for row in generate_weighted_breakdown(f"{params.account_id}-devices", table, base.total_sessions, jitter=0.03):
        sessions = int(round(row["value"]))
        conversion = conversion_by_device[row["name"]]
        out.append({
            "device": row["name"],
            "sessions": sessions,
            "conversions": int(round(sessions * conversion)),
            "revenue": round2(base.total_revenue * row["weight"]),
            "conversionRate": round2(conversion * 100),
            "percentage": row["percentage"],
        })
    return out

def generate_browsers(params: GenerationParams) -> List[Dict[str, Any]]:
    base = generate_base_metrics(params)
    seed = f"{params.account_id}-browser"

    out = []
    for i, row in enumerate(generate_weighted_breakdown(seed, config.BROWSER_WEIGHTS, base.total_sessions, jitter=0.05)):
        sessions = int(round(row["value"]))
        conversion = random_in_range(seed, *config.BROWSER_CONVERSION_RANGE, salt=i)
        out.append({
            "browser": row["name"],
            "sessions": sessions,
            "conversions": int(round(sessions * conversion)),
            "conversionRate": round2(conversion * 100),
            "percentage": row["percentage"],
        })
    return out

def generate_platforms(params: GenerationParams) -> List[Dict[str, Any]]:
    base = generate_base_metrics(params)
    seed = f"{params.account_id}-platform"

    out = []
    for i, row in enumerate(generate_weighted_breakdown(seed, config.PLATFORM_WEIGHTS, base.total_sessions)):
        sessions = int(round(row["value"]))
        conversion = random_in_range(seed, *config.PLATFORM_CONVERSION_RANGE, salt=i)
        out.append({
            "platform": row["name"],
            "sessions": sessions,
            "conversions": int(round(sessions * conversion)),
            "conversion": round2(conversion * 100),
            "revenue": round2(base.total_revenue * row["weight"]),
            "percentage": row["percentage"],
        })
    return out

def generate_geography(params: GenerationParams) -> List[Dict[str, Any]]:
    base = generate_base_metrics(params)
    seed = f"{params.account_id}-geo"
    table = [(f"{country}-{state or 'all'}", w) for country, state, w in config.GEOGRAPHY_WEIGHTS]
    rows = generate_weighted_breakdown(seed, table, base.total_sessions, jitter=0.05)

    out = []
    for i, ((country, state, _), row) in enumerate(zip(config.GEOGRAPHY_WEIGHTS, rows)):
        sessions = int(round(row["value"]))
        conversion = random_in_range(seed, *config.GEO_CONVERSION_RANGE, salt=i)
        out.append({
            "country": country,
            "state": state,
            "sessions": sessions,
            "conversions": int(round(sessions * conversion)),
            "revenue": round2(base.total_revenue * row["weight"]),
            "conversionRate": round2(conversion * 100),
            "percentage": row["percentage"],
        })
    return out

# ---------- commerce ----------
def generate_coupons(params: GenerationParams) -> List[Dict[str, Any]]:
    """Coupon shares are usage rates of all orders, so they do not sum to 100."""
    base = generate_base_metrics(params)
    out = []
    for code, usage_rate, discount in config.COUPONS:
        usage = int(round(base.total_orders * usage_rate))
        out.append({
            "code": code,
            "usage": usage,
            "discount": discount,
            "revenue": round2(base.total_revenue * usage_rate),
            "orders": usage,
        })
    return out

def generate_segments(params: GenerationParams) -> List[Dict[str, Any]]:
    base = generate_base_metrics(params)
    seed = f"{params.account_id}-segment"
    customers = total_customers(params.account_id)
    conversion_by_segment = {name: conv for name, _, conv in config.CUSTOMER_SEGMENTS}
    table = [(name, share) for name, share, _ in config.CUSTOMER_SEGMENTS]

    out = []
    for i, row in enumerate(generate_weighted_breakdown(seed, table, customers, jitter=0.1)):
        out.append({
            "segment": row["name"],
            "customers": max(1, int(round(row["value"]))),
            "revenue": round2(base.total_revenue * row["weight"]),
            "percentage": row["percentage"],
            "conversionRate": round2(conversion_by_segment[row["name"]] * 100),
            "avgOrderValue": round2(random_in_range(seed, 80, 180, salt=i)),
        })
    return out

def generate_cac(params: GenerationParams) -> Dict[str, Any]:
    rng = params_range(params)
    seed = f"{params.account_id}-cac"
    base_cac = random_in_range(seed, *config.CAC_RANGE)
    multipliers = {name: mult for name, mult, _ in config.CAC_CHANNELS}
    table = [(name, share) for name, _, share in config.CAC_CHANNELS]

    channels = []
    for row in generate_weighted_breakdown(seed, table, total_customers(params.account_id)):
        channels.append({
            "channel": row["name"],
            "cac": round2(base_cac * multipliers[row["name"]]),
            "customers": int(round(row["value"])),
            "percentage": row["percentage"],
        })

    trend = generate_time_series(seed, rng.start, rng.end, base_cac, variance=0.2,
                                 daily_growth=config.CAC_DAILY_TREND)
    return {
        "cac": round2(base_cac),
        "channels": channels,
        "trend": [{"date": p["date"], "cac": p["value"]} for p in trend],
    }
