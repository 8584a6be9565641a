# backend/app/mock_data/revenue.py
import datetime as dt
from typing import Any, Dict, List, Optional

from app.mock_data import config
from app.mock_data.helpers import (
    days_between, generate_hourly_range, generate_hourly_series, generate_time_series, midnight,
    random_in_range, round2, safe_div,
)
from app.mock_data.metrics import account_rates, generate_base_metrics
from app.mock_data.timeframe import params_range
from app.schemas.mock_data import GenerationParams

WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
INFINITE_ROI = "∞"

# ---------- labels ----------
def day_label(day: dt.datetime, period: str) -> str:
    if period == "month":
        return str(day.day)
    if period == "year":
        return MONTH_LABELS[day.month - 1]
    return WEEKDAY_LABELS[day.weekday()]

def _group_consecutive(points: List[Dict[str, Any]], period: str) -> List[Dict[str, Any]]:
    """Sum neighbouring points that share a label (a year collapses into months)."""
    out: List[Dict[str, Any]] = []
    for p in points:
        label = day_label(dt.datetime.fromisoformat(p["date"].replace("Z", "+00:00")), period)
        if out and out[-1]["day"] == label:
            out[-1]["revenue"] = round2(out[-1]["revenue"] + p["value"])
        else:
            out.append({"day": label, "revenue": p["value"]})
    return out

# ---------- revenue ----------
def generate_revenue_data(params: GenerationParams) -> Dict[str, Any]:
    rng = params_range(params)
    base = generate_base_metrics(params)
    rates = account_rates(params.account_id)
    seed = f"{params.account_id}-revenue"
    days = days_between(rng.start, rng.end)
    base_daily = safe_div(base.total_revenue, max(1.0, days))

    daily = generate_time_series(seed, rng.start, rng.end, base_daily, variance=0.3,
                                 daily_growth=rates.daily_revenue_growth)
    hourly = generate_hourly_series(seed, rng.end, base_daily, variance=0.3)

    if params.period == "today":
        window = generate_hourly_range(seed, rng.start, rng.end, base_daily, variance=0.3)
        chart = [{"date": h["date"], "revenue": h["value"]} for h in window]
    else:
        chart = [{"date": d["date"], "revenue": d["value"]} for d in daily]

    return {
        "metrics": {
            "totalRevenue": base.total_revenue,
            "avgOrderValue": base.avg_order_value,
            "totalOrders": base.total_orders,
            "revenuePerHour": round2(safe_div(base.total_revenue, max(1.0, days * 24))),
            "revenueGrowth": base.revenue_growth,
        },
        "chartData": chart,
        "revenueByHour": [{"hour": f"{h['hour']:02d}:00", "revenue": h["value"]} for h in hourly],
        "revenueByDay": _group_consecutive(daily, params.period),
    }

def generate_revenue_forecast(params: GenerationParams) -> Dict[str, Any]:
    """
    Daily projection past the window end using the account's compounded
    daily growth. Confidence drops 1pt a day down to a 70% floor and the
    prediction band widens with every step.
    """
    rng = params_range(params)
    base = generate_base_metrics(params)
    growth = account_rates(params.account_id).daily_revenue_growth
    base_daily = safe_div(base.total_revenue, max(1.0, days_between(rng.start, rng.end)))
    first = midnight(rng.end)

    points = []
    for i in range(1, config.FORECAST_DAYS + 1):
        predicted = base_daily * (1 + growth) ** i
        spread = config.FORECAST_BASE_SPREAD + config.FORECAST_SPREAD_PER_DAY * i
        points.append({
            "date": (first + dt.timedelta(days=i)).date().isoformat(),
            "predicted": round2(predicted),
            "lowerBound": round2(predicted * (1 - spread)),
            "upperBound": round2(predicted * (1 + spread)),
            "confidence": round2(max(config.FORECAST_MIN_CONFIDENCE, 1 - i * 0.01) * 100),
        })

    history = generate_time_series(f"{params.account_id}-historical", first - dt.timedelta(days=30), first,
                                   base_daily, variance=0.3)
    return {
        "forecast": points,
        "historical": [{"date": h["date"][:10], "revenue": h["value"]} for h in history],
        "baseDaily": round2(base_daily),
        "growthRate": round2(growth * 100),
        "nextMonth": round2(sum(p["predicted"] for p in points)),
    }

# ---------- friction ----------
def generate_friction_score(params: GenerationParams) -> Dict[str, Any]:
    rng = params_range(params)
    base = generate_base_metrics(params)
    seed = f"{params.account_id}-friction"
    score = random_in_range(seed, *config.FRICTION_SCORE_RANGE)

    factors = [
        {"factor": name, "impact": round2(random_in_range(seed, lo, hi, salt=f"factor-{i}") * 100)}
        for i, (name, lo, hi) in enumerate(config.FRICTION_FACTORS)
    ]

    sessions = []
    for i in range(min(config.FRICTION_SESSION_SAMPLE, base.total_sessions)):
        session_score = random_in_range(seed, 20, 80, salt=f"session-{i}")
        sessions.append({
            "sessionId": f"sess-{i}",
            "score": {
                "score": round2(session_score),
                "breakdown": {
                    "timeFactor": round2(random_in_range(seed, 0.1, 0.3, salt=f"time-{i}")),
                    "errorFactor": round2(random_in_range(seed, 0.05, 0.2, salt=f"error-{i}")),
                    "navigationFactor": round2(random_in_range(seed, 0.05, 0.15, salt=f"nav-{i}")),
                    "formFactor": round2(random_in_range(seed, 0.1, 0.25, salt=f"form-{i}")),
                },
            },
            "conversion": session_score < 50,
        })
    sessions.sort(key=lambda s: s["score"]["score"], reverse=True)

    end_day = midnight(rng.end)
    trend = []
    for i in range(config.FRICTION_TREND_DAYS):
        day = end_day - dt.timedelta(days=config.FRICTION_TREND_DAYS - i)
        trend.append({
            "date": day.date().isoformat(),
            "avgFriction": round2(score + random_in_range(seed, -5, 5, salt=f"trend-{i}")),
            "conversionRate": round2(random_in_range(seed, 8, 15, salt=f"trend-conv-{i}")),
        })

    return {
        "score": round2(score),
        "factors": factors,
        "recommendations": list(config.FRICTION_RECOMMENDATIONS),
        "totalSessions": base.total_sessions,
        "sessions": sessions,
        "trend": trend,
    }

# ---------- ROI ----------
def compute_roi(additional_revenue: float, cost: float) -> Optional[float]:
    """ROI in percent; None when unbounded (no cost, positive revenue)."""
    if cost > 0:
        return (additional_revenue - cost) / cost * 100
    return None if additional_revenue > 0 else 0.0

def format_roi(additional_revenue: float, cost: float) -> str:
    if cost > 0:
        return f"{compute_roi(additional_revenue, cost):.1f}%"
    return INFINITE_ROI if additional_revenue > 0 else "0%"

def generate_optimization_roi(params: GenerationParams) -> List[Dict[str, Any]]:
    base = generate_base_metrics(params)
    out = []
    for name, investment, impact in config.OPTIMIZATION_PROJECTS:
        revenue = round2(base.total_revenue * impact)
        roi = compute_roi(revenue, investment)
        out.append({
            "optimization": name,
            "investment": investment,
            "revenue": revenue,
            "roi": round2(roi) if roi is not None else None,
            "impact": round2(impact * 100),
        })
    return out
