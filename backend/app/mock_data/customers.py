# backend/app/mock_data/customers.py
"""Customer-side generators: micro-conversions, LTV, cohorts and retention."""
import datetime as dt
from typing import Any, Dict, List

from app.mock_data import config
from app.mock_data.helpers import (
    consistent_id, generate_weighted_breakdown, int_in_range, iso, random_in_range, round2, safe_div,
)
from app.mock_data.metrics import generate_base_metrics, generate_funnel
from app.mock_data.timeframe import params_range
from app.schemas.mock_data import GenerationParams

MICRO_CONVERSION_STEPS = ["Cart View", "Profile Step", "Shipping Step", "Payment Step", "Confirmed"]

def total_customers(account_id: str) -> int:
    """Customer base size; shared by LTV, segments and CAC."""
    return int_in_range(f"{account_id}-customers", 200, 500)

def _non_increasing(values: List[float]) -> List[float]:
    out: List[float] = []
    for v in values:
        out.append(min(v, out[-1]) if out else v)
    return out

# ---------- funnel steps ----------
def generate_micro_conversions(params: GenerationParams) -> List[Dict[str, Any]]:
    stages = generate_funnel(params).stages()
    cart = stages[0]
    out = []
    for i, (name, count) in enumerate(zip(MICRO_CONVERSION_STEPS, stages)):
        out.append({
            "step": name,
            "count": count,
            "percentage": round2(safe_div(count, cart) * 100),
            "dropoff": 0 if i == 0 else max(0, stages[i - 1] - count),
        })
    return out

# ---------- lifetime value ----------
def generate_ltv(params: GenerationParams) -> Dict[str, Any]:
    base = generate_base_metrics(params)
    seed = f"{params.account_id}-ltv"
    customers = total_customers(params.account_id)
    orders_per_customer = random_in_range(seed, 2.0, 3.5, salt="orders")
    average_ltv = base.avg_order_value * orders_per_customer
    recurring = int(round(customers * 0.30))

    multipliers = {name: m for name, _, m in config.LTV_SEGMENTS}
    table = [(name, share) for name, share, _ in config.LTV_SEGMENTS]
    distribution = [
        {
            "segment": row["name"],
            "count": int(round(row["value"])),
            "avgLTV": round2(average_ltv * multipliers[row["name"]]),
        }
        for row in generate_weighted_breakdown(seed, table, customers)
    ]

    high_ltv = average_ltv * multipliers["High LTV"]
    top = []
    for i in range(config.TOP_CUSTOMERS):
        target_ltv = high_ltv * random_in_range(seed, 1.5, 3.0, salt=f"top-{i}")
        aov = random_in_range(seed, base.avg_order_value * 0.9, base.avg_order_value * 1.3, salt=f"top-aov-{i}")
        orders = max(2, int(round(safe_div(target_ltv, aov))))
        top.append({
            "customerId": consistent_id(seed, i, "cust-"),
            "orders": orders,
            "ltv": round2(orders * aov),
            "avgOrderValue": round2(aov),
            "frequency": round2(orders / 3),
        })
    top.sort(key=lambda c: c["ltv"], reverse=True)

    return {
        "averageLTV": round2(average_ltv),
        "totalCustomers": customers,
        "avgOrdersPerCustomer": round2(orders_per_customer),
        "recurringRate": round2(safe_div(recurring, customers) * 100),
        "distribution": distribution,
        "topCustomers": top,
    }

# ---------- cohorts / retention ----------
def generate_cohorts(params: GenerationParams) -> List[Dict[str, Any]]:
    """Monthly acquisition cohorts, each with a non-increasing retention matrix."""
    rng = params_range(params)
    out = []
    for i in range(config.COHORT_COUNT):
        seed = f"{params.account_id}-cohort-{i}"
        customers = int_in_range(seed, 50, 200)
        orders = int(round(customers * random_in_range(seed, 1.5, 3.0, salt=1)))
        revenue = round2(orders * random_in_range(seed, 80, 150, salt=2))

        rates = _non_increasing([
            max(0.0, 100 - p * 8 - random_in_range(seed, 0, 10, salt=f"period-{p}"))
            for p in range(config.COHORT_PERIODS)
        ])
        matrix = [
            {
                "period": p,
                "retentionRate": round2(rate),
                "customers": int(round(customers * rate / 100)),
                "revenue": round2(revenue * rate / 100),
                "orders": int(round(orders * rate / 100)),
            }
            for p, rate in enumerate(rates)
        ]
        out.append({
            "cohort": f"Month {i + 1}",
            "cohortStart": iso(rng.start + dt.timedelta(days=30 * i)),
            "customers": customers,
            "orders": orders,
            "revenue": revenue,
            "avgLTV": round2(safe_div(revenue, customers)),
            "retentionMatrix": matrix,
        })
    return out

def generate_retention(params: GenerationParams) -> List[Dict[str, Any]]:
    seed = f"{params.account_id}-retention"
    raw = [
        random_in_range(seed, rate - config.RETENTION_JITTER, rate + config.RETENTION_JITTER, salt=i)
        for i, (_, rate) in enumerate(config.RETENTION_CURVE)
    ]
    out = []
    for i, ((label, _), rate) in enumerate(zip(config.RETENTION_CURVE, _non_increasing(raw))):
        reached = int_in_range(seed, 100, 500, salt=f"customers-{i}")
        out.append({
            "period": label,
            "retentionRate": round2(rate * 100),
            "customers": int(round(reached * rate)),
        })
    return out
