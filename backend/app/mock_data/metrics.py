# backend/app/mock_data/metrics.py
"""
Base metrics: the single source of sessions, conversions and revenue.

Every other generator calls `generate_base_metrics` with the same params
instead of receiving its output, so each endpoint can be served on its own
and still agree with the others.
"""
import math
from typing import NamedTuple

from app.mock_data import config
from app.mock_data.helpers import (
    days_between, growth_factor, int_in_range, random_in_range, round2, safe_div,
)
from app.mock_data.timeframe import params_range, previous_range
from app.schemas.mock_data import BaseMetrics, DateRange, Funnel, GenerationParams

class AccountRates(NamedTuple):
    revenue_growth: float          # monthly
    sessions_growth: float         # monthly
    conversion_improvement: float  # per month, absolute
    aov_estimate: float
    avg_checkout_time: int

    @property
    def daily_revenue_growth(self) -> float:
        return (1.0 + self.revenue_growth) ** (1.0 / 30.0) - 1.0

def account_rates(account_id: str) -> AccountRates:
    seed = f"{account_id}-base"
    return AccountRates(
        revenue_growth=random_in_range(seed, *config.REVENUE_GROWTH_RANGE, salt="revenue-growth"),
        sessions_growth=random_in_range(seed, *config.SESSIONS_GROWTH_RANGE, salt="sessions-growth"),
        conversion_improvement=random_in_range(seed, *config.CONVERSION_IMPROVEMENT_RANGE, salt="conversion"),
        aov_estimate=random_in_range(seed, *config.AOV_RANGE, salt="aov"),
        avg_checkout_time=int_in_range(seed, *config.CHECKOUT_TIME_RANGE, salt="checkout-time"),
    )

def daily_revenue_baseline() -> float:
    return config.ANNUAL_REVENUE / 12 / 30

def conversion_for(rng: DateRange, rates: AccountRates) -> float:
    months = math.floor(days_between(rng.start, rng.end) / 30)
    return min(config.MAX_CONVERSION, config.BASE_CONVERSION + months * rates.conversion_improvement)

def window_revenue(rng: DateRange, rates: AccountRates) -> float:
    days = days_between(rng.start, rng.end)
    return daily_revenue_baseline() * days * growth_factor(rng.start, rng.end, rates.revenue_growth)

def _zero_metrics() -> BaseMetrics:
    return BaseMetrics(
        total_sessions=0, total_conversions=0, total_revenue=0.0, total_orders=0,
        avg_order_value=0.0, conversion_rate=0.0, abandonment_rate=0.0,
        avg_checkout_time=0, revenue_growth=0.0,
    )

def generate_base_metrics(params: GenerationParams) -> BaseMetrics:
    rng = params_range(params)
    if days_between(rng.start, rng.end) == 0:
        return _zero_metrics()

    rates = account_rates(params.account_id)
    conversion = conversion_for(rng, rates)
    revenue = window_revenue(rng, rates)

    orders_estimate = safe_div(revenue, rates.aov_estimate)
    sessions_gf = growth_factor(rng.start, rng.end, rates.sessions_growth)
    sessions = int(round(safe_div(orders_estimate, conversion) * sessions_gf))
    conversions = min(sessions, int(round(sessions * conversion)))

    # the previous window sits one window lower on the account's growth curve
    prev = previous_range(rng)
    prev_revenue = safe_div(window_revenue(prev, rates), growth_factor(prev.start, prev.end, rates.revenue_growth))
    growth = safe_div(revenue - prev_revenue, prev_revenue) * 100

    conversion_pct = round2(conversion * 100)
    return BaseMetrics(
        total_sessions=sessions,
        total_conversions=conversions,
        total_revenue=round2(revenue),
        total_orders=conversions,
        avg_order_value=round2(safe_div(revenue, conversions)),
        conversion_rate=conversion_pct,
        abandonment_rate=round2(100 - conversion_pct),
        avg_checkout_time=rates.avg_checkout_time,
        revenue_growth=round2(growth),
    )

def generate_funnel(params: GenerationParams) -> Funnel:
    """Fixed-ratio cascade from sessions; `confirmed` always equals totalConversions."""
    base = generate_base_metrics(params)
    to_profile, to_shipping, to_payment = config.FUNNEL_RATIOS
    confirmed = base.total_conversions
    cart = max(base.total_sessions, confirmed)
    profile = max(int(round(cart * to_profile)), confirmed)
    shipping = max(int(round(profile * to_shipping)), confirmed)
    payment = max(int(round(shipping * to_payment)), confirmed)
    return Funnel(cart=cart, profile=profile, shipping=shipping, payment=payment, confirmed=confirmed)
