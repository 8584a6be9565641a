# backend/tests/test_generators.py
import pytest

from app.mock_data import boltx, breakdowns, config, customers, revenue
from app.mock_data.helpers import iso
from app.mock_data.timeframe import params_range

def _pct_sum(rows):
    return sum(r["percentage"] for r in rows)

@pytest.mark.parametrize("gen", [
    breakdowns.generate_payment_methods,
    breakdowns.generate_shipping_methods,
    breakdowns.generate_devices,
    breakdowns.generate_browsers,
    breakdowns.generate_platforms,
    breakdowns.generate_geography,
    breakdowns.generate_segments,
])
def test_breakdowns_sum_to_100(make_params, gen):
    rows = gen(make_params("acme", "month"))
    assert rows
    assert abs(_pct_sum(rows) - 100) <= 0.1
    for r in rows:
        for key, value in r.items():
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                assert value >= 0, (key, r)

def test_cac_channels_sum_to_100(make_params):
    data = breakdowns.generate_cac(make_params("acme", "month"))
    assert abs(_pct_sum(data["channels"]) - 100) <= 0.1
    assert len(data["trend"]) == 30

def test_payment_rows_are_stable(make_params):
    a = breakdowns.generate_payment_methods(make_params("acme", "month"))
    b = breakdowns.generate_payment_methods(make_params("acme", "month"))
    assert a == b

def test_retention_is_non_increasing(make_params):
    rows = customers.generate_retention(make_params())
    rates = [r["retentionRate"] for r in rows]
    assert len(rates) == 5
    assert all(a >= b for a, b in zip(rates, rates[1:]))

def test_cohort_matrices_are_non_increasing(make_params):
    cohorts = customers.generate_cohorts(make_params())
    assert len(cohorts) == config.COHORT_COUNT
    for c in cohorts:
        rates = [cell["retentionRate"] for cell in c["retentionMatrix"]]
        assert len(rates) == config.COHORT_PERIODS
        assert all(a >= b for a, b in zip(rates, rates[1:]))

def test_top_customers_sorted_by_ltv(make_params):
    top = customers.generate_ltv(make_params())["topCustomers"]
    values = [c["ltv"] for c in top]
    assert values == sorted(values, reverse=True)

def test_micro_conversions_start_at_100(make_params):
    steps = customers.generate_micro_conversions(make_params())
    assert steps[0]["percentage"] == 100
    assert steps[0]["dropoff"] == 0

def test_forecast_confidence_drops_and_band_widens(make_params):
    points = revenue.generate_revenue_forecast(make_params())["forecast"]
    assert len(points) == config.FORECAST_DAYS
    conf = [p["confidence"] for p in points]
    assert all(a >= b for a, b in zip(conf, conf[1:]))
    assert min(conf) >= 70
    widths = [(p["upperBound"] - p["lowerBound"]) / p["predicted"] for p in points]
    assert all(b > a for a, b in zip(widths, widths[1:]))
    assert all(p["lowerBound"] <= p["predicted"] <= p["upperBound"] for p in points)

def test_chart_data_granularity(make_params):
    assert len(revenue.generate_revenue_data(make_params(period="today"))["chartData"]) == 24
    week = revenue.generate_revenue_data(make_params(period="week"))
    assert len(week["chartData"]) == 7
    assert len(week["revenueByHour"]) == 24
    assert week["revenueByHour"][9]["hour"] == "09:00"

def test_year_revenue_by_day_groups_months(make_params):
    rows = revenue.generate_revenue_data(make_params(period="year"))["revenueByDay"]
    assert 12 <= len(rows) <= 13

@pytest.mark.parametrize("score,level", [
    (100, "critical"), (85, "critical"), (84.99, "high"), (70, "high"),
    (69.99, "medium"), (40, "medium"), (39.9, "low"), (0, "low"),
])
def test_risk_level_thresholds(score, level):
    assert boltx.risk_level(score) == level

def test_abandonment_predictions_are_consistent(make_params):
    preds = boltx.generate_abandonment_predictions(make_params("acme", "month"))
    assert 0 < len(preds) <= config.MAX_ABANDONMENT_PREDICTIONS
    for p in preds:
        assert 0 <= p["riskScore"] <= 100
        assert p["riskLevel"] == boltx.risk_level(p["riskScore"])
        assert p["recommendations"] == config.RISK_RECOMMENDATIONS[p["riskLevel"]]
        assert p["recommendedIntervention"] in config.INTERVENTION_TYPES

def test_boltx_predictions_capped(make_params):
    preds = boltx.generate_boltx_predictions(make_params("acme", "year"))
    assert len(preds) == config.MAX_BOLTX_PREDICTIONS
    assert len({p["sessionId"] for p in preds}) == len(preds)

def test_interventions_only_succeed_when_applied(make_params):
    for i in boltx.generate_interventions(make_params("acme", "month")):
        assert i["applied"] or not i["success"]
        assert i["type"] in config.INTERVENTION_TYPES

def test_roi_formatting():
    assert revenue.format_roi(1000, 0) == "∞"
    assert revenue.format_roi(0, 0) == "0%"
    assert revenue.format_roi(2000, 1000) == "100.0%"
    assert revenue.compute_roi(1000, 0) is None
    assert revenue.compute_roi(0, 0) == 0.0

def test_friction_sessions_sorted(make_params):
    data = revenue.generate_friction_score(make_params())
    scores = [s["score"]["score"] for s in data["sessions"]]
    assert scores == sorted(scores, reverse=True)
    assert 60 <= data["score"] <= 85
    assert len(data["trend"]) == config.FRICTION_TREND_DAYS

def test_today_chart_stays_inside_the_window(make_params):
    params = make_params(period="today")
    rng = params_range(params)
    chart = revenue.generate_revenue_data(params)["chartData"]
    assert chart
    assert all(iso(rng.start) <= p["date"] < iso(rng.end) for p in chart)
