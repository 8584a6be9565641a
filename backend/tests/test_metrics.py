# backend/tests/test_metrics.py
import datetime as dt

import pytest

from app.mock_data.metrics import account_rates, generate_base_metrics, generate_funnel

def test_base_metrics_are_deterministic(make_params):
    a = generate_base_metrics(make_params("acme", "month"))
    b = generate_base_metrics(make_params("acme", "month"))
    assert a.model_dump_json() == b.model_dump_json()
    assert a.total_sessions > 0
    assert 8 <= a.conversion_rate <= 15

def test_accounts_differ(make_params):
    a = generate_base_metrics(make_params("acme", "month"))
    b = generate_base_metrics(make_params("globex", "month"))
    assert a.total_sessions != b.total_sessions
    assert account_rates("acme") == account_rates("acme")

def test_zero_length_window_is_all_zero(make_params):
    t = dt.datetime(2025, 1, 1, tzinfo=dt.timezone.utc)
    m = generate_base_metrics(make_params("acme", "custom", t, t))
    assert m.total_sessions == 0 and m.total_revenue == 0
    f = generate_funnel(make_params("acme", "custom", t, t))
    assert f.stages() == [0, 0, 0, 0, 0]

@pytest.mark.parametrize("account", ["acme", "globex", "initech"])
@pytest.mark.parametrize("period", ["today", "week", "month", "year"])
def test_funnel_matches_conversions_and_never_grows(make_params, account, period):
    params = make_params(account, period)
    base = generate_base_metrics(params)
    funnel = generate_funnel(params)
    assert funnel.confirmed == base.total_conversions == base.total_orders
    stages = funnel.stages()
    assert all(a >= b for a, b in zip(stages, stages[1:]))
    assert base.total_conversions <= base.total_sessions

def test_longer_windows_convert_better_but_stay_capped(make_params):
    week = generate_base_metrics(make_params("acme", "week"))
    year = generate_base_metrics(make_params("acme", "year"))
    assert week.conversion_rate == 8.0
    assert 8 < year.conversion_rate <= 15
    assert year.total_revenue > week.total_revenue

def test_revenue_growth_is_positive(make_params):
    m = generate_base_metrics(make_params("acme", "week"))
    assert m.revenue_growth > 0
    assert round(m.abandonment_rate + m.conversion_rate, 2) == 100
