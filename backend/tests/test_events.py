# backend/tests/test_events.py
import datetime as dt

from app.mock_data import config, events, handle
from app.mock_data.timeframe import resolve_range
from app.schemas.mock_data import SimulatedEvent
from conftest import FIXED_NOW

def test_simulated_session_count_bounds():
    assert events.simulated_session_count(0, 1, 50, False) == 0
    assert events.simulated_session_count(10, 1, 50, False) == 10
    assert events.simulated_session_count(100000, 1, 10, False) == config.MIN_SIMULATED_SESSIONS
    assert events.simulated_session_count(100000, 1000, 100, False) == config.MAX_SIMULATED_SESSIONS
    # filters ask for more sessions than the unfiltered page does
    assert events.simulated_session_count(100000, 20, 100, True) > events.simulated_session_count(100000, 20, 100, False)

def test_very_deep_page_is_served(fixed_clock):
    deep = "1" + "0" * 400
    assert events.simulated_session_count(100000, int(deep), 50, True) == config.MAX_SIMULATED_SESSIONS
    out = handle("analytics-events", "acme", "week", query_params={"page": deep, "limit": "50"}, clock=fixed_clock)
    assert out["events"] == []
    assert out["pagination"]["page"] == int(deep)
    assert out["pagination"]["hasMore"] is False

def test_events_stay_inside_the_window(fixed_clock):
    for period in ("today", "week"):
        out = handle("analytics-events", "acme", period, query_params={"limit": "100"}, clock=fixed_clock)
        start, end = out["dateRange"]["start"], out["dateRange"]["end"]
        assert out["events"]
        assert all(start <= e["timestamp"] <= end for e in out["events"])

def test_huge_page_never_simulates_more_than_cap(make_params, monkeypatch):
    calls = []
    real = events.simulate_session

    def spy(*args, **kwargs):
        calls.append(args[1])
        return real(*args, **kwargs)

    monkeypatch.setattr(events, "simulate_session", spy)
    sim = events.simulate_checkout_events(make_params("acme", "year"), page=10000, limit=100)
    assert len(calls) == config.MAX_SIMULATED_SESSIONS
    assert sim.sessions_simulated == config.MAX_SIMULATED_SESSIONS
    assert sim.events == []

def test_session_events_follow_checkout_order():
    rng = resolve_range("week", now=FIXED_NOW)
    saw_payment = False
    for index in range(200):
        out = []
        events.simulate_session("acme", index, rng, out)
        types = [e.event_type for e in out]
        assert types[0] == "checkout_started"
        stamps = [e.timestamp for e in out]
        assert stamps == sorted(stamps)
        assert all(rng.start <= t <= rng.end for t in stamps)
        assert len({e.session_id for e in out}) == 1
        if "payment_submitted" in types:
            saw_payment = True
            assert types.index("payment_method_selected") < types.index("payment_submitted")
        if "order_confirmed" in types:
            assert types.index("payment_completed") < types.index("order_confirmed")
    assert saw_payment

def test_same_session_is_reproducible():
    rng = resolve_range("week", now=FIXED_NOW)
    a, b = [], []
    events.simulate_session("acme", 3, rng, a)
    events.simulate_session("acme", 3, rng, b)
    assert [e.model_dump() for e in a] == [e.model_dump() for e in b]

def test_pages_are_disjoint_and_ordered(fixed_clock):
    p1 = handle("analytics-events", "acme", "week", query_params={"page": "1", "limit": "50"}, clock=fixed_clock)
    p2 = handle("analytics-events", "acme", "week", query_params={"page": "2", "limit": "50"}, clock=fixed_clock)
    ids1 = {e["id"] for e in p1["events"]}
    ids2 = {e["id"] for e in p2["events"]}
    assert len(ids1) == 50 and ids2
    assert not ids1 & ids2
    assert p1["summary"]["totalEvents"] == p2["summary"]["totalEvents"]
    assert p2["events"][0]["timestamp"] <= p1["events"][-1]["timestamp"]
    stamps = [e["timestamp"] for e in p1["events"]]
    assert stamps == sorted(stamps, reverse=True)

def test_category_filter(fixed_clock):
    out = handle("analytics-events", "acme", "week", query_params={"category": "api_call"}, clock=fixed_clock)
    assert out["events"]
    assert {e["category"] for e in out["events"]} == {"api_call"}
    assert out["pagination"]["totalEvents"] >= len(out["events"])

def test_event_timestamps_serialize_as_utc(fixed_clock):
    out = handle("analytics-events", "acme", "week", clock=fixed_clock)
    assert all(e["timestamp"].endswith("Z") for e in out["events"])

def _event(i, event_type, category):
    return SimulatedEvent(
        id=f"evt-{i}", session_id="sess-1", event_type=event_type, category=category,
        timestamp=dt.datetime(2025, 3, 1, tzinfo=dt.timezone.utc),
    )

def test_summary_extrapolates_from_sample():
    sample = [_event(i, "step_viewed", "user_action") for i in range(30)]
    sample += [_event(30 + i, "error_occurred", "error") for i in range(5)]
    summary = events.summarize(sample, total_sessions=1000, simulated=400)
    # 200 of 400 simulated sessions count as the sample, so counts double
    assert summary.events_by_category["user_action"] == 60
    assert summary.error_count == 10
    assert summary.total_events == 1000 * config.EVENTS_PER_SESSION
    assert summary.unique_sessions == 950
    assert summary.top_event_types[0] == {"type": "step_viewed", "count": 60}

def test_summary_without_sessions():
    summary = events.summarize([], total_sessions=0, simulated=0)
    assert summary.total_events == 0
    assert summary.events_by_category == {"user_action": 0, "api_call": 0, "metric": 0, "error": 0}
