# backend/tests/test_demo_api.py
from fastapi.testclient import TestClient

def test_health(client: TestClient):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}

def test_endpoint_list(client: TestClient):
    r = client.get("/api/demo/endpoints")
    assert r.status_code == 200
    keys = r.json()["endpoints"]
    assert len(keys) == 26 and keys == sorted(keys)

def test_metrics_are_stable(client: TestClient):
    a = client.get("/api/demo/acme/metrics", params={"period": "week"})
    b = client.get("/api/demo/acme/metrics", params={"period": "week"})
    assert a.status_code == 200
    assert a.json() == b.json()
    body = a.json()
    assert body["period"] == "week"
    assert body["dateRange"]["end"] == "2025-03-15T12:00:00.000Z"
    assert body["funnel"]["confirmed"] == body["metrics"]["totalConversions"]

def test_custom_without_end_is_400(client: TestClient):
    r = client.get("/api/demo/acme/revenue", params={"period": "custom", "startDate": "2025-01-01"})
    assert r.status_code == 400
    assert "endDate" in r.json()["detail"]

def test_bad_date_is_400(client: TestClient):
    r = client.get("/api/demo/acme/revenue",
                   params={"period": "custom", "startDate": "yesterday", "endDate": "2025-01-01"})
    assert r.status_code == 400

def test_unknown_endpoint_is_empty(client: TestClient):
    r = client.get("/api/demo/acme/analytics-unknown")
    assert r.status_code == 200
    assert r.json() == {}

def test_events_pagination(client: TestClient):
    r = client.get("/api/demo/acme/analytics-events", params={"period": "week", "page": 2, "limit": 20})
    assert r.status_code == 200
    body = r.json()
    assert body["pagination"]["page"] == 2
    assert body["pagination"]["limit"] == 20
    assert len(body["events"]) == 20
    assert body["pagination"]["hasMore"] is True
    assert set(body["summary"]) == {"totalEvents", "uniqueSessions", "eventsByCategory", "topEventTypes", "errorCount"}

def test_accounts_are_independent(client: TestClient):
    a = client.get("/api/demo/acme/analytics-ltv").json()
    b = client.get("/api/demo/globex/analytics-ltv").json()
    assert a["summary"] != b["summary"]

def test_century_long_window_is_400(client: TestClient):
    r = client.get("/api/demo/acme/metrics",
                   params={"period": "custom", "startDate": "1000-01-01", "endDate": "2025-01-01"})
    assert r.status_code == 400
