# backend/tests/conftest.py
import sys, pathlib, datetime as dt, pytest
from fastapi.testclient import TestClient

BACKEND_DIR = pathlib.Path(__file__).resolve().parents[1]   # .../backend

# Make `from app.*` importable
sys.path.insert(0, str(BACKEND_DIR))

# Pinned wall clock so named periods resolve to the same window every run
FIXED_NOW = dt.datetime(2025, 3, 15, 12, 0, 0, tzinfo=dt.timezone.utc)

@pytest.fixture()
def fixed_clock():
    return lambda: FIXED_NOW

@pytest.fixture()
def make_params():
    from app.schemas.mock_data import GenerationParams

    def _make(account_id="acme", period="week", start_date=None, end_date=None):
        return GenerationParams(account_id=account_id, period=period,
                                start_date=start_date, end_date=end_date, now=FIXED_NOW)
    return _make

@pytest.fixture()
def client():
    from app.main import app
    from app.api.demo import get_clock
    app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)
    yield TestClient(app)
    app.dependency_overrides.clear()
