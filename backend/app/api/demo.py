# backend/app/api/demo.py
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from typing import Callable, Optional
import datetime as dt
from app.mock_data import ENDPOINT_KEYS, InvalidDateRangeError, handle, utc_now

router = APIRouter(prefix="/api/demo", tags=["demo"])

def get_clock() -> Callable[[], dt.datetime]:
    """Wall clock for named periods; tests override this dependency to pin it."""
    return utc_now

@router.get("/endpoints")
def list_endpoints():
    return {"endpoints": ENDPOINT_KEYS}

@router.get("/{account_id}/{endpoint}")
def demo_endpoint(
    account_id: str,
    endpoint: str,
    request: Request,
    period: Optional[str] = Query(None),
    startDate: Optional[str] = Query(None),
    endDate: Optional[str] = Query(None),
    clock: Callable[[], dt.datetime] = Depends(get_clock),
):
    # page/limit/event_type/category/step are read from the raw query string
    try:
        return handle(endpoint, account_id, period, startDate, endDate,
                      dict(request.query_params), clock=clock)
    except InvalidDateRangeError as e:
        raise HTTPException(status_code=400, detail=str(e))
