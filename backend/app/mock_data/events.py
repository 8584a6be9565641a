# backend/app/mock_data/events.py
"""
Checkout-session event simulator.

Only a bounded sample of sessions is ever built: enough to fill the requested
page (more when filters are expected to drop most events), never more than
MAX_SIMULATED_SESSIONS. Summary figures are extrapolated from that sample:

    sample_ratio = min(1, min(SUMMARY_SAMPLE_SIZE, total_sessions) / simulated)
    estimated    = round(sample_count / sample_ratio)
    totalEvents  = round(total_sessions * EVENTS_PER_SESSION)

The sample grows with the requested page, so on deep filtered pages
`pagination.totalEvents` (the matches inside the sample) can creep up from
one page to the next until the session cap is reached.
"""
import datetime as dt
import math
from typing import Any, Dict, List, Optional

from app.mock_data import config
from app.mock_data.helpers import (
    chance, consistent_id, int_in_range, pick, random_in_range, round2, unit,
)
from app.mock_data.metrics import generate_base_metrics
from app.mock_data.timeframe import params_range
from app.schemas.mock_data import (
    DateRange, EventSimulation, EventSummary, GenerationParams, SimulatedEvent,
)

CATEGORIES = ["user_action", "api_call", "metric", "error"]

# upper bound of the time one simulated session can take
MAX_SESSION_SPAN = dt.timedelta(seconds=30 + 80 * len(config.CHECKOUT_STEPS) + 15 + 10 + 1 + 5)

def simulated_session_count(total_sessions: int, page: int, limit: int, filtered: bool) -> int:
    events_needed = page * limit
    # past this depth the session cap always applies
    if events_needed > config.MAX_SIMULATED_SESSIONS * config.EVENTS_PER_SESSION:
        return min(total_sessions, config.MAX_SIMULATED_SESSIONS)
    reduction = config.FILTER_REDUCTION_FACTOR if filtered else 1.0
    events_to_generate = math.ceil(events_needed / reduction) + limit * 2
    sessions_needed = math.ceil(events_to_generate / config.EVENTS_PER_SESSION)
    capped = min(config.MAX_SIMULATED_SESSIONS, max(sessions_needed, config.MIN_SIMULATED_SESSIONS))
    return min(total_sessions, capped)

# ---------- one session ----------
def simulate_session(account_id: str, index: int, rng: DateRange, events: List[SimulatedEvent]) -> None:
    """
    Append one session's events to `events`.

    The session only depends on (account_id, index); event ids continue the
    running count of `events`.
    """
    seed = f"{account_id}-session-{index}"
    session_id = consistent_id(f"{account_id}-sessions", index, "sess-")
    order_form_id = (
        consistent_id(f"{account_id}-orders", index, "order-") if chance(seed, 0.7, salt="order-form") else None
    )
    # sessions start early enough to finish inside the window
    room = max(dt.timedelta(0), rng.end - rng.start - MAX_SESSION_SPAN)
    clock = rng.start + room * unit(seed, "start")
    local = 0

    def emit(event_type: str, category: str, step: Optional[str] = None,
             metadata: Optional[Dict[str, Any]] = None) -> None:
        nonlocal local
        events.append(SimulatedEvent(
            id=consistent_id(f"{account_id}-events", len(events), "evt-"),
            session_id=session_id,
            order_form_id=order_form_id,
            event_type=event_type,
            category=category,
            step=step,
            metadata=metadata,
            timestamp=clock,
        ))
        local += 1

    def advance(lo: int, hi: int) -> None:
        nonlocal clock
        clock = clock + dt.timedelta(seconds=int_in_range(seed, lo, hi, salt=f"time-{local}"))

    emit("checkout_started", "user_action", metadata={"source": "cart"})
    advance(5, 30)

    for step in config.CHECKOUT_STEPS:
        if not chance(seed, 0.8, salt=f"view-{step}"):
            continue
        emit("step_viewed", "user_action", step, {"step": step})
        advance(10, 60)
        if chance(seed, 0.7, salt=f"complete-{step}"):
            emit("step_completed", "user_action", step,
                 {"step": step, "duration": int_in_range(seed, 15, 120, salt=f"duration-{step}")})
            advance(5, 20)

    if order_form_id and chance(seed, 0.6, salt="payment"):
        emit("payment_method_selected", "user_action", "payment",
             {"method": pick(seed, config.EVENT_PAYMENT_METHODS, salt="method")})
        advance(5, 15)
        if chance(seed, 0.7, salt="submit"):
            emit("payment_submitted", "user_action", "payment", {})
            advance(2, 10)
            if chance(seed, 0.8, salt="success"):
                emit("payment_completed", "user_action", "payment",
                     {"amount": round2(random_in_range(seed, 50, 500, salt="amount"))})
                clock = clock + dt.timedelta(seconds=1)
                emit("order_confirmed", "user_action", None, {})
            else:
                emit("error_occurred", "error", "payment",
                     {"error": "payment_failed", "message": "Payment processing failed"})

    if chance(seed, 0.5, salt="api"):
        emit("api_call_started", "api_call", None, {"endpoint": "/api/checkout"})
        advance(1, 5)
        emit("api_call_completed", "api_call", None,
             {"duration": int_in_range(seed, 100, 500, salt="api-duration")})

    if chance(seed, 0.4, salt="metric"):
        emit("step_time_tracked", "metric", "profile",
             {"duration": int_in_range(seed, 30, 180, salt="metric-duration")})

# ---------- summary ----------
def summarize(events: List[SimulatedEvent], total_sessions: int, simulated: int) -> EventSummary:
    sample_size = min(config.SUMMARY_SAMPLE_SIZE, total_sessions)
    sample_ratio = min(1.0, sample_size / simulated) if simulated > 0 else 1.0

    by_category = {c: 0 for c in CATEGORIES}
    by_type: Dict[str, int] = {}
    for e in events:
        by_category[e.category] += 1
        by_type[e.event_type] = by_type.get(e.event_type, 0) + 1

    est_category = {c: int(round(n / sample_ratio)) for c, n in by_category.items()}
    est_type = {t: int(round(n / sample_ratio)) for t, n in by_type.items()}
    top = sorted(est_type.items(), key=lambda kv: kv[1], reverse=True)[:config.TOP_EVENT_TYPES]

    return EventSummary(
        total_events=int(round(total_sessions * config.EVENTS_PER_SESSION)),
        unique_sessions=int(round(total_sessions * config.UNIQUE_SESSION_RATIO)),
        events_by_category=est_category,
        top_event_types=[{"type": t, "count": n} for t, n in top],
        error_count=est_category["error"],
    )

# ---------- entry point ----------
def simulate_checkout_events(
    params: GenerationParams,
    page: int = config.DEFAULT_EVENTS_PAGE,
    limit: int = config.DEFAULT_EVENTS_LIMIT,
    event_type: Optional[str] = None,
    category: Optional[str] = None,
    step: Optional[str] = None,
) -> EventSimulation:
    rng = params_range(params)
    total_sessions = generate_base_metrics(params).total_sessions
    filtered = bool(event_type or category or step)
    simulated = simulated_session_count(total_sessions, page, limit, filtered)

    events: List[SimulatedEvent] = []
    for i in range(simulated):
        simulate_session(params.account_id, i, rng, events)

    matching = [
        e for e in events
        if (not event_type or e.event_type == event_type)
        and (not category or e.category == category)
        and (not step or e.step == step)
    ]
    matching.sort(key=lambda e: e.timestamp, reverse=True)
    offset = (page - 1) * limit

    return EventSimulation(
        events=matching[offset:offset + limit],
        filtered_total=len(matching),
        sessions_simulated=simulated,
        summary=summarize(events, total_sessions, simulated),
        date_range=rng,
    )
