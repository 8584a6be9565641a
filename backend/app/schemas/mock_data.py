import datetime as dt
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

Period = Literal["today", "week", "month", "year", "custom"]
EventCategory = Literal["user_action", "api_call", "metric", "error"]
RiskLevel = Literal["low", "medium", "high", "critical"]

class DateRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: dt.datetime
    end: dt.datetime

class GenerationParams(BaseModel):
    """Everything a generator needs; `now` is the clock reading for this call."""
    model_config = ConfigDict(frozen=True)

    account_id: str
    period: Period = "month"
    start_date: Optional[dt.datetime] = None
    end_date: Optional[dt.datetime] = None
    now: dt.datetime

class BaseMetrics(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    total_sessions: int = Field(ge=0)
    total_conversions: int = Field(ge=0)
    total_revenue: float = Field(ge=0)
    total_orders: int = Field(ge=0)
    avg_order_value: float = Field(ge=0)
    conversion_rate: float = Field(ge=0, le=15)   # percent
    abandonment_rate: float = Field(ge=0, le=100)
    avg_checkout_time: int = Field(ge=0)          # seconds
    revenue_growth: float

class Funnel(BaseModel):
    model_config = ConfigDict(frozen=True)

    cart: int
    profile: int
    shipping: int
    payment: int
    confirmed: int

    def stages(self) -> List[int]:
        return [self.cart, self.profile, self.shipping, self.payment, self.confirmed]

class SimulatedEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    session_id: str
    order_form_id: Optional[str] = None
    event_type: str
    category: EventCategory
    step: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    timestamp: dt.datetime

    @field_serializer("timestamp")
    def _ts(self, v: dt.datetime) -> str:
        return v.astimezone(dt.timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

class EventSummary(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_events: int
    unique_sessions: int
    events_by_category: Dict[str, int]
    top_event_types: List[Dict[str, Any]]
    error_count: int

class EventSimulation(BaseModel):
    events: List[SimulatedEvent]
    filtered_total: int
    sessions_simulated: int
    summary: EventSummary
    date_range: DateRange
