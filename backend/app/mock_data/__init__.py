from .service import ENDPOINT_KEYS, handle
from .timeframe import InvalidDateRangeError, utc_now

__all__ = [
    "ENDPOINT_KEYS","handle","InvalidDateRangeError","utc_now"
]
