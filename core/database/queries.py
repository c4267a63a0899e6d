"""
Query translation: validated request parameters -> document-store queries.

Every function here is pure apart from reading the injected clock. None of
them touch the store; they only describe what to ask it.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
from pymongo import ASCENDING

from core.clock import Clock, RealTimeClock
from core.errors import InvalidParameterError, MissingParameterError
from . import collections


JOURNEY_WINDOW_DAYS = 1
ORDER_WINDOW_DAYS = 30

# pandas resolves these against the host's local clock; they are read from the
# injected clock in UTC instead.
RELATIVE_KEYWORDS = {"now", "today"}


@dataclass(frozen=True)
class DocumentQuery:
    """A find() against one collection: filter plus optional sort."""
    collection: str
    filter: Dict[str, Any] = field(default_factory=dict)
    sort: Optional[List[Tuple[str, int]]] = None


def parse_date(value: Optional[str], param: str, clock: Optional[Clock] = None) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or date-time into a naive UTC datetime.

    Offset-aware inputs are converted to UTC; naive inputs are taken as UTC.
    "now" and "today" both mean the current instant of the clock.
    Returns None when the value is absent. Raises InvalidParameterError when
    the value cannot be parsed.
    """
    if value is None:
        return None
    if value.strip().lower() in RELATIVE_KEYWORDS:
        return _utc_naive((clock or RealTimeClock()).now())
    try:
        ts = pd.Timestamp(value)
    except (ValueError, TypeError, OverflowError) as e:
        raise InvalidParameterError(param, value, f"not an ISO-8601 date ({e})")
    if pd.isna(ts):
        raise InvalidParameterError(param, value, "not an ISO-8601 date")
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts.to_pydatetime()


def _utc_naive(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt
    return pd.Timestamp(dt).tz_convert("UTC").tz_localize(None).to_pydatetime()


def _date_window(
    start: Optional[datetime],
    end: Optional[datetime],
    window_days: int,
    clock: Optional[Clock],
) -> Tuple[datetime, datetime]:
    now = _utc_naive((clock or RealTimeClock()).now())
    start = _utc_naive(start) if start is not None else now - timedelta(days=window_days)
    end = _utc_naive(end) if end is not None else now
    if start > end:
        raise InvalidParameterError(
            "s", start.isoformat(), f"start is after end ({end.isoformat()})"
        )
    return start, end


def _require_id(value: Optional[str], param: str) -> str:
    if value is None or value == "":
        raise MissingParameterError([param])
    return value


def journeys_by_date(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    clock: Optional[Clock] = None,
    window_days: int = JOURNEY_WINDOW_DAYS,
) -> DocumentQuery:
    """Journeys opened within [start, end], oldest first."""
    start, end = _date_window(start, end, window_days, clock)
    return DocumentQuery(
        collection=collections.TRADE_JOURNEYS,
        filter={collections.JOURNEY_OPENED_AT: {"$gte": start, "$lte": end}},
        sort=[(collections.JOURNEY_OPENED_AT, ASCENDING)],
    )


def orders_by_date(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    clock: Optional[Clock] = None,
    window_days: int = ORDER_WINDOW_DAYS,
) -> DocumentQuery:
    """Orders executed within [start, end], in the store's natural order."""
    start, end = _date_window(start, end, window_days, clock)
    return DocumentQuery(
        collection=collections.ORDERS,
        filter={collections.ORDER_EXECUTED_AT: {"$gte": start, "$lte": end}},
    )


def orders_by_trade_id(order_id: str, param: str = "i") -> DocumentQuery:
    # orderId is not unique in the ingested data; callers get every match.
    order_id = _require_id(order_id, param)
    return DocumentQuery(
        collection=collections.ORDERS,
        filter={collections.ORDER_ID: order_id},
    )


def journey_by_order_id(order_id: str, param: str = "j") -> DocumentQuery:
    """Journeys whose related order codes contain order_id."""
    order_id = _require_id(order_id, param)
    return DocumentQuery(
        collection=collections.TRADE_JOURNEYS,
        filter={collections.JOURNEY_RELATED_ORDERS: {"$in": [order_id]}},
    )


def all_futures_options() -> DocumentQuery:
    return DocumentQuery(collection=collections.FUTURES_OPTIONS)
