# backend/routers/journeys.py
"""
Trade Journeys Router
=====================

Lookups over the trade_journeys collection:
- by opening date range (sorted oldest first)
- by a related order code
"""

from fastapi import APIRouter, Depends
from typing import Optional

from backend.dependencies import (
    get_clock,
    get_settings,
    get_store,
    require_date_range,
    require_param,
)
from backend.services.query_service import fetch_documents
from config.settings import Settings
from core.clock import Clock
from core.database import DocumentStore, queries

router = APIRouter()


@router.get("/journeysByDate")
def journeys_by_date(
    s: Optional[str] = None,
    e: Optional[str] = None,
    store: DocumentStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
    clock: Clock = Depends(get_clock),
):
    """
    Journeys whose opening time falls within [s, e] inclusive.

    Query parameters:
    - s: ISO-8601 start (default: now minus JOURNEY_WINDOW_DAYS)
    - e: ISO-8601 end (default: now)
    """
    if settings.require_date_range:
        require_date_range(s, e)

    query = queries.journeys_by_date(
        queries.parse_date(s or None, "s", clock=clock),
        queries.parse_date(e or None, "e", clock=clock),
        clock=clock,
        window_days=settings.journey_window_days,
    )
    return fetch_documents(store, query, "Error fetching journeys by date")


@router.get("/journeyByOrderId")
def journey_by_order_id(
    j: Optional[str] = None,
    store: DocumentStore = Depends(get_store),
):
    """Journeys whose related_orders_by_code contains j."""
    query = queries.journey_by_order_id(require_param(j, "j"), param="j")
    return fetch_documents(store, query, "Error fetching journeys by order ID")
