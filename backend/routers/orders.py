# backend/routers/orders.py
"""
Orders Router
=============

Lookups over the orders collection by execution date range or order ID.
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


@router.get("/ordersByDate")
def orders_by_date(
    s: Optional[str] = None,
    e: Optional[str] = None,
    store: DocumentStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
    clock: Clock = Depends(get_clock),
):
    """
    Orders executed within [s, e] inclusive. No ordering is guaranteed.

    Query parameters:
    - s: ISO-8601 start (default: now minus ORDER_WINDOW_DAYS)
    - e: ISO-8601 end (default: now)
    """
    if settings.require_date_range:
        require_date_range(s, e)

    query = queries.orders_by_date(
        queries.parse_date(s or None, "s", clock=clock),
        queries.parse_date(e or None, "e", clock=clock),
        clock=clock,
        window_days=settings.order_window_days,
    )
    return fetch_documents(store, query, "Error fetching orders by date")


@router.get("/ordersByTradeId")
def orders_by_trade_id(
    i: Optional[str] = None,
    store: DocumentStore = Depends(get_store),
):
    """All orders whose orderId equals i."""
    query = queries.orders_by_trade_id(require_param(i, "i"), param="i")
    return fetch_documents(store, query, "Error fetching orders by ID")
