# backend/dependencies.py
"""
Request-scoped dependencies.

The store, settings and clock are created by the app factory and attached
to app.state; handlers receive them through FastAPI's Depends().
"""

from typing import Optional

from fastapi import Request

from config.settings import Settings
from core.clock import Clock
from core.database import DocumentStore
from core.errors import MissingParameterError, StoreError


def get_store(request: Request) -> DocumentStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreError("Document store is not initialised")
    return store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


def require_param(value: Optional[str], name: str) -> str:
    """Return value if present and non-empty, else raise MissingParameterError."""
    if value is None or value == "":
        raise MissingParameterError([name])
    return value


def require_date_range(start: Optional[str], end: Optional[str]):
    """Used when REQUIRE_DATE_RANGE is on: both bounds must be supplied."""
    missing = [name for name, value in (("s", start), ("e", end)) if not value]
    if missing:
        raise MissingParameterError(missing)
