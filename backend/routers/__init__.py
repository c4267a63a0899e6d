# backend/routers/__init__.py
"""API Routers"""

from .futures_options import router as futures_options_router
from .journeys import router as journeys_router
from .orders import router as orders_router

__all__ = [
    'futures_options_router',
    'journeys_router',
    'orders_router'
]
