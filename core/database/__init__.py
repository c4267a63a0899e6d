from .queries import (
    DocumentQuery,
    parse_date,
    journeys_by_date,
    orders_by_date,
    orders_by_trade_id,
    journey_by_order_id,
    all_futures_options,
)
from .store import DocumentStore, create_store, mask_uri

__all__ = [
    'DocumentQuery',
    'DocumentStore',
    'create_store',
    'mask_uri',
    'parse_date',
    'journeys_by_date',
    'orders_by_date',
    'orders_by_trade_id',
    'journey_by_order_id',
    'all_futures_options',
]
