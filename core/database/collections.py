# core/database/collections.py

TRADE_JOURNEYS = "trade_journeys"
ORDERS = "orders"
FUTURES_OPTIONS = "processed_futures_options"

# Document fields the service filters or sorts on.
JOURNEY_OPENED_AT = "opening_date_time_ISO"
JOURNEY_RELATED_ORDERS = "related_orders_by_code"
ORDER_EXECUTED_AT = "execution_date_time_ISO"
ORDER_ID = "orderId"

# Notes:
# - All collections are owned by the ingestion process; this service only reads.
# - Timestamps are stored as BSON dates (UTC).
