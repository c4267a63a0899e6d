# backend/services/query_service.py
"""
Query Service
=============

Runs a translated query against the document store and turns the result
into a JSON-safe list. Store failures are logged here in full and re-raised
as a StoreError carrying only the caller-facing message.
"""

import base64
import logging
import math
import time
from datetime import date, datetime, timezone
from typing import Any, Dict, List

from bson import Binary, Decimal128, ObjectId
from fastapi.encoders import jsonable_encoder

from core.database import DocumentQuery, DocumentStore
from core.errors import StoreError

logger = logging.getLogger(__name__)


def _encode_datetime(value: datetime) -> str:
    # Stored dates are naive UTC; label them so browsers do not read local time.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def _encode_float(value: float):
    return value if math.isfinite(value) else None


def _encode_bytes(value: bytes) -> str:
    return base64.b64encode(bytes(value)).decode("ascii")


BSON_ENCODERS = {
    ObjectId: str,
    Decimal128: lambda value: str(value.to_decimal()),
    datetime: _encode_datetime,
    date: lambda value: value.isoformat(),
    float: _encode_float,
    Binary: _encode_bytes,
    bytes: _encode_bytes,
}


def serialize_documents(documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Make documents JSON-safe.

    ObjectId, Decimal128 and dates become strings, binary becomes base64,
    and NaN/inf become null.
    """
    return jsonable_encoder(documents, custom_encoder=BSON_ENCODERS)


def fetch_documents(store: DocumentStore, query: DocumentQuery, failure_message: str) -> List[Dict[str, Any]]:
    """
    Execute a query and return serialized documents.

    Args:
        store: Document store to borrow a session from
        query: Translated query
        failure_message: Generic message returned to the caller on failure

    Returns:
        List of JSON-safe documents (possibly empty)
    """
    start_time = time.time()
    try:
        documents = store.find(query)
    except StoreError as e:
        logger.error(f"{failure_message}: {e}", exc_info=True)
        raise StoreError(failure_message) from e

    elapsed_ms = (time.time() - start_time) * 1000
    logger.info(f"{query.collection}: {len(documents)} documents in {elapsed_ms:.1f}ms")
    return serialize_documents(documents)
