# backend/routers/futures_options.py
"""
Futures Options Router
======================

Returns the processed_futures_options collection in full.
"""

from fastapi import APIRouter, Depends

from backend.dependencies import get_store
from backend.services.query_service import fetch_documents
from core.database import DocumentStore, queries

router = APIRouter()


@router.get("/futuresOptions")
def futures_options(store: DocumentStore = Depends(get_store)):
    return fetch_documents(store, queries.all_futures_options(), "Error fetching futures options")
