# backend/main.py
"""
FastAPI Main Application
========================

Entry point for the trade journal query API.
Serves read-only lookups over trade journeys, orders and futures options.

Run with:
    uvicorn backend.main:app --reload --port 5000

Or use run_backend.py.
"""

from backend.app import create_app

app = create_app()
