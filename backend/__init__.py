# backend/__init__.py
"""
FastAPI Backend for the Trade Journal API
=========================================

Provides read-only REST endpoints for:
- Trade journeys by opening date or related order
- Orders by execution date or order ID
- Processed futures options

Run with: python run_backend.py
"""

__version__ = "1.0.0"
