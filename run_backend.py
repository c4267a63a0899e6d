#!/usr/bin/env python
# run_backend.py
"""
FastAPI Backend Launcher
========================

Run this script to start the trade journal API.

Usage:
    python run_backend.py              # Default: HOST/PORT from settings (127.0.0.1:5000)
    python run_backend.py --port 8080  # Custom port
    python run_backend.py --host 0.0.0.0  # Allow external access
    python run_backend.py --reload     # Auto-reload on code changes

Requires TRADEDB_URI in the environment (or in a .env file).
"""

import argparse

import uvicorn

from config.settings import get_settings


def main(argv=None):
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Start the trade journal API server")
    parser.add_argument("--host", default=settings.host, help=f"Host to bind to (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Port to bind to (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload on code changes")
    parser.add_argument("--workers", type=int, default=1, help="Number of worker processes")
    parser.add_argument("--log-level", default=settings.log_level.lower(),
                        choices=["debug", "info", "warning", "error"])

    args = parser.parse_args(argv)

    print(f"""
================================================================
          Trade Journal API
================================================================
  Server:     http://{args.host}:{args.port}
  API Docs:   http://{args.host}:{args.port}/docs
  Health:     http://{args.host}:{args.port}/health
================================================================
    """)

    uvicorn.run(
        "backend.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers if not args.reload else 1,
        log_level=args.log_level,
        access_log=True
    )


if __name__ == "__main__":
    main()
