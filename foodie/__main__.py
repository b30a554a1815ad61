"""
Run the API server.

Usage:
    python -m foodie [--host 0.0.0.0] [--port 5000] [--reload]
"""
from __future__ import annotations

import argparse

import uvicorn

from .config import DEFAULT_CONFIG, configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Foodie Finder API server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=5000)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    configure_logging()
    uvicorn.run(
        "foodie.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=DEFAULT_CONFIG.log_level.lower(),
    )


if __name__ == "__main__":
    main()
